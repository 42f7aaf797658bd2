import re
from typing import List

from ats_scorer.helpers.rules import REQUIRED_SECTIONS
from ats_scorer.utils.utils import round_half_up

_SECTION_PATTERNS = {
    section: re.compile(rf"\b{section}\b|{section}s?\s*:", re.IGNORECASE)
    for section in REQUIRED_SECTIONS
}


def find_sections(resume_text: str) -> List[str]:
    """Required sections mentioned in the resume, in vocabulary order"""
    return [s for s in REQUIRED_SECTIONS if _SECTION_PATTERNS[s].search(resume_text)]


def completeness_score(resume_text: str) -> float:
    found = find_sections(resume_text)
    return round_half_up(len(found) / len(REQUIRED_SECTIONS) * 100, 2)
