from typing import Dict

from ats_scorer.helpers.rules import BULLET_PATTERN, CAPS_HEADING_PATTERN, DATE_RANGE_PATTERN

BASE_SCORE = 60.0
SIGNAL_BONUS = 10.0
SUBSTANTIAL_LENGTH = 300


def formatting_signals(resume_text: str) -> Dict[str, bool]:
    lines = [line.strip() for line in resume_text.split("\n")]
    return {
        "bullets": any(BULLET_PATTERN.match(line) for line in lines),
        "headings": any(CAPS_HEADING_PATTERN.match(line) for line in lines),
        "dates": DATE_RANGE_PATTERN.search(resume_text) is not None,
        "length": len(resume_text) > SUBSTANTIAL_LENGTH,
    }


def formatting_score(resume_text: str) -> float:
    """Base 60 plus 10 per structural signal present, capped at 100"""
    signals = formatting_signals(resume_text)
    return min(100.0, BASE_SCORE + SIGNAL_BONUS * sum(signals.values()))
