"""Frequency-ranked keyword extraction and JD/resume keyword matching."""
import re
from collections import Counter
from typing import List

from ats_scorer.helpers.rules import STOP_WORDS
from ats_scorer.models.report import KeywordMatch
from ats_scorer.models.settings import KeywordSettings
from ats_scorer.utils.utils import round_half_up

_TOKEN_SPLIT = re.compile(r"[^\w]+")
_NON_WORD = re.compile(r"[^\w]")
_DIGIT = re.compile(r"\d")


def extract_keywords(text: str, top_n: int = 25, min_length: int = 4) -> List[str]:
    """
    Return up to ``top_n`` lowercase keywords, most frequent first.

    Tokens shorter than ``min_length``, tokens holding a digit and stop words
    are dropped. Ties keep first-occurrence order.
    """
    freq = Counter()
    for token in _TOKEN_SPLIT.split(text.lower()):
        clean = _NON_WORD.sub("", token)
        if len(clean) >= min_length and clean not in STOP_WORDS and not _DIGIT.search(clean):
            freq[clean] += 1

    # most_common sorts stably, so equal counts stay in insertion order
    return [term for term, _ in freq.most_common(top_n)]


def match_keywords(resume_text: str, jd_text: str, settings: KeywordSettings = None) -> KeywordMatch:
    """
    Classify each JD keyword as matched or missing.

    A keyword matches when the resume's own keyword list has it or when it
    occurs anywhere in the resume text (case-insensitive substring). The
    percentage is computed on the full lists before the display caps apply.
    """
    settings = settings or KeywordSettings()
    jd_keywords = extract_keywords(jd_text, settings.jd_top_n, settings.min_token_length)
    resume_keywords = extract_keywords(resume_text, settings.resume_top_n, settings.min_token_length)

    resume_set = set(resume_keywords)
    resume_lower = resume_text.lower()
    matched = [kw for kw in jd_keywords if kw in resume_set or kw in resume_lower]
    matched_set = set(matched)
    missing = [kw for kw in jd_keywords if kw not in matched_set]

    return KeywordMatch(
        jd_keywords=jd_keywords,
        resume_keywords=resume_keywords,
        matched_keywords=matched[:settings.matched_limit],
        missing_keywords=missing[:settings.missing_limit],
        keyword_match_percentage=round_half_up(len(matched) / max(1, len(jd_keywords)) * 100),
    )
