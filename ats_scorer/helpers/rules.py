"""
Rule tables shared by the scorers.

Kept as plain module-level constants so every call sees the same stop words,
section vocabulary and grammar rules.
"""
import re
from typing import NamedTuple, Pattern

from ats_scorer.models.report import IssueType, Severity

REQUIRED_SECTIONS = ("education", "experience", "skills", "projects", "certifications", "summary")

# Function words dropped by the keyword extractor (articles, conjunctions,
# prepositions, pronouns, auxiliary and modal verbs)
STOP_WORDS = frozenset([
    "the", "and", "is", "in", "to", "of", "for", "with", "on", "at", "by",
    "this", "that", "are", "as", "be", "from", "or", "but", "not", "what",
    "all", "were", "when", "we", "there", "been", "if", "more", "an", "which",
    "you", "has", "their", "who", "its", "had", "will", "would", "should",
    "can", "could", "may", "might", "must", "shall", "about", "also", "have",
    "having", "do", "does", "did", "doing", "get", "got", "getting",
])

BULLET_PATTERN = re.compile(r"^[•\-*]\s")
CAPS_HEADING_PATTERN = re.compile(r"^[A-Z][A-Z\s]+:$")
DATE_RANGE_PATTERN = re.compile(
    r"\b(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?|Aug(?:ust)?"
    r"|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\s+\d{4}\b"
    r"|\b\d{4}\s*[-–]\s*\d{4}\b"
)
SECTION_HEADING_PATTERN = re.compile(
    r"^(EDUCATION|EXPERIENCE|SKILLS|PROJECTS|CERTIFICATIONS|SUMMARY):?$", re.IGNORECASE
)
SENTENCE_DELIMITER = re.compile(r"[.!?]")

SEVERITY_PENALTIES = {
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}


class GrammarRule(NamedTuple):
    pattern: Pattern
    message: str
    type: IssueType
    severity: Severity


# Evaluated in this order against every non-blank line
GRAMMAR_RULES = (
    GrammarRule(
        re.compile(r"\bi\s+is\b", re.IGNORECASE),
        "Use 'I am' instead of 'I is'",
        IssueType.GRAMMAR, Severity.HIGH,
    ),
    GrammarRule(
        re.compile(r"\b(your\s+you're|you're\s+your)\b", re.IGNORECASE),
        "Confusion between 'your' and 'you're'",
        IssueType.GRAMMAR, Severity.MEDIUM,
    ),
    GrammarRule(
        re.compile(r"\b(there\s+their|their\s+there|they're\s+their)\b", re.IGNORECASE),
        "Confusion between 'there', 'their', and 'they're'",
        IssueType.GRAMMAR, Severity.MEDIUM,
    ),
    GrammarRule(
        re.compile(r"\b(it's\s+its|its\s+it's)\b", re.IGNORECASE),
        "Confusion between 'its' (possessive) and 'it's' (it is)",
        IssueType.GRAMMAR, Severity.MEDIUM,
    ),
    GrammarRule(
        re.compile(r"\b(a|an)\s+[aeiou]", re.IGNORECASE),
        "Use 'an' before vowel sounds, 'a' before consonant sounds",
        IssueType.GRAMMAR, Severity.LOW,
    ),
    GrammarRule(
        re.compile(r"\b\w+ly\b", re.IGNORECASE),
        "Avoid excessive use of adverbs",
        IssueType.STYLE, Severity.LOW,
    ),
    GrammarRule(
        re.compile(r"\b(very|really|quite|extremely)\b", re.IGNORECASE),
        "Avoid weak modifiers - use stronger adjectives",
        IssueType.STYLE, Severity.LOW,
    ),
)
