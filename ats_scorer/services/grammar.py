"""
Rule-based grammar/style analyzer.

Scans the resume line by line (blank lines skipped) and reports issues with
line context. Every detected issue is deducted from the score, while only
the first ``max_issues`` are returned for display.
"""
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List

from ats_scorer.helpers.rules import (
    BULLET_PATTERN,
    GRAMMAR_RULES,
    SECTION_HEADING_PATTERN,
    SEVERITY_PENALTIES,
)
from ats_scorer.models.report import GrammarReport, Issue, IssueType, Severity
from ats_scorer.models.settings import GrammarSettings
from ats_scorer.utils.logging_config import get_logger
from ats_scorer.utils.result import Result
from ats_scorer.utils.utils import round_half_up

logger = get_logger(__name__)

_NON_WORD = re.compile(r"[^\w]")
_CAPITALIZED = re.compile(r"^[A-Z]")


def _truncate(text: str, length: int) -> str:
    return text[:length] + ("..." if len(text) > length else "")


@dataclass
class IssueTally:
    """Running deduction over all detected issues plus the capped display list"""
    limit: int = 15
    issues: List[Issue] = field(default_factory=list)
    deduction: int = 0
    detected: int = 0

    def record(self, issue: Issue) -> None:
        self.detected += 1
        self.deduction += SEVERITY_PENALTIES[Severity(issue.severity)]
        if len(self.issues) < self.limit:
            self.issues.append(issue)

    @property
    def score(self) -> float:
        return round_half_up(max(0, 100 - self.deduction), 2)

    def report(self) -> GrammarReport:
        return GrammarReport(score=self.score, issues=list(self.issues), total_issues=self.detected)


def _check_capitalization(line: str, location: str, tally: IssueTally) -> None:
    if BULLET_PATTERN.match(line) or _CAPITALIZED.match(line):
        return
    tally.record(Issue(
        message="Sentence should start with a capital letter",
        type=IssueType.PUNCTUATION,
        severity=Severity.MEDIUM,
        context=_truncate(line, 60),
        location=location,
        example=line[:30],
    ))


def _check_patterns(line: str, location: str, tally: IssueTally) -> None:
    for rule in GRAMMAR_RULES:
        for match in rule.pattern.finditer(line):
            tally.record(Issue(
                message=rule.message,
                type=rule.type,
                severity=rule.severity,
                context=_truncate(line, 80),
                location=location,
                example=match.group(0),
            ))


def _check_repetition(line: str, location: str, tally: IssueTally) -> None:
    counts = Counter()
    for word in line.lower().split():
        clean = _NON_WORD.sub("", word)
        if len(clean) > 3:
            counts[clean] += 1

    for word, count in counts.items():
        if count > 2:
            tally.record(Issue(
                message=f'Word "{word}" is repeated too many times in the same sentence',
                type=IssueType.STYLE,
                severity=Severity.LOW,
                context=_truncate(line, 60),
                location=location,
                example=word,
            ))


def _scan(resume_text: str, max_issues: int) -> GrammarReport:
    tally = IssueTally(limit=max_issues)
    lines = [line.strip() for line in resume_text.split("\n") if line.strip()]

    for number, line in enumerate(lines, start=1):
        location = f"Line {number}"
        _check_capitalization(line, location, tally)
        _check_patterns(line, location, tally)
        _check_repetition(line, location, tally)

    if not any(SECTION_HEADING_PATTERN.match(line) for line in lines):
        # medium severity: two points off even when the display list is full
        tally.record(Issue(
            message="Missing clear section headings (Education, Experience, Skills, etc.)",
            type=IssueType.FORMATTING,
            severity=Severity.MEDIUM,
            context="Consider adding clear section headings",
            location="Overall structure",
            example="EDUCATION, EXPERIENCE, SKILLS",
        ))

    return tally.report()


def scan_grammar(resume_text: str, settings: GrammarSettings = None) -> Result[GrammarReport]:
    settings = settings or GrammarSettings()
    return Result.capture("grammar", _scan, resume_text, settings.max_issues)


def fallback_report(settings: GrammarSettings = None) -> GrammarReport:
    settings = settings or GrammarSettings()
    return GrammarReport(
        score=settings.fallback_score,
        issues=[Issue(
            message="Grammar check encountered an error",
            type=IssueType.SYSTEM,
            severity=Severity.LOW,
            context="Please try again or check your resume format",
            location="Unknown",
            example="",
        )],
        total_issues=1,
    )


def analyze_grammar(resume_text: str, settings: GrammarSettings = None) -> GrammarReport:
    """Grammar sub-score and issues; never raises, failures yield the fallback report"""
    result = scan_grammar(resume_text, settings)
    if not result.ok:
        logger.error(f"Grammar check error: {result.error.message}", exc_info=result.error.cause)
        return fallback_report(settings)
    logger.debug(f"Grammar score: {result.value.score} ({result.value.total_issues} issues)")
    return result.value
