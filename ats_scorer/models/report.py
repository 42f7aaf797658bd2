from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Normalized term -> tf-idf weight for one document
TermVector = Dict[str, float]


class IssueType(str, Enum):
    """Categories reported by the grammar/style analyzer"""
    GRAMMAR = "grammar"
    PUNCTUATION = "punctuation"
    STYLE = "style"
    FORMATTING = "formatting"
    SYSTEM = "system"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Document(BaseModel):
    """Plain-text input document (resume or job description)"""
    model_config = ConfigDict(frozen=True)

    text: str = ""


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=True)

    message: str
    type: IssueType
    severity: Severity
    context: str = ""
    location: str = ""
    example: str = ""


class GrammarReport(BaseModel):
    score: float = Field(ge=0.0, le=100.0)
    issues: List[Issue] = Field(default_factory=list)
    total_issues: int = Field(default=0, ge=0, description="Every detected issue, including ones past the display cap")


class KeywordMatch(BaseModel):
    jd_keywords: List[str] = Field(default_factory=list)
    resume_keywords: List[str] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    keyword_match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)


class ScoreReport(BaseModel):
    """Final scoring output handed to the reporting/persistence layer"""
    total: float = Field(ge=0.0, le=100.0)
    similarity: float = Field(ge=0.0, le=100.0)
    readability: float = Field(ge=0.0, le=100.0)
    completeness: float = Field(ge=0.0, le=100.0)
    formatting: float = Field(ge=0.0, le=100.0)
    grammar_score: float = Field(ge=0.0, le=100.0)
    grammar_issues: List[Issue] = Field(default_factory=list)
    matched_keywords: List[str] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    keyword_match_percentage: float = Field(default=0.0, ge=0.0, le=100.0)
