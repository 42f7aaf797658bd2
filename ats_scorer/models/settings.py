"""
Scoring Settings Models
"""
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoreWeights(BaseModel):
    """Weights of each sub-score in the total"""
    model_config = ConfigDict(frozen=True)

    similarity: float = Field(default=0.35, ge=0.0, le=1.0, description="Weight for TF-IDF similarity")
    readability: float = Field(default=0.15, ge=0.0, le=1.0, description="Weight for readability")
    completeness: float = Field(default=0.15, ge=0.0, le=1.0, description="Weight for section completeness")
    formatting: float = Field(default=0.10, ge=0.0, le=1.0, description="Weight for formatting")
    grammar: float = Field(default=0.25, ge=0.0, le=1.0, description="Weight for grammar/style")

    @model_validator(mode="after")
    def validate_total_weights(self):
        total = self.similarity + self.readability + self.completeness + self.formatting + self.grammar
        if abs(total - 1.0) > 0.01:  # Allow small floating point errors
            raise ValueError("Score weights must sum to 1.0")
        return self


class KeywordSettings(BaseModel):
    """Keyword extraction and match-report limits"""
    model_config = ConfigDict(frozen=True)

    jd_top_n: int = Field(default=30, ge=1, description="Keywords extracted from the job description")
    resume_top_n: int = Field(default=50, ge=1, description="Keywords extracted from the resume")
    matched_limit: int = Field(default=20, ge=0, description="Matched keywords shown in the report")
    missing_limit: int = Field(default=15, ge=0, description="Missing keywords shown in the report")
    min_token_length: int = Field(default=4, ge=1, description="Shortest token kept as a keyword")


class GrammarSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_issues: int = Field(default=15, ge=0, description="Issues returned to the caller")
    fallback_score: float = Field(default=85.0, ge=0.0, le=100.0, description="Score used when the analyzer fails")


class ScoringSettings(BaseModel):
    """Complete scoring engine configuration"""
    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    keywords: KeywordSettings = Field(default_factory=KeywordSettings)
    grammar: GrammarSettings = Field(default_factory=GrammarSettings)
    max_document_chars: int = Field(default=100_000, ge=1, description="Largest text accepted by the API")
