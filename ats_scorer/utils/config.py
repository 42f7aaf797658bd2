import os
from typing import Callable

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from ats_scorer.models.settings import GrammarSettings, KeywordSettings, ScoreWeights, ScoringSettings
from ats_scorer.utils.exceptions import ConfigurationError

load_dotenv()


def _env(key: str, default, cast: Callable):
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {key}", config_key=key, config_value=raw, cause=e) from e


def get_settings() -> ScoringSettings:
    """Build scoring settings from defaults overridden by environment variables"""
    weights = ScoreWeights()
    keywords = KeywordSettings()

    try:
        return ScoringSettings(
            weights=ScoreWeights(
                similarity=_env("SCORE_WEIGHT_SIMILARITY", weights.similarity, float),
                readability=_env("SCORE_WEIGHT_READABILITY", weights.readability, float),
                completeness=_env("SCORE_WEIGHT_COMPLETENESS", weights.completeness, float),
                formatting=_env("SCORE_WEIGHT_FORMATTING", weights.formatting, float),
                grammar=_env("SCORE_WEIGHT_GRAMMAR", weights.grammar, float),
            ),
            keywords=KeywordSettings(
                jd_top_n=_env("JD_KEYWORD_LIMIT", keywords.jd_top_n, int),
                resume_top_n=_env("RESUME_KEYWORD_LIMIT", keywords.resume_top_n, int),
            ),
            grammar=GrammarSettings(
                max_issues=_env("MAX_GRAMMAR_ISSUES", GrammarSettings().max_issues, int),
            ),
            max_document_chars=_env("MAX_DOCUMENT_CHARS", 100_000, int),
        )
    except PydanticValidationError as e:
        raise ConfigurationError("Invalid scoring configuration", details={"errors": str(e)}, cause=e) from e
