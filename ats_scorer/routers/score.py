from fastapi import APIRouter, Depends

from ats_scorer.models.report import Document, GrammarReport, KeywordMatch, ScoreReport
from ats_scorer.models.requests import ScoreRequest, TextRequest
from ats_scorer.models.settings import ScoringSettings
from ats_scorer.services.engine import score_documents
from ats_scorer.services.grammar import analyze_grammar
from ats_scorer.services.keywords import match_keywords
from ats_scorer.utils.config import get_settings
from ats_scorer.utils.exceptions import ValidationError
from ats_scorer.utils.logging_config import get_logger

router = APIRouter()
logger = get_logger(__name__)


def _check_length(field: str, text: str, settings: ScoringSettings) -> None:
    if len(text) > settings.max_document_chars:
        raise ValidationError(
            f"{field} exceeds {settings.max_document_chars} characters",
            field=field,
            value=len(text),
        )


@router.post("", response_model=ScoreReport)
async def score_resume(payload: ScoreRequest, settings: ScoringSettings = Depends(get_settings)):
    """Score a resume against a job description"""
    _check_length("resume_text", payload.resume_text, settings)
    _check_length("job_description", payload.job_description, settings)
    return score_documents(Document(text=payload.resume_text), Document(text=payload.job_description), settings)


@router.post("/grammar", response_model=GrammarReport)
async def check_grammar(payload: TextRequest, settings: ScoringSettings = Depends(get_settings)):
    """Run only the grammar/style analyzer"""
    _check_length("text", payload.text, settings)
    return analyze_grammar(payload.text, settings.grammar)


@router.post("/keywords", response_model=KeywordMatch)
async def compare_keywords(payload: ScoreRequest, settings: ScoringSettings = Depends(get_settings)):
    """Matched and missing job-description keywords"""
    _check_length("resume_text", payload.resume_text, settings)
    _check_length("job_description", payload.job_description, settings)
    return match_keywords(payload.resume_text, payload.job_description, settings.keywords)


@router.get("/settings", response_model=ScoringSettings)
async def active_settings(settings: ScoringSettings = Depends(get_settings)):
    """Scoring configuration currently in effect"""
    logger.debug("Settings endpoint accessed")
    return settings
