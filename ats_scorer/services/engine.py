"""
Resume/job-description scoring engine.

Pure and synchronous: every call builds its own vectors, counters and issue
lists, so it can run concurrently without coordination.
"""
from ats_scorer.models.report import Document, GrammarReport, KeywordMatch, ScoreReport
from ats_scorer.models.settings import ScoreWeights, ScoringSettings
from ats_scorer.services.completeness import completeness_score
from ats_scorer.services.formatting import formatting_score
from ats_scorer.services.grammar import analyze_grammar
from ats_scorer.services.keywords import match_keywords
from ats_scorer.services.readability import readability_score
from ats_scorer.services.similarity import tfidf_similarity_score
from ats_scorer.utils.logging_config import PerformanceMonitor, get_logger, log_function_call
from ats_scorer.utils.utils import clamp, round_half_up

logger = get_logger(__name__)


def compute_total(
    similarity: float,
    readability: float,
    completeness: float,
    formatting: float,
    grammar: float,
    weights: ScoreWeights = None,
) -> float:
    weights = weights or ScoreWeights()
    total = round_half_up(
        similarity * weights.similarity
        + readability * weights.readability
        + completeness * weights.completeness
        + formatting * weights.formatting
        + grammar * weights.grammar,
        2,
    )
    return clamp(total, 0.0, 100.0)


def aggregate(
    similarity: float,
    readability: float,
    completeness: float,
    formatting: float,
    grammar: GrammarReport,
    keywords: KeywordMatch,
    weights: ScoreWeights = None,
) -> ScoreReport:
    return ScoreReport(
        total=compute_total(similarity, readability, completeness, formatting, grammar.score, weights),
        similarity=similarity,
        readability=readability,
        completeness=completeness,
        formatting=formatting,
        grammar_score=grammar.score,
        grammar_issues=grammar.issues,
        matched_keywords=keywords.matched_keywords,
        missing_keywords=keywords.missing_keywords,
        keyword_match_percentage=keywords.keyword_match_percentage,
    )


@log_function_call
def overall_score(resume_text: str, jd_text: str, settings: ScoringSettings = None) -> ScoreReport:
    """Score a resume against a job description; always returns a complete report"""
    settings = settings or ScoringSettings()

    with PerformanceMonitor("overall_score", logger=logger):
        similarity = tfidf_similarity_score(resume_text, jd_text)
        readability = readability_score(resume_text)
        completeness = completeness_score(resume_text)
        formatting = formatting_score(resume_text)
        grammar = analyze_grammar(resume_text, settings.grammar)
        keywords = match_keywords(resume_text, jd_text, settings.keywords)

        logger.debug(
            f"Sub-scores - similarity: {similarity}, readability: {readability}, "
            f"completeness: {completeness}, formatting: {formatting}, grammar: {grammar.score}"
        )
        report = aggregate(similarity, readability, completeness, formatting, grammar, keywords, settings.weights)

    logger.info(f"Resume scored: total={report.total}, keyword match={report.keyword_match_percentage}%")
    return report


def score_documents(resume: Document, job_description: Document, settings: ScoringSettings = None) -> ScoreReport:
    return overall_score(resume.text, job_description.text, settings)
