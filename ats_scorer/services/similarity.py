from typing import List

import numpy as np

from ats_scorer.models.report import TermVector
from ats_scorer.services.tfidf import build_term_vectors
from ats_scorer.utils.exceptions import AnalysisError
from ats_scorer.utils.logging_config import get_logger
from ats_scorer.utils.result import Result
from ats_scorer.utils.utils import round_half_up

logger = get_logger(__name__)


def _dense(vector: TermVector, terms: List[str]) -> np.ndarray:
    return np.array([vector.get(t, 0.0) for t in terms], dtype=np.float64)


def cosine_similarity(resume_vec: TermVector, jd_vec: TermVector) -> Result[float]:
    """Cosine similarity of two term vectors scaled to 0..100, or a failure for zero-magnitude input"""
    terms = sorted(set(resume_vec) | set(jd_vec))
    a = _dense(resume_vec, terms)
    b = _dense(jd_vec, terms)

    den = float(np.linalg.norm(a) * np.linalg.norm(b))
    if den == 0.0 or not np.isfinite(den):
        return Result.failure(AnalysisError("Zero-magnitude term vector", component="similarity"))

    cos = float(np.dot(a, b)) / den
    return Result.success(min(100.0, round_half_up(max(0.0, cos) * 100, 2)))


def similarity_score(resume_vec: TermVector, jd_vec: TermVector) -> float:
    return cosine_similarity(resume_vec, jd_vec).unwrap_or(0.0)


def tfidf_similarity_score(resume_text: str, jd_text: str) -> float:
    """Similarity sub-score (0..100) of the resume against the job description"""
    vectors = Result.capture("tfidf", build_term_vectors, resume_text, jd_text)
    if not vectors.ok:
        return vectors.unwrap_or(0.0)
    score = similarity_score(*vectors.value)
    logger.debug(f"Similarity score: {score}")
    return score
