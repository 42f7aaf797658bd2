"""TF-IDF term vectors over the two-document corpus {resume, job description}."""
import re
from typing import List, Tuple

from sklearn.feature_extraction.text import TfidfVectorizer

from ats_scorer.models.report import TermVector

# Maximal alphanumeric runs; underscores count as delimiters
TERM_PATTERN = r"(?u)[^\W_]+"
_TERM_RE = re.compile(TERM_PATTERN)


def tokenize_terms(text: str) -> List[str]:
    return _TERM_RE.findall(text.lower())


def build_term_vectors(resume_text: str, jd_text: str) -> Tuple[TermVector, TermVector]:
    """
    Return (resume_vector, jd_vector).

    Weights are raw term frequency times the smoothed idf
    ``ln((1 + N) / (1 + df)) + 1`` with N = 2, so a term found in only one
    document outweighs a shared term of equal frequency. Each vector only
    holds the terms of its own document; an empty document gives ``{}``.
    """
    if not tokenize_terms(resume_text) and not tokenize_terms(jd_text):
        return {}, {}

    vectorizer = TfidfVectorizer(
        lowercase=True,
        token_pattern=TERM_PATTERN,
        norm=None,
        smooth_idf=True,
    )
    matrix = vectorizer.fit_transform([resume_text, jd_text])
    terms = vectorizer.get_feature_names_out()

    vectors = []
    for row in range(2):
        doc = matrix[row].tocoo()
        vectors.append({str(terms[col]): float(weight) for col, weight in zip(doc.col, doc.data)})
    return vectors[0], vectors[1]
