from ats_scorer.helpers.rules import SENTENCE_DELIMITER
from ats_scorer.utils.utils import clamp, round_half_up

IDEAL_SENTENCE_WORDS = 18
LONG_SENTENCE_WORDS = 25
LONG_SENTENCE_RATIO = 0.30
LONG_SENTENCE_PENALTY = 15
NEUTRAL_SCORE = 50.0


def readability_score(resume_text: str) -> float:
    """
    Sentence-length heuristic, rounded to an integer.

    Scores 100 at an average of 18 words per sentence and loses 3 points per
    word of deviation (floor 30). Text where more than 30% of sentences run
    past 25 words loses another 15. Text with no sentences scores 50.
    """
    sentences = [s for s in SENTENCE_DELIMITER.split(resume_text) if s.strip()]
    if not sentences:
        return NEUTRAL_SCORE

    words = resume_text.split()
    avg_words = len(words) / len(sentences)
    long_sentences = sum(1 for s in sentences if len(s.split()) > LONG_SENTENCE_WORDS)

    score = clamp(100 - abs(avg_words - IDEAL_SENTENCE_WORDS) * 3, 30, 100)
    if long_sentences / len(sentences) > LONG_SENTENCE_RATIO:
        score -= LONG_SENTENCE_PENALTY

    return round_half_up(score)
