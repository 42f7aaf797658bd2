from unittest.mock import patch

import pytest

from ats_scorer.models.report import Document, GrammarReport, KeywordMatch
from ats_scorer.models.settings import ScoreWeights, ScoringSettings
from ats_scorer.services.engine import aggregate, compute_total, overall_score, score_documents

RESUME = """John Doe
SUMMARY
Backend engineer focused on Python services and data pipelines.

EXPERIENCE:
- Acme Corp, Senior Engineer, Jan 2020 - present
- Built Python microservices on Kubernetes and AWS.
- Led a team of four engineers.

EDUCATION
BSc Computer Science, 2012 - 2016

SKILLS
Python, Django, PostgreSQL, Docker, Kubernetes
"""

JOB_DESCRIPTION = """We are hiring a backend engineer with strong Python experience.
You will build microservices, deploy them on Kubernetes, and manage PostgreSQL databases.
Experience with Terraform and Kafka is a plus."""


class TestComputeTotal:
    """Test cases for the weighted total"""

    def test_weighted_sum(self):
        assert compute_total(80, 70, 50, 60, 90) == 74.5

    def test_bounds(self):
        assert compute_total(100, 100, 100, 100, 100) == 100.0
        assert compute_total(0, 0, 0, 0, 0) == 0.0

    def test_reproducible(self):
        assert compute_total(12.34, 56, 66.67, 80, 91) == compute_total(12.34, 56, 66.67, 80, 91)

    def test_custom_weights(self):
        weights = ScoreWeights(similarity=1.0, readability=0.0, completeness=0.0, formatting=0.0, grammar=0.0)
        assert compute_total(42.5, 100, 100, 100, 100, weights) == 42.5


class TestAggregate:
    """Test cases for report assembly"""

    def test_report_fields(self):
        grammar = GrammarReport(score=90.0, issues=[], total_issues=0)
        keywords = KeywordMatch(matched_keywords=["python"], missing_keywords=["kafka"], keyword_match_percentage=50)

        report = aggregate(80, 70, 50, 60, grammar, keywords)

        assert report.total == 74.5
        assert report.grammar_score == 90.0
        assert report.matched_keywords == ["python"]
        assert report.missing_keywords == ["kafka"]
        assert report.keyword_match_percentage == 50


class TestOverallScore:
    """End-to-end scoring scenarios"""

    def test_both_documents_empty(self):
        report = overall_score("", "")

        assert report.similarity == 0.0
        assert report.readability == 50
        assert report.completeness == 0.0
        assert report.formatting == 60
        assert report.grammar_score == 98.0
        assert report.total == 38.0
        assert report.matched_keywords == []
        assert report.missing_keywords == []
        assert report.keyword_match_percentage == 0

    def test_single_lowercase_section_line(self):
        report = overall_score("education, experience, skills, projects, certifications, summary", "")

        assert report.completeness == 100.0
        assert report.formatting == 60
        assert len(report.grammar_issues) == 2
        assert report.grammar_score == 96.0

    def test_missing_job_keyword(self):
        jd = "Kubernetes " * 5 + "operators and clusters"
        report = overall_score("Python developer with Django", jd)

        assert "kubernetes" in report.missing_keywords
        assert "kubernetes" not in report.matched_keywords

    def test_identical_documents(self):
        assert overall_score(RESUME, RESUME).similarity == 100.0

    def test_realistic_resume(self):
        report = overall_score(RESUME, JOB_DESCRIPTION)

        assert 0.0 < report.similarity < 100.0
        assert report.completeness == pytest.approx(66.67)
        assert report.formatting == 100
        assert "python" in report.matched_keywords
        assert "terraform" in report.missing_keywords
        assert set(report.matched_keywords).isdisjoint(report.missing_keywords)
        assert 0.0 <= report.total <= 100.0

    def test_keyword_percentage_independent_of_display_caps(self):
        words = " ".join(f"skill{chr(97 + i)}{chr(97 + j)}" for i in range(6) for j in range(6))
        report = overall_score(words, words)

        assert len(report.matched_keywords) == 20
        assert report.keyword_match_percentage == 100

    @patch('ats_scorer.services.grammar._scan')
    def test_grammar_failure_does_not_abort(self, mock_scan):
        mock_scan.side_effect = RuntimeError("boom")

        report = overall_score(RESUME, JOB_DESCRIPTION)
        assert report.grammar_score == 85.0
        assert report.grammar_issues[0].type == "system"

    def test_score_documents(self):
        settings = ScoringSettings()
        by_doc = score_documents(Document(text=RESUME), Document(text=JOB_DESCRIPTION), settings)
        by_text = overall_score(RESUME, JOB_DESCRIPTION, settings)
        assert by_doc == by_text

    def test_serialized_lists_never_null(self):
        data = overall_score("", "").model_dump(mode="json")
        for key in ("grammar_issues", "matched_keywords", "missing_keywords"):
            assert isinstance(data[key], list)
