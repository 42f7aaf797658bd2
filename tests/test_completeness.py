from ats_scorer.services.completeness import completeness_score, find_sections


class TestCompletenessScore:
    """Test cases for required-section presence"""

    def test_empty_text(self):
        assert completeness_score("") == 0.0

    def test_all_sections_inline(self):
        assert completeness_score("education, experience, skills, projects, certifications, summary") == 100.0

    def test_case_insensitive_headings(self):
        assert find_sections("SKILLS:\nPython\nExperience\nAcme Corp") == ["experience", "skills"]

    def test_adding_a_section_adds_one_sixth(self):
        """Each newly present section raises the score by 100/6"""
        assert completeness_score("Education") == 16.67
        assert completeness_score("Education\nExperience") == 33.33
        assert completeness_score("Education\nExperience\nSkills") == 50.0

    def test_no_partial_credit(self):
        """Near-matches do not count"""
        assert completeness_score("skillset, educational, projector") == 0.0

    def test_sections_in_vocabulary_order(self):
        assert find_sections("Summary\nProjects\nEducation") == ["education", "projects", "summary"]
