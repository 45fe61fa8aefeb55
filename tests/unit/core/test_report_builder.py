"""
Unit tests for the console report.
"""
import unittest
from datetime import date

from core.config_loader import ScoreWeights, ScoringConfig
from core.report_builder import ReportBuilder
from core.scorer.models import ATSScoreResult, EducationProfile, SkillProficiency
from etl.resume.models import CareerGap, ChronologyReport, EmploymentPeriod, ProgressionResult


def make_chronology(pattern: str = "Upward", gaps=None, periods=None) -> ChronologyReport:
    periods = periods if periods is not None else [
        EmploymentPeriod(date(2020, 1, 1), date(2024, 6, 1), "Senior Developer", "TechCorp"),
        EmploymentPeriod(date(2016, 6, 1), date(2017, 7, 1), "Junior Developer"),
    ]
    return ChronologyReport(
        employment_periods=periods,
        total_experience_months=66,
        career_gaps=gaps or [],
        career_progression=ProgressionResult(
            has_progression=pattern.startswith("Upward"),
            pattern=pattern,
            average_job_duration=33.0,
        ),
    )


def make_result(final_score: float = 85.0, **overrides) -> ATSScoreResult:
    values = dict(
        final_score=final_score,
        semantic_similarity=90.0,
        skills_match=80.0,
        education_score=100.0,
        experience_score=100.0,
        soft_skills_score=100.0,
        jd_skills=["python", "rust"],
        resume_skills=["python"],
        matched_skills=["python"],
        missing_skills=["rust"],
        skill_proficiencies={"python": SkillProficiency("expert", ["Found \"expert\" near python mention"], 6)},
        jd_education=EducationProfile(True, ["bachelor"], True, ["computer science"]),
        resume_education=EducationProfile(True, ["bachelor"], True, ["computer science"]),
        required_experience_years=5,
        candidate_experience_years=6,
        chronology=make_chronology(),
    )
    values.update(overrides)
    return ATSScoreResult(**values)


class TestReportSections(unittest.TestCase):

    def test_score_section(self):
        lines = ReportBuilder.build_score_section(make_result(final_score=72.456))

        self.assertIn("Semantic Similarity (35%): 90.00%", lines)
        self.assertEqual(lines[-1], "OVERALL ATS SCORE: 72.46%")

    def test_skills_section(self):
        lines = ReportBuilder.build_skills_section(make_result())

        self.assertIn("Missing Technical Skills (consider adding these):", lines)
        self.assertIn("rust", lines)
        self.assertIn("  Expert: 1 (100%)", lines)
        self.assertIn("  Overall Proficiency Match: 100.00%", lines)

    def test_score_section_labels_follow_configured_weights(self):
        config = ScoringConfig(weights=ScoreWeights(semantic=0.5, keyword=0.05))

        lines = ReportBuilder.build_score_section(make_result(), config)

        self.assertIn("Semantic Similarity (50%): 90.00%", lines)
        self.assertIn("Keyword Match (5%): 0.00%", lines)
        self.assertIn("Education Requirements (10%): 100.00%", lines)

    def test_proficiency_match_uses_configured_credit(self):
        config = ScoringConfig(level_credit={"expert": 0.5, "intermediate": 0.3, "beginner": 0.1})

        lines = ReportBuilder.build_skills_section(make_result(), config)

        self.assertIn("  Overall Proficiency Match: 50.00%", lines)

    def test_skills_section_omitted_without_jd_skills(self):
        self.assertEqual(ReportBuilder.build_skills_section(make_result(jd_skills=[])), [])

    def test_weak_key_skills(self):
        result = make_result(
            skill_proficiencies={"python": SkillProficiency("beginner", ["basic knowledge"], -4)}
        )

        lines = ReportBuilder.build_skills_section(result)

        self.assertIn("  - python (currently at beginner level)", lines)

    def test_education_section_without_degrees(self):
        result = make_result(jd_education=EducationProfile(), resume_education=EducationProfile())

        lines = ReportBuilder.build_education_section(result)

        self.assertIn("No specific degree requirements mentioned.", lines)
        self.assertIn("No degree information found in resume.", lines)

    def test_experience_section(self):
        lines = ReportBuilder.build_experience_section(make_result(required_experience_years=0))

        self.assertIn("Required Years: Not specified", lines)
        self.assertIn("Candidate Years: 6 years", lines)


class TestChronologySection(unittest.TestCase):

    def test_history_listed_oldest_first(self):
        lines = ReportBuilder.build_chronology_section(make_chronology())

        self.assertIn("Total Calculated Experience: 5.5 years", lines)
        self.assertIn("Career Gaps: None identified", lines)
        self.assertIn("Career Progression: Upward", lines)
        self.assertIn("Average Job Duration: 2.8 years", lines)
        self.assertIn("  Position 1: Junior Developer", lines)
        self.assertIn("  Position 2: Senior Developer at TechCorp", lines)
        self.assertIn("    Duration: Jan 2020 to Jun 2024 (4.4 years)", lines)

    def test_gaps_listed(self):
        gap = CareerGap(date(2017, 7, 1), date(2020, 1, 1), 30)

        lines = ReportBuilder.build_chronology_section(make_chronology(gaps=[gap]))

        self.assertIn("Career Gaps: 1 gaps identified", lines)
        self.assertIn("  Gap 1: Jul 2017 to Jan 2020 (30 months)", lines)

    def test_unknown_position(self):
        periods = [EmploymentPeriod(date(2019, 1, 1), date(2020, 1, 1))]

        lines = ReportBuilder.build_chronology_section(make_chronology(periods=periods))

        self.assertIn("  Position 1: Unknown position", lines)


class TestFeedback(unittest.TestCase):

    def test_strong_match_lists_missing_skills(self):
        lines = ReportBuilder.build_feedback(make_result(final_score=85.0))

        self.assertIn("Strong match! Your resume is well-aligned with the job requirements.", lines)
        self.assertIn("- Add these missing skills to your resume: rust", lines)

    def test_good_match_targets_weak_areas(self):
        lines = ReportBuilder.build_feedback(make_result(final_score=70.0, education_score=50.0))

        self.assertIn("- Emphasize your educational background if applicable", lines)
        self.assertNotIn("- Focus on adding the missing technical skills", lines)

    def test_tiers(self):
        self.assertTrue(any(line.startswith("Moderate match") for line in ReportBuilder.build_feedback(make_result(55.0))))
        self.assertTrue(any(line.startswith("Low match") for line in ReportBuilder.build_feedback(make_result(20.0))))

    def test_career_suggestions(self):
        gap = CareerGap(date(2017, 7, 1), date(2020, 1, 1), 30)
        chronology = make_chronology(pattern="Varied, Frequent changes", gaps=[gap], periods=[
            EmploymentPeriod(date(2014, 1, 1), date(2014, 6, 1), "Lead"),
            EmploymentPeriod(date(2014, 6, 1), date(2015, 1, 1), "Engineer"),
            EmploymentPeriod(date(2015, 1, 1), date(2015, 6, 1), "Developer"),
        ])

        lines = ReportBuilder.build_career_suggestions(chronology)

        self.assertIn("- Consider addressing employment gaps in your resume or cover letter", lines)
        self.assertIn("- Your resume shows frequent job changes which some employers may view cautiously", lines)
        self.assertIn("- Your career path doesn't show clear progression in job titles/responsibilities", lines)

    def test_no_career_suggestions_for_steady_history(self):
        self.assertEqual(ReportBuilder.build_career_suggestions(make_chronology()), [])

    def test_proficiency_suggestions(self):
        weak = make_result(skill_proficiencies={"python": SkillProficiency("beginner", ["x"], -4)})

        self.assertIn("Proficiency Enhancement Suggestions:", ReportBuilder.build_proficiency_suggestions(weak))
        self.assertEqual(ReportBuilder.build_proficiency_suggestions(make_result()), [])

    def test_build_report_joins_sections(self):
        report = ReportBuilder.build_report(make_result())

        self.assertTrue(report.startswith("ATS ANALYSIS RESULTS"))
        self.assertIn("Career Chronology Analysis:", report)
        self.assertIn("FEEDBACK:", report)

    def test_build_report_passes_config_to_sections(self):
        config = ScoringConfig(weights=ScoreWeights(semantic=0.4, title=0.0))

        report = ReportBuilder.build_report(make_result(), config)

        self.assertIn("Semantic Similarity (40%): 90.00%", report)
        self.assertIn("Position Relevance (0%): 0.00%", report)


if __name__ == '__main__':
    unittest.main()
