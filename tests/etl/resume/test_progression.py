#!/usr/bin/env python3
"""
Test Progression Analyzer.

Tests seniority ranking, progression trend and job-hopping detection.
"""
import unittest
from datetime import date

from core.config_loader import ChronologyConfig
from etl.resume.models import EmploymentPeriod
from etl.resume.progression import ProgressionAnalyzer


def period(start, end, title=None, company=None) -> EmploymentPeriod:
    return EmploymentPeriod(start_date=start, end_date=end, job_title=title, company=company)


class TestSeniorityLevel(unittest.TestCase):
    """Test seniority_level ranking."""

    def setUp(self):
        self.analyzer = ProgressionAnalyzer()

    def test_known_levels(self):
        self.assertEqual(self.analyzer.seniority_level("Junior Developer"), 1)
        self.assertEqual(self.analyzer.seniority_level("Senior Developer"), 3)
        self.assertEqual(self.analyzer.seniority_level("VP Engineering"), 7)

    def test_default_when_no_term_matches(self):
        self.assertEqual(self.analyzer.seniority_level("Developer"), 2)

    def test_highest_matching_term_wins(self):
        self.assertEqual(self.analyzer.seniority_level("Senior Lead Engineer"), 4)
        self.assertEqual(self.analyzer.seniority_level("Engineering Manager"), 5)

    def test_custom_table(self):
        config = ChronologyConfig(seniority_levels={"staff": 9}, default_seniority=0)
        analyzer = ProgressionAnalyzer(config)

        self.assertEqual(analyzer.seniority_level("Staff Engineer"), 9)
        self.assertEqual(analyzer.seniority_level("Senior Engineer"), 0)


class TestProgressionAnalysis(unittest.TestCase):
    """Test analyze() trend and job hopping."""

    def setUp(self):
        self.analyzer = ProgressionAnalyzer()

    def test_upward_progression(self):
        """Junior Developer -> Developer -> Senior Developer is Upward."""
        periods = [
            period(date(2020, 1, 1), date(2023, 1, 1), "Senior Developer"),
            period(date(2016, 1, 1), date(2018, 1, 1), "Junior Developer"),
            period(date(2018, 1, 1), date(2020, 1, 1), "Developer"),
        ]

        result = self.analyzer.analyze(periods)

        self.assertTrue(result.has_progression)
        self.assertEqual(result.pattern, "Upward")
        self.assertAlmostEqual(result.average_job_duration, (24 + 24 + 36) / 3)

    def test_varied_progression(self):
        periods = [
            period(date(2014, 1, 1), date(2017, 1, 1), "Lead Engineer"),
            period(date(2017, 1, 1), date(2020, 1, 1), "Senior Engineer"),
            period(date(2020, 1, 1), date(2023, 1, 1), "Engineer"),
        ]

        result = self.analyzer.analyze(periods)

        self.assertFalse(result.has_progression)
        self.assertEqual(result.pattern, "Varied")

    def test_stable_when_titles_unchanged(self):
        periods = [
            period(date(2014, 1, 1), date(2017, 1, 1), "Engineer"),
            period(date(2017, 1, 1), date(2020, 1, 1), "Engineer"),
        ]

        result = self.analyzer.analyze(periods)

        self.assertEqual(result.pattern, "Stable")
        self.assertFalse(result.has_progression)

    def test_trend_needs_two_titled_periods(self):
        periods = [
            period(date(2014, 1, 1), date(2017, 1, 1), "Junior Engineer"),
            period(date(2017, 1, 1), date(2020, 1, 1)),
        ]

        result = self.analyzer.analyze(periods)

        self.assertEqual(result.pattern, "Stable")
        self.assertAlmostEqual(result.average_job_duration, 36.0)

    def test_four_six_month_jobs_flag_frequent_changes(self):
        periods = [
            period(date(2020, 1, 1), date(2020, 7, 1), "Developer"),
            period(date(2020, 7, 1), date(2021, 1, 1), "Developer"),
            period(date(2021, 1, 1), date(2021, 7, 1), "Developer"),
            period(date(2021, 7, 1), date(2022, 1, 1), "Developer"),
        ]

        result = self.analyzer.analyze(periods)

        self.assertEqual(result.pattern, "Stable, Frequent changes")
        self.assertTrue(result.frequent_changes)
        self.assertAlmostEqual(result.average_job_duration, 6.0)

    def test_frequent_changes_suffix_keeps_trend(self):
        periods = [
            period(date(2020, 1, 1), date(2020, 7, 1), "Junior Developer"),
            period(date(2020, 7, 1), date(2021, 1, 1), "Developer"),
            period(date(2021, 1, 1), date(2021, 7, 1), "Senior Developer"),
        ]

        result = self.analyzer.analyze(periods)

        self.assertEqual(result.pattern, "Upward, Frequent changes")

    def test_short_share_rule(self):
        """Two of four jobs short is not enough absolutely, but meets the 50% share."""
        periods = [
            period(date(2010, 1, 1), date(2013, 1, 1)),
            period(date(2013, 1, 1), date(2016, 1, 1)),
            period(date(2016, 1, 1), date(2016, 6, 1)),
            period(date(2016, 6, 1), date(2016, 11, 1)),
        ]

        self.assertTrue(self.analyzer.is_job_hopping(periods))

    def test_long_tenures_not_job_hopping(self):
        periods = [
            period(date(2010, 1, 1), date(2013, 1, 1)),
            period(date(2013, 1, 1), date(2016, 1, 1)),
            period(date(2016, 1, 1), date(2016, 6, 1)),
        ]

        self.assertFalse(self.analyzer.is_job_hopping(periods))

    def test_insufficient_data(self):
        result = self.analyzer.analyze([period(date(2018, 1, 1), date(2019, 1, 1), "Engineer")])

        self.assertEqual(result.pattern, "Insufficient data")
        self.assertFalse(result.has_progression)
        self.assertAlmostEqual(result.average_job_duration, 12.0)

        empty = self.analyzer.analyze([])
        self.assertEqual(empty.pattern, "Insufficient data")
        self.assertEqual(empty.average_job_duration, 0.0)


if __name__ == '__main__':
    unittest.main()
