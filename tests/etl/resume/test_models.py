#!/usr/bin/env python3
"""
Test Resume Models.

Tests the chronology dataclasses in etl/resume/models.py.
"""
import unittest
from datetime import date

from etl.resume import (
    ChronologyReport,
    DateRange,
    EmploymentPeriod,
    ProgressionResult,
)


class TestEmploymentPeriod(unittest.TestCase):
    """Test EmploymentPeriod dataclass."""

    def test_basic_creation(self):
        """Test creating a period with only dates."""
        period = EmploymentPeriod(start_date=date(2018, 3, 1), end_date=date(2019, 12, 1))

        self.assertIsNone(period.job_title)
        self.assertIsNone(period.company)
        self.assertEqual(period.original_text, "")
        self.assertEqual(period.duration_months, 21)

    def test_keys_normalized(self):
        period = EmploymentPeriod(date(2018, 1, 1), date(2019, 1, 1), "  Senior Engineer ", "ACME Corp")

        self.assertEqual(period.title_key, "senior engineer")
        self.assertEqual(period.company_key, "acme corp")

    def test_missing_keys_are_unknown(self):
        period = EmploymentPeriod(date(2018, 1, 1), date(2019, 1, 1))

        self.assertEqual(period.title_key, "unknown")
        self.assertEqual(period.company_key, "unknown")

    def test_contains(self):
        outer = EmploymentPeriod(date(2018, 1, 1), date(2019, 12, 1))
        inner = EmploymentPeriod(date(2018, 3, 1), date(2018, 6, 1))

        self.assertTrue(outer.contains(inner))
        self.assertTrue(outer.contains(outer))
        self.assertFalse(inner.contains(outer))

    def test_same_month_has_zero_duration(self):
        period = EmploymentPeriod(date(2020, 5, 1), date(2020, 5, 28))

        self.assertEqual(period.duration_months, 0)


class TestDateRange(unittest.TestCase):

    def test_duration(self):
        date_range = DateRange(date(2020, 1, 1), date(2024, 6, 15), "January 2020 - Present", True)

        self.assertEqual(date_range.duration_months, 53)
        self.assertTrue(date_range.is_current)


class TestReportModels(unittest.TestCase):

    def test_progression_defaults(self):
        result = ProgressionResult()

        self.assertFalse(result.has_progression)
        self.assertEqual(result.pattern, "Stable")
        self.assertFalse(result.frequent_changes)

    def test_frequent_changes_from_pattern(self):
        self.assertTrue(ProgressionResult(pattern="Upward, Frequent changes").frequent_changes)

    def test_total_years_formatting(self):
        self.assertEqual(ChronologyReport(total_experience_months=90).total_experience_years, "7.5")
        self.assertEqual(ChronologyReport(total_experience_months=7).total_experience_years, "0.6")
        self.assertEqual(ChronologyReport().total_experience_years, "0.0")


if __name__ == '__main__':
    unittest.main()
