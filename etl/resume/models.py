#!/usr/bin/env python3
"""
Resume Models - Data structures for employment chronology reconstruction.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from datetime import date
from dateutil.relativedelta import relativedelta

import logging
logger = logging.getLogger(__name__)


def months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end, ignoring the day of month.

    Negative when end falls in an earlier month than start.
    """
    diff = relativedelta(end.replace(day=1), start.replace(day=1))
    return diff.years * 12 + diff.months


@dataclass
class DateRange:
    """A normalized start/end pair produced by the DateParser."""
    start: date
    end: date
    matched_text: str = ""
    is_current: bool = False

    @property
    def duration_months(self) -> int:
        return months_between(self.start, self.end)


@dataclass
class EmploymentPeriod:
    """One inferred job stint."""
    start_date: date
    end_date: date
    job_title: Optional[str] = None
    company: Optional[str] = None
    original_text: str = ""
    context: str = ""

    @property
    def duration_months(self) -> int:
        return max(0, months_between(self.start_date, self.end_date))

    @property
    def title_key(self) -> str:
        """Lower-cased title used for matching, 'unknown' when absent."""
        return self.job_title.strip().lower() if self.job_title else "unknown"

    @property
    def company_key(self) -> str:
        """Lower-cased company used for grouping, 'unknown' when absent."""
        return self.company.strip().lower() if self.company else "unknown"

    def contains(self, other: "EmploymentPeriod") -> bool:
        """True if other's interval lies within this period's interval."""
        return other.start_date >= self.start_date and other.end_date <= self.end_date


@dataclass
class CareerGap:
    """Span between the end of one period and the start of the next."""
    start_date: date
    end_date: date
    duration_months: int


@dataclass
class ProgressionResult:
    """Career progression summary."""
    has_progression: bool = False
    pattern: str = "Stable"
    average_job_duration: float = 0.0

    @property
    def frequent_changes(self) -> bool:
        return "Frequent changes" in self.pattern


@dataclass
class ChronologyReport:
    """Aggregate output of the chronology pipeline."""
    employment_periods: List[EmploymentPeriod] = field(default_factory=list)
    total_experience_months: int = 0
    career_gaps: List[CareerGap] = field(default_factory=list)
    career_progression: ProgressionResult = field(default_factory=ProgressionResult)

    @property
    def total_experience_years(self) -> str:
        """Total experience in years, formatted with one decimal."""
        return f"{self.total_experience_months / 12:.1f}"
