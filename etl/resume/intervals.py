#!/usr/bin/env python3
"""
Interval Aggregator - Total experience and career gaps.

Concurrent jobs are merged so overlapping months count once.
"""
from typing import List
import logging

from etl.resume.models import EmploymentPeriod, CareerGap, months_between

logger = logging.getLogger(__name__)


def calculate_total_experience(periods: List[EmploymentPeriod]) -> int:
    """
    Total non-overlapping experience in months.

    Walks periods by start date keeping the furthest end seen so far:
    a disjoint period adds its full duration, an overlapping one adds only
    the tail beyond the current end, a contained one adds nothing.
    """
    if not periods:
        return 0

    ordered = sorted(periods, key=lambda p: p.start_date)

    total_months = 0
    current_end = ordered[0].start_date

    for period in ordered:
        if period.start_date > current_end:
            total_months += period.duration_months
            current_end = period.end_date
        elif period.end_date > current_end:
            total_months += months_between(current_end, period.end_date)
            current_end = period.end_date

    return total_months


def identify_career_gaps(periods: List[EmploymentPeriod], threshold_months: int = 3) -> List[CareerGap]:
    """
    Gaps of at least threshold_months between consecutive periods.

    Periods are ordered by end date; each gap runs from one period's end
    to the next period's start.
    """
    if len(periods) <= 1:
        return []

    ordered = sorted(periods, key=lambda p: p.end_date)

    gaps = []
    for previous, following in zip(ordered, ordered[1:]):
        gap_months = months_between(previous.end_date, following.start_date)
        if gap_months >= threshold_months:
            gaps.append(CareerGap(
                start_date=previous.end_date,
                end_date=following.start_date,
                duration_months=gap_months,
            ))

    return gaps
