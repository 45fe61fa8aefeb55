#!/usr/bin/env python3
"""
Deduplicator - Collapse duplicate and range-contained employment entries.

Resumes often restate a stint at summary and detail granularity, and the
fallback extractor matches the same range with several patterns. The longer
span within a company is authoritative.
"""
from typing import Dict, List, Tuple
from datetime import date
import logging

from etl.resume.models import EmploymentPeriod

logger = logging.getLogger(__name__)


def _has_title_and_company(period: EmploymentPeriod) -> bool:
    return bool(period.job_title) and bool(period.company)


def remove_exact_duplicates(periods: List[EmploymentPeriod]) -> List[EmploymentPeriod]:
    """
    Collapse entries sharing (start, end, title).

    When two entries share a key, the one with both title and company wins.
    """
    unique: Dict[Tuple[date, date, str], EmploymentPeriod] = {}

    for period in periods:
        key = (period.start_date, period.end_date, period.title_key)
        existing = unique.get(key)
        if existing is None:
            unique[key] = period
        elif not _has_title_and_company(existing) and _has_title_and_company(period):
            unique[key] = period

    return list(unique.values())


def remove_contained_periods(periods: List[EmploymentPeriod]) -> List[EmploymentPeriod]:
    """
    Within each company group, drop periods contained in another period.

    Groups are processed longest-first, so any container of a period is
    examined before it; identical intervals keep the first occurrence.
    """
    by_company: Dict[str, List[EmploymentPeriod]] = {}
    for period in periods:
        by_company.setdefault(period.company_key, []).append(period)

    deduplicated = []
    for company, company_periods in by_company.items():
        if len(company_periods) <= 1:
            deduplicated.extend(company_periods)
            continue

        ordered = sorted(
            company_periods,
            key=lambda p: (-p.duration_months, p.start_date, -p.end_date.toordinal())
        )

        kept: List[EmploymentPeriod] = []
        for current in ordered:
            if any(other.contains(current) for other in kept):
                logger.debug(
                    f"Dropping {current.start_date:%Y-%m}..{current.end_date:%Y-%m} "
                    f"contained in another '{company}' period"
                )
                continue
            kept.append(current)

        deduplicated.extend(kept)

    return deduplicated


def deduplicate_periods(periods: List[EmploymentPeriod]) -> List[EmploymentPeriod]:
    """Remove exact duplicates, then periods contained within the same company."""
    if len(periods) <= 1:
        return list(periods)

    unique = remove_exact_duplicates(periods)
    result = remove_contained_periods(unique)

    if len(result) < len(periods):
        logger.debug(f"Deduplicated {len(periods)} employment entries to {len(result)}")
    return result
