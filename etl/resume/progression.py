#!/usr/bin/env python3
"""
Progression Analyzer - Seniority trend and job-hopping detection.
"""
from typing import Dict, List, Optional
import logging

from core.config_loader import ChronologyConfig
from etl.resume.models import EmploymentPeriod, ProgressionResult

logger = logging.getLogger(__name__)


class ProgressionAnalyzer:
    """
    Infer career progression from a list of employment periods.

    Seniority is ranked by substring vocabulary: a title's level is the
    highest level of any term it contains ("senior lead engineer" ranks as
    lead), falling back to the default level when nothing matches.
    """

    def __init__(self, config: Optional[ChronologyConfig] = None):
        self.config = config or ChronologyConfig()

    @property
    def seniority_levels(self) -> Dict[str, int]:
        return self.config.seniority_levels

    def seniority_level(self, title: str) -> int:
        """Highest seniority level of any vocabulary term found in the title."""
        lower_title = title.lower()
        matches = [level for term, level in self.seniority_levels.items() if term in lower_title]
        return max(matches) if matches else self.config.default_seniority

    def is_job_hopping(self, periods: List[EmploymentPeriod]) -> bool:
        """Several short stints, absolutely or as a share of all jobs."""
        short_jobs = sum(1 for p in periods if p.duration_months < self.config.short_tenure_months)
        if short_jobs >= self.config.job_hopping_min_jobs:
            return True
        return (
            len(periods) >= self.config.job_hopping_min_jobs
            and short_jobs / len(periods) >= self.config.job_hopping_ratio
        )

    def analyze(self, periods: List[EmploymentPeriod]) -> ProgressionResult:
        if len(periods) <= 1:
            return ProgressionResult(
                has_progression=False,
                pattern="Insufficient data",
                average_job_duration=float(periods[0].duration_months) if periods else 0.0,
            )

        average_duration = sum(p.duration_months for p in periods) / len(periods)

        has_progression = False
        pattern = "Stable"

        titled = [p for p in periods if p.job_title and p.job_title.strip()]
        if len(titled) >= 2:
            levels = [self.seniority_level(p.job_title) for p in sorted(titled, key=lambda p: p.start_date)]

            increases = sum(1 for a, b in zip(levels, levels[1:]) if b > a)
            decreases = sum(1 for a, b in zip(levels, levels[1:]) if b < a)

            if increases > decreases:
                has_progression = True
                pattern = "Upward"
            elif decreases > increases:
                pattern = "Varied"

            logger.debug(f"Seniority levels {levels}: +{increases} / -{decreases}")

        if self.is_job_hopping(periods):
            pattern += ", Frequent changes"

        return ProgressionResult(
            has_progression=has_progression,
            pattern=pattern,
            average_job_duration=average_duration,
        )
