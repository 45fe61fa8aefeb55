#!/usr/bin/env python3
"""
Chronology Analyzer - Reconstruct employment history from resume text.

Pipeline:
1. EntryExtractor finds job entries (structured lines, else date patterns)
2. Deduplicator collapses duplicate and contained entries
3. Interval aggregation computes overlap-aware total experience and gaps
4. ProgressionAnalyzer infers seniority trend and job hopping

Never raises on noisy input: unparseable entries simply do not appear.
"""
import logging
from typing import Optional

from core.config_loader import ChronologyConfig
from etl.resume.date_parser import DateParser
from etl.resume.deduplicator import deduplicate_periods
from etl.resume.entry_extractor import EntryExtractor
from etl.resume.intervals import calculate_total_experience, identify_career_gaps
from etl.resume.models import ChronologyReport
from etl.resume.progression import ProgressionAnalyzer

logger = logging.getLogger(__name__)


class ChronologyAnalyzer:
    """Build a ChronologyReport from raw resume text."""

    def __init__(
        self,
        config: Optional[ChronologyConfig] = None,
        date_parser: Optional[DateParser] = None
    ):
        self.config = config or ChronologyConfig()
        self.extractor = EntryExtractor(self.config, date_parser)
        self.progression = ProgressionAnalyzer(self.config)

    def analyze(self, resume_text: str) -> ChronologyReport:
        entries = self.extractor.extract(resume_text)
        periods = sorted(deduplicate_periods(entries), key=lambda p: p.start_date)

        report = ChronologyReport(
            employment_periods=periods,
            total_experience_months=calculate_total_experience(periods),
            career_gaps=identify_career_gaps(periods, self.config.gap_threshold_months),
            career_progression=self.progression.analyze(periods),
        )

        logger.info(
            f"Reconstructed {len(periods)} employment periods: "
            f"{report.total_experience_years} years, {len(report.career_gaps)} gaps, "
            f"progression '{report.career_progression.pattern}'"
        )
        return report
