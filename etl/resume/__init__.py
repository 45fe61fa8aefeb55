#!/usr/bin/env python3
"""
Resume Chronology Module - employment history reconstruction.

Handles:
- Loading resume / job description text from documents
- Date-range parsing and job entry extraction
- Deduplication, overlap-aware experience totals and gap detection
- Career progression analysis
"""
from etl.resume.models import (
    DateRange,
    EmploymentPeriod,
    CareerGap,
    ProgressionResult,
    ChronologyReport,
)
from etl.resume.date_parser import DateParser, DateParseError
from etl.resume.entry_extractor import EntryExtractor
from etl.resume.deduplicator import deduplicate_periods
from etl.resume.intervals import calculate_total_experience, identify_career_gaps
from etl.resume.progression import ProgressionAnalyzer
from etl.resume.chronology import ChronologyAnalyzer
from etl.resume.parser import ResumeParser, ParsedResume

__all__ = [
    'DateRange',
    'EmploymentPeriod',
    'CareerGap',
    'ProgressionResult',
    'ChronologyReport',
    'DateParser',
    'DateParseError',
    'EntryExtractor',
    'deduplicate_periods',
    'calculate_total_experience',
    'identify_career_gaps',
    'ProgressionAnalyzer',
    'ChronologyAnalyzer',
    'ResumeParser',
    'ParsedResume',
]
