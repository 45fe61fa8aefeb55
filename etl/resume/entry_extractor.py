#!/usr/bin/env python3
"""
Entry Extractor - Find job entries in free-text resumes.

Two passes:
1. Structured lines in the work-experience section
   ("Title | Company | Dates", "Title at Company (Dates)", "Title, Company, Dates")
2. Fallback regex scan for date ranges, inferring title/company from the
   surrounding text

Extraction is best-effort: lines or matches that do not yield a valid date
range are dropped.
"""
import re
import logging
from typing import List, Optional

from core.config_loader import ChronologyConfig
from etl.resume.date_parser import DateParser, DateParseError
from etl.resume.models import EmploymentPeriod, DateRange

logger = logging.getLogger(__name__)


BULLET_PREFIXES = ('-', '•', '*')

STRUCTURED_FORMATS = [
    ('pipe', re.compile(r"^(.+?)\s*\|\s*(.+?)\s*\|\s*(.+)$")),
    ('at', re.compile(r"^(.+?)\s+at\s+(.+?)\s*\((.+?)\)$", re.IGNORECASE)),
    ('comma', re.compile(r"^(.+?),\s*(.+?),\s*(.+)$")),
]

_COMPANY_NAME = r"([A-Z][A-Za-z0-9&.,\- ]+?)"
_COMPANY_END = r"(?=\s+(?i:from|between|since|in)\b|[,.]|[ \t]*$)"

COMPANY_PATTERNS = [
    re.compile(r"\b(?i:at)\s+" + _COMPANY_NAME + _COMPANY_END, re.MULTILINE),
    re.compile(r"\b(?i:with|for)\s+" + _COMPANY_NAME + _COMPANY_END, re.MULTILINE),
    re.compile(r"\|\s*" + _COMPANY_NAME + r"\s*\|"),
]


class EntryExtractor:
    """
    Extract EmploymentPeriod entries from resume text.

    Args:
        config: Chronology configuration (headings, vocabulary, context window)
        date_parser: DateParser used for every date fragment
    """

    def __init__(self, config: Optional[ChronologyConfig] = None, date_parser: Optional[DateParser] = None):
        self.config = config or ChronologyConfig()
        self.date_parser = date_parser or DateParser()

        self._section_start = re.compile(
            r"^[ \t]*(?:" + "|".join(self.config.work_section_headings) + r")\b[^\n:]*:?",
            re.IGNORECASE | re.MULTILINE
        )
        self._section_end = re.compile(
            r"^[ \t]*(?:" + "|".join(self.config.section_end_headings) + r")\b",
            re.IGNORECASE | re.MULTILINE
        )
        self._education = re.compile(
            "|".join(re.escape(marker) for marker in self.config.education_markers),
            re.IGNORECASE
        )

    def find_work_section(self, text: str) -> Optional[str]:
        """Return the work-experience section body, or None if there is no heading."""
        start = self._section_start.search(text)
        if not start:
            return None

        end = self._section_end.search(text, start.end())
        return text[start.end():end.start() if end else len(text)]

    def extract(self, text: str) -> List[EmploymentPeriod]:
        """Extract employment periods, structured entries first."""
        section = self.find_work_section(text)

        entries = self.extract_structured(section) if section else []
        if entries:
            logger.debug(f"Extracted {len(entries)} structured employment entries")
            return entries

        entries = self.extract_unstructured(text, section)
        logger.debug(f"Extracted {len(entries)} employment entries from date patterns")
        return entries

    def extract_structured(self, section: str) -> List[EmploymentPeriod]:
        """Match each non-bullet line of the section against the structured formats."""
        entries = []

        for raw_line in section.split('\n'):
            line = raw_line.strip()
            if not line or line.startswith(BULLET_PREFIXES):
                continue

            for name, pattern in STRUCTURED_FORMATS:
                match = pattern.match(line)
                if not match:
                    continue

                title, company, date_fragment = (group.strip() for group in match.groups())
                try:
                    date_range = self.date_parser.parse(date_fragment)
                except DateParseError as e:
                    logger.debug(f"Dropping {name}-format line {line!r}: {e}")
                    continue

                entries.append(EmploymentPeriod(
                    start_date=date_range.start,
                    end_date=date_range.end,
                    job_title=title,
                    company=company,
                    original_text=line,
                    context=line,
                ))
                break

        return entries

    def extract_unstructured(self, text: str, section: Optional[str] = None) -> List[EmploymentPeriod]:
        """
        Scan for date ranges and infer title/company from the surrounding window.

        Searches the work section when one was found, the whole text otherwise.
        Matches near education vocabulary are skipped unless the work section
        was located.
        """
        search_text = section if section else text
        window = self.config.context_window
        entries = []

        for date_range, start, end in self.date_parser.scan(search_text):
            context = search_text[max(0, start - window):min(len(search_text), end + window)]

            if not section and self._education.search(context):
                logger.debug(f"Skipping education-related dates {date_range.matched_text!r}")
                continue

            entries.append(self._build_period(date_range, context))

        return entries

    def _build_period(self, date_range: DateRange, context: str) -> EmploymentPeriod:
        return EmploymentPeriod(
            start_date=date_range.start,
            end_date=date_range.end,
            job_title=self.infer_title(context),
            company=self.infer_company(context),
            original_text=date_range.matched_text,
            context=context,
        )

    def infer_title(self, context: str) -> Optional[str]:
        """First vocabulary job title found in the context."""
        lower_context = context.lower()
        for title in self.config.job_titles:
            if title in lower_context:
                return title
        return None

    def infer_company(self, context: str) -> Optional[str]:
        """First capitalized phrase after 'at', 'with'/'for', or between pipes."""
        for pattern in COMPANY_PATTERNS:
            match = pattern.search(context)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return None
