#!/usr/bin/env python3
"""
Date Parser - Normalize textual employment date ranges.

Recognized forms, in precedence order:
1. MM/YYYY - MM/YYYY | present | current
2. Month YYYY - Month YYYY | present | current
3. YYYY - YYYY | present | current (January of start year, December of end year)
4. from|between|since Month YYYY to|until|through|- Month YYYY | present | current

Each form is a DatePattern strategy; the parser tries them in order and the
first match wins for a given fragment.
"""
import re
import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Callable, Iterator, List, Optional, Tuple

from etl.resume.models import DateRange

logger = logging.getLogger(__name__)


MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7,
    "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

# Longest names first so "sept" wins over "sep" and "march" over "mar"
_MONTH = r"(?:" + "|".join(sorted(MONTHS, key=len, reverse=True)) + r")\.?"
_SEP = r"\s*(?:[-–—]+|to)?\s*"
_OPEN = r"(?P<open>present|current)"


class DateParseError(ValueError):
    """Raised when a fragment holds no recognizable, valid date range."""
    pass


def month_index(name: str) -> int:
    """Map a month name or abbreviation (any case, optional '.') to 1-12."""
    key = name.strip().lower().rstrip('.')
    if key not in MONTHS:
        raise DateParseError(f"Unknown month name: {name!r}")
    return MONTHS[key]


def _make_date(year: str, month: int) -> date:
    try:
        return date(int(year), month, 1)
    except ValueError as e:
        raise DateParseError(f"Invalid date {month}/{year}: {e}")


class DatePattern(ABC):
    """One recognized date-range form."""

    name: str = ""
    regex: re.Pattern

    def build(self, match: re.Match, today: date) -> DateRange:
        """Convert a regex match into a validated DateRange."""
        start = self.start_date(match)
        is_current = bool(match.group('open'))
        end = today if is_current else self.end_date(match)

        if start > end:
            raise DateParseError(
                f"Start {start:%Y-%m} is after end {end:%Y-%m} in {match.group(0)!r}"
            )
        return DateRange(start=start, end=end, matched_text=match.group(0), is_current=is_current)

    @abstractmethod
    def start_date(self, match: re.Match) -> date:
        pass

    @abstractmethod
    def end_date(self, match: re.Match) -> date:
        pass


class NumericMonthPattern(DatePattern):
    """05/2019 - 06/2021"""

    name = "numeric"
    regex = re.compile(
        r"\b(?P<sm>\d{1,2})/(?P<sy>\d{4})" + _SEP +
        r"(?:(?P<em>\d{1,2})/(?P<ey>\d{4})|" + _OPEN + r")\b",
        re.IGNORECASE
    )

    def start_date(self, match: re.Match) -> date:
        return _make_date(match.group('sy'), int(match.group('sm')))

    def end_date(self, match: re.Match) -> date:
        return _make_date(match.group('ey'), int(match.group('em')))


class MonthNamePattern(DatePattern):
    """March 2018 - December 2019"""

    name = "month_name"
    regex = re.compile(
        r"\b(?P<smon>" + _MONTH + r")\s+(?P<sy>\d{4})" + _SEP +
        r"(?:(?P<emon>" + _MONTH + r")\s+(?P<ey>\d{4})|" + _OPEN + r")\b",
        re.IGNORECASE
    )

    def start_date(self, match: re.Match) -> date:
        return _make_date(match.group('sy'), month_index(match.group('smon')))

    def end_date(self, match: re.Match) -> date:
        return _make_date(match.group('ey'), month_index(match.group('emon')))


class YearPattern(DatePattern):
    """2016 - 2019 (least precise)"""

    name = "year"
    regex = re.compile(
        r"\b(?P<sy>\d{4})" + _SEP + r"(?:(?P<ey>\d{4})|" + _OPEN + r")\b",
        re.IGNORECASE
    )

    def start_date(self, match: re.Match) -> date:
        return _make_date(match.group('sy'), 1)

    def end_date(self, match: re.Match) -> date:
        return _make_date(match.group('ey'), 12)


class SentencePattern(MonthNamePattern):
    """from March 2018 until June 2019"""

    name = "sentence"
    regex = re.compile(
        r"\b(?:from|between|since)\s+(?P<smon>" + _MONTH + r")\s+(?P<sy>\d{4})"
        r"\s*(?:to|until|through|[-–—])\s*"
        r"(?:(?P<emon>" + _MONTH + r")\s+(?P<ey>\d{4})|" + _OPEN + r")\b",
        re.IGNORECASE
    )


DEFAULT_PATTERNS: List[DatePattern] = [
    NumericMonthPattern(),
    MonthNamePattern(),
    YearPattern(),
    SentencePattern(),
]


class DateParser:
    """
    Parse free-text date ranges into DateRange objects.

    Args:
        patterns: Ordered pattern strategies (defaults to the four standard forms)
        today: Clock used to resolve "present"/"current"
    """

    def __init__(
        self,
        patterns: Optional[List[DatePattern]] = None,
        today: Optional[Callable[[], date]] = None
    ):
        self.patterns = patterns if patterns is not None else DEFAULT_PATTERNS
        self._today = today or date.today

    def parse(self, fragment: str) -> DateRange:
        """
        Parse a fragment using the first pattern that matches it.

        Raises:
            DateParseError: No pattern matches, or the matched range is invalid
        """
        for pattern in self.patterns:
            match = pattern.regex.search(fragment)
            if match:
                return pattern.build(match, self._today())

        raise DateParseError(f"No date range found in {fragment!r}")

    def scan(self, text: str) -> Iterator[Tuple[DateRange, int, int]]:
        """
        Yield every valid date range in text as (range, start_index, end_index).

        All patterns are applied in precedence order; invalid matches are
        skipped, and a match overlapping text already claimed by a
        higher-precedence pattern is ignored ("2019 - present" inside
        "July 2019 - present" is not a second range).
        """
        today = self._today()
        claimed: List[Tuple[int, int]] = []
        for pattern in self.patterns:
            for match in pattern.regex.finditer(text):
                start, end = match.span()
                if any(start < c_end and c_start < end for c_start, c_end in claimed):
                    continue
                try:
                    date_range = pattern.build(match, today)
                except DateParseError as e:
                    logger.debug(f"Skipping {pattern.name} match: {e}")
                    continue
                claimed.append((start, end))
                yield date_range, start, end
