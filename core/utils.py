import re
import logging
from functools import lru_cache
from typing import Iterator, List, Pattern

logger = logging.getLogger(__name__)


@lru_cache(maxsize=2048)
def _term_pattern(term: str, whole_word: bool) -> Pattern:
    # Lookarounds instead of \b so terms like "c++", "c#" and "b.s." still bound correctly
    suffix = r"(?!\w)" if whole_word else ""
    return re.compile(r"(?<!\w)" + re.escape(term.lower()) + suffix)


class TermMatcher:
    """
    Pure logic for locating vocabulary terms in lower-cased text.

    Terms are matched at word boundaries so short entries ("r", "go", "ma")
    do not fire inside longer words. Stems ("adapt", "troubleshoot") can be
    matched with whole_word=False to accept any word starting with them.
    """

    @staticmethod
    def contains(text: str, term: str, whole_word: bool = True) -> bool:
        return _term_pattern(term, whole_word).search(text.lower()) is not None

    @staticmethod
    def positions(text: str, term: str, whole_word: bool = True) -> Iterator[int]:
        """Yield the start offset of every occurrence of term in text."""
        for match in _term_pattern(term, whole_word).finditer(text.lower()):
            yield match.start()

    @staticmethod
    def find_all(text: str, terms: List[str], whole_word: bool = True) -> List[str]:
        """Terms present in text, in vocabulary order, without duplicates."""
        lower_text = text.lower()
        found = []
        for term in terms:
            if term not in found and TermMatcher.contains(lower_text, term, whole_word):
                found.append(term)
        return found

    @staticmethod
    def window(text: str, start: int, end: int, size: int) -> str:
        """Slice of text extending size characters either side of [start, end)."""
        return text[max(0, start - size):min(len(text), end + size)]
