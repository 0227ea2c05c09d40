"""
Candidate Filter Module

Drops candidate phrases that are almost always false positives before they
ever reach the catalogue lookup.

Rules, by phrase shape:
1. Multi-word phrases (contain a space) always pass the length check
2. Single ALL-CAPS words need 3+ characters ("FBI" passes, "UK" does not)
3. Single mixed-case words need 4+ characters ("Gaza" passes, "Tim" does not)
4. Any phrase found in the deny-list is rejected regardless of shape
"""

import re
from typing import FrozenSet, Iterable, Optional

from .vocabulary import FILLER_WORDS, SKIP_WORDS

ALL_CAPS_PATTERN = re.compile(r'^[A-Z]+$')

MIN_ACRONYM_LENGTH = 3
MIN_WORD_LENGTH = 4


def meets_min_length(
    phrase: str,
    min_acronym_length: int = MIN_ACRONYM_LENGTH,
    min_word_length: int = MIN_WORD_LENGTH,
) -> bool:
    """
    Check the shape-dependent minimum length of a phrase.

    Examples:
        >>> meets_min_length("Barack Obama")
        True
        >>> meets_min_length("UK")
        False
        >>> meets_min_length("FBI")
        True
        >>> meets_min_length("Tim")
        False
    """
    if ' ' in phrase:
        return True
    if ALL_CAPS_PATTERN.match(phrase):
        return len(phrase) >= min_acronym_length
    return len(phrase) >= min_word_length


def is_skip_word(phrase: str, skip_words: Optional[Iterable[str]] = None) -> bool:
    """True if the phrase is on the deny-list."""
    words = SKIP_WORDS if skip_words is None else skip_words
    return phrase in words


_FILLER_ALT = "|".join(FILLER_WORDS)
_LEADING_FILLER = re.compile(r'^(?:' + _FILLER_ALT + r')\s+', re.IGNORECASE)
_TRAILING_FILLER = re.compile(r'\s+(?:' + _FILLER_ALT + r')$', re.IGNORECASE)


def trim_fillers(phrase: str) -> str:
    """
    Strip leading and trailing filler words, repeatedly.

    Examples:
        >>> trim_fillers("The United Nations")
        'United Nations'
        >>> trim_fillers("Secretary of State")
        'Secretary of State'
    """
    result = phrase
    while _LEADING_FILLER.search(result):
        result = _LEADING_FILLER.sub('', result, count=1)
    while _TRAILING_FILLER.search(result):
        result = _TRAILING_FILLER.sub('', result, count=1)
    return result


class CandidateFilter:
    """
    Skip-word and minimum-length gate applied to every extracted phrase.

    Holds configuration only; one instance can be shared across pages.
    """

    def __init__(
        self,
        skip_words: Optional[Iterable[str]] = None,
        min_acronym_length: int = MIN_ACRONYM_LENGTH,
        min_word_length: int = MIN_WORD_LENGTH,
    ):
        self.skip_words: FrozenSet[str] = frozenset(SKIP_WORDS if skip_words is None else skip_words)
        self.min_acronym_length = min_acronym_length
        self.min_word_length = min_word_length

    def passes(self, phrase: str) -> bool:
        """True if the phrase may become a candidate."""
        return self.rejection_reason(phrase) is None

    def rejection_reason(self, phrase: str) -> Optional[str]:
        """
        Explain why a phrase fails the filter.

        Returns:
            'too_short', 'skip_word', or None when the phrase passes
        """
        if not meets_min_length(phrase, self.min_acronym_length, self.min_word_length):
            return 'too_short'
        if phrase in self.skip_words:
            return 'skip_word'
        return None
