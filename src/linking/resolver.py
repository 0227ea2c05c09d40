"""
Entity Resolver

Turns a text buffer into an ordered list of non-overlapping catalogue matches.

Algorithm:
    1. Normalise curly single quotes (catalogue titles use straight quotes)
    2. Extract candidates and intersect them with the catalogue
    3. Try confirmed phrases longest first, so "New York City" beats "New York"
    4. Anchor each phrase at its first word-boundary occurrence
    5. Reject occurrences that overlap an accepted span
    6. Reject occurrences flanked by another capitalised word (part of a larger name)
    7. Reject occurrences that open a sentence (capitalisation proves nothing there)
    8. Return accepted matches left to right

The same class also locates names discovered elsewhere (two-phase pipeline)
with a lighter rule set: overlap and sentence-start only.
"""

import re
import logging
from typing import Dict, Iterable, List, Optional

from .candidates import CandidateExtractor
from .catalogue import EntityCatalogue
from .diagnostics import DiagnosticTrace, RejectionReason
from .models import Match

logger = logging.getLogger(__name__)

_CURLY_SINGLE_QUOTES = str.maketrans({'‘': "'", '’': "'"})

SENTENCE_TERMINATORS = '.!?;'

# Capitalised token touching the end / start of a slice
_TRAILING_CAPS_WORD = re.compile(r"[A-Z][a-zA-Z'’\-]*$")
_LEADING_CAPS_WORD = re.compile(r"^[A-Z][a-zA-Z'’\-]*")


def normalise_curly_quotes(text: str) -> str:
    """Replace U+2018/U+2019 with a straight apostrophe. Length-preserving."""
    return text.translate(_CURLY_SINGLE_QUOTES)


def is_sentence_start(text: str, index: int) -> bool:
    """
    True if position `index` opens a sentence.

    That is: buffer start, only whitespace before it, or the previous
    non-whitespace character is one of . ! ? ;
    """
    if index == 0:
        return True
    i = index - 1
    while i >= 0 and text[i].isspace():
        i -= 1
    if i < 0:
        return True
    return text[i] in SENTENCE_TERMINATORS


def is_part_of_larger_phrase(text: str, start: int, end: int) -> bool:
    """
    True if [start, end) sits next to another capitalised word.

    Only looks across exactly one space on either side, so "Forum" inside
    "World Economic Forum" is caught but a hyphenated neighbour is not.
    """
    if start > 0 and text[start - 1] == ' ':
        if _TRAILING_CAPS_WORD.search(text[:start - 1]):
            return True
    if end < len(text) and text[end] == ' ':
        if _LEADING_CAPS_WORD.match(text[end + 1:]):
            return True
    return False


def _word_boundary_pattern(phrase: str) -> re.Pattern:
    return re.compile(r'\b' + re.escape(phrase) + r'\b')


class EntityResolver:
    """
    Matches catalogue titles inside plain text.

    Stateless apart from its configuration; safe to share between pages.

    Example:
        >>> resolver = EntityResolver(EntityCatalogue(["New York", "New York City"]))
        >>> [m.text for m in resolver.find_matches("he flew to New York City today.")]
        ['New York City']
    """

    def __init__(
        self,
        catalogue: EntityCatalogue,
        extractor: Optional[CandidateExtractor] = None,
    ):
        self.catalogue = catalogue
        self.extractor = extractor or CandidateExtractor()

    def find_matches(self, text: str, trace: Optional[DiagnosticTrace] = None) -> List[Match]:
        """
        Run the full pipeline on one text buffer.

        Args:
            text: Plain-text buffer
            trace: Optional diagnostic trace to record candidates and rejections into

        Returns:
            Non-overlapping matches sorted by position
        """
        normalised = normalise_curly_quotes(text)
        candidates = self.extractor.extract(normalised)

        if trace is not None:
            trace.add_candidates(candidates)

        confirmed: List[str] = []
        for candidate in candidates:
            if candidate in self.catalogue:
                confirmed.append(candidate)
            elif trace is not None:
                trace.reject(candidate, RejectionReason.NO_MATCH)

        # Longest first; sorted() is stable so equal lengths keep first-seen order
        confirmed = sorted(confirmed, key=len, reverse=True)

        accepted: List[Match] = []

        for phrase in confirmed:
            found = _word_boundary_pattern(phrase).search(normalised)
            if not found:
                continue

            start = found.start()
            end = start + len(phrase)

            if any(m.overlaps(start, end) for m in accepted):
                reason = RejectionReason.OVERLAP
            elif is_part_of_larger_phrase(normalised, start, end):
                reason = RejectionReason.PART_OF_LARGER
            elif is_sentence_start(normalised, start):
                reason = RejectionReason.SENTENCE_START
            else:
                accepted.append(Match(phrase, start))
                continue

            if trace is not None:
                trace.reject(phrase, reason)

        accepted.sort(key=lambda m: m.start)
        return accepted

    def find_known_matches(
        self,
        text: str,
        known_entities: Iterable[str],
        trace: Optional[DiagnosticTrace] = None,
    ) -> List[Match]:
        """
        Locate names that were already confirmed elsewhere.

        Finds every word-boundary occurrence of every name. Skips the
        extractor, the catalogue lookup, the skip-word/length filter and the
        part-of-larger-phrase check; keeps overlap and sentence-start rules.
        """
        normalised = normalise_curly_quotes(text)

        occurrences: List[Match] = []
        for name in known_entities:
            if not name.strip():
                continue
            for found in _word_boundary_pattern(name).finditer(normalised):
                occurrences.append(Match(name, found.start()))

        occurrences.sort(key=lambda m: len(m.text), reverse=True)

        accepted: List[Match] = []

        for occurrence in occurrences:
            if any(m.overlaps(occurrence.start, occurrence.end) for m in accepted):
                reason = RejectionReason.OVERLAP
            elif is_sentence_start(normalised, occurrence.start):
                reason = RejectionReason.SENTENCE_START
            else:
                accepted.append(occurrence)
                continue

            if trace is not None:
                trace.reject(occurrence.text, reason)

        accepted.sort(key=lambda m: m.start)
        return accepted

    def discover_entities(
        self,
        text: str,
        trace: Optional[DiagnosticTrace] = None,
    ) -> List[str]:
        """
        Distinct entity names accepted in a text, first-seen order.

        Positions are dropped; this is the discovery half of the two-phase
        pipeline.
        """
        names: Dict[str, None] = {}
        for match in self.find_matches(text, trace=trace):
            names.setdefault(match.text, None)
        if trace is not None:
            for name in names:
                trace.accept(name)
        logger.debug(f"Discovered {len(names)} entities in {len(text)} chars")
        return list(names)
