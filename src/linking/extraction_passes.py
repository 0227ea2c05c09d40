"""
Extraction passes for candidate phrases.

Each pass is a small self-contained strategy that scans a text buffer with
one capitalisation pattern. The CandidateExtractor runs them in order and
folds the results into a single deduplicated candidate list.

Available passes:
-----------------
- GreedyPass: capitalised words bridged by filler words ("President of the United States")
- FrugalPass: consecutive capitalised words only ("Amnesty International")
- SingleWordPass: one capitalised word ("Google")
- AcronymPass: 2-6 uppercase letters ("NATO")
"""

import re
from abc import ABC, abstractmethod
from typing import Iterator, List, Pattern

from .candidate_filter import CandidateFilter, trim_fillers
from .vocabulary import CAPS_WORD, FILLER


class ExtractionPass(ABC):
    """
    Abstract base class for one extraction strategy.

    Subclasses declare a name and a compiled pattern whose first group is
    the phrase. Passes hold no per-call state.
    """

    name: str = "BasePass"
    description: str = "Base extraction pass"

    @property
    @abstractmethod
    def pattern(self) -> Pattern:
        """Compiled pattern; group 1 is the phrase"""

    def phrases(self, text: str) -> Iterator[str]:
        """Yield every raw phrase the pattern finds, left to right."""
        for match in self.pattern.finditer(text):
            yield match.group(1).strip()

    def candidates(self, text: str, candidate_filter: CandidateFilter) -> Iterator[str]:
        """Yield the phrases that survive the skip-word and length filter."""
        for phrase in self.phrases(text):
            if candidate_filter.passes(phrase):
                yield phrase

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class GreedyPass(ExtractionPass):
    """
    Multi-word phrases that may bridge filler words.

    Needs at least two capitalised words. Every accepted phrase also offers
    its filler-trimmed form ("The United Nations" -> "United Nations") when
    that differs and passes the filter on its own.
    """

    name = "greedy"
    description = "Capitalised words bridged by of/and/in/on/under/the/for"

    _PATTERN = re.compile(
        r'\b(' + CAPS_WORD + r'(?:\s+(?:' + FILLER + r'|' + CAPS_WORD + r'))*\s+' + CAPS_WORD + r')\b'
    )

    @property
    def pattern(self) -> Pattern:
        return self._PATTERN

    def candidates(self, text: str, candidate_filter: CandidateFilter) -> Iterator[str]:
        for phrase in self.phrases(text):
            if not candidate_filter.passes(phrase):
                continue
            yield phrase

            trimmed = trim_fillers(phrase)
            if trimmed != phrase and candidate_filter.passes(trimmed):
                yield trimmed


class FrugalPass(ExtractionPass):
    """Two or more consecutive capitalised words, never bridging fillers."""

    name = "frugal"
    description = "Consecutive capitalised words"

    _PATTERN = re.compile(r'\b(' + CAPS_WORD + r'(?:\s+' + CAPS_WORD + r')+)\b')

    @property
    def pattern(self) -> Pattern:
        return self._PATTERN


class SingleWordPass(ExtractionPass):
    name = "single_word"
    description = "One capitalised word"

    _PATTERN = re.compile(r'\b(' + CAPS_WORD + r')\b')

    @property
    def pattern(self) -> Pattern:
        return self._PATTERN


class AcronymPass(ExtractionPass):
    name = "acronym"
    description = "All-caps acronym of 2-6 letters"

    _PATTERN = re.compile(r'\b([A-Z]{2,6})\b')

    @property
    def pattern(self) -> Pattern:
        return self._PATTERN


def default_passes() -> List[ExtractionPass]:
    """The four passes in their canonical order."""
    return [GreedyPass(), FrugalPass(), SingleWordPass(), AcronymPass()]
