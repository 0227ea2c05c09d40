"""
Lexical candidate extraction.

Runs every extraction pass over a text buffer and folds the results into one
deduplicated candidate list. Order follows first appearance (pass order, then
position), which keeps downstream tie-breaks deterministic.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .candidate_filter import CandidateFilter
from .extraction_passes import ExtractionPass, default_passes

logger = logging.getLogger(__name__)


class CandidateExtractor:
    """
    Pulls capitalisation-pattern phrases and acronyms out of raw text.

    Example:
        >>> extractor = CandidateExtractor()
        >>> "Secretary of State" in extractor.extract("she served as Secretary of State.")
        True
    """

    def __init__(
        self,
        passes: Optional[Sequence[ExtractionPass]] = None,
        candidate_filter: Optional[CandidateFilter] = None,
    ):
        self.passes: List[ExtractionPass] = list(passes) if passes is not None else default_passes()
        self.candidate_filter = candidate_filter or CandidateFilter()

    def extract(self, text: str) -> List[str]:
        """
        Extract candidate phrases from text.

        Args:
            text: Plain-text buffer

        Returns:
            Deduplicated candidate phrases, in first-seen order
        """
        seen: Dict[str, None] = {}

        for extraction_pass in self.passes:
            before = len(seen)
            for phrase in extraction_pass.candidates(text, self.candidate_filter):
                seen.setdefault(phrase, None)
            logger.debug(f"{extraction_pass.name}: +{len(seen) - before} candidates")

        return list(seen)

    def extract_by_pass(self, text: str) -> Dict[str, List[str]]:
        """Run each pass in isolation; useful when tuning a single pattern."""
        return {
            extraction_pass.name: list(dict.fromkeys(
                extraction_pass.candidates(text, self.candidate_filter)
            ))
            for extraction_pass in self.passes
        }
