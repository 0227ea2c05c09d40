"""
Optional per-page diagnostic trace.

The trace only records; nothing in the matching path reads it back, so
turning diagnostics on or off never changes which phrases get linked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Set


class RejectionReason(str, Enum):
    NO_MATCH = "no-match"
    OVERLAP = "overlap"
    PART_OF_LARGER = "part-of-larger"
    SENTENCE_START = "sentence-start"
    ALREADY_LINKED = "already-linked"


@dataclass
class DiagnosticTrace:
    """Candidates considered, matches accepted and every rejection with its reason."""

    candidates: List[str] = field(default_factory=list)
    matched: List[str] = field(default_factory=list)
    rejected: Dict[RejectionReason, List[str]] = field(
        default_factory=lambda: {reason: [] for reason in RejectionReason}
    )
    _seen: Set[str] = field(default_factory=set, init=False, repr=False)

    def add_candidates(self, phrases: Iterable[str]) -> None:
        for phrase in phrases:
            if phrase not in self._seen:
                self._seen.add(phrase)
                self.candidates.append(phrase)

    def accept(self, phrase: str) -> None:
        self.matched.append(phrase)

    def reject(self, phrase: str, reason: RejectionReason) -> None:
        self.rejected[reason].append(phrase)

    def rejections(self, reason: RejectionReason) -> List[str]:
        return list(self.rejected[reason])

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view for JSON responses."""
        return {
            'candidates': list(self.candidates),
            'matched': list(self.matched),
            'skipped_no_match': list(dict.fromkeys(self.rejected[RejectionReason.NO_MATCH])),
            'skipped_overlap': list(self.rejected[RejectionReason.OVERLAP]),
            'skipped_part_of_larger': list(self.rejected[RejectionReason.PART_OF_LARGER]),
            'skipped_sentence_start': list(self.rejected[RejectionReason.SENTENCE_START]),
            'skipped_already_linked': list(self.rejected[RejectionReason.ALREADY_LINKED]),
        }
