"""
Data types shared by the linking core.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Set


@dataclass(frozen=True)
class Match:
    """A catalogue phrase anchored to a position in one text buffer."""
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    def overlaps(self, start: int, end: int) -> bool:
        """Half-open interval intersection with [start, end)."""
        return self.start < end and start < self.end


@dataclass(frozen=True)
class LinkRecord:
    """One spliced hyperlink, kept for the caller's match log."""
    text: str
    url: str
    context: str


@dataclass(frozen=True)
class SkipOutcome:
    """
    Result of classifying one content node.

    An error while interrogating the node always carries skip=True; the
    error text is kept so callers can see why.
    """
    skip: bool
    reason: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def keep(cls) -> "SkipOutcome":
        return cls(skip=False)

    @classmethod
    def skipped(cls, reason: str) -> "SkipOutcome":
        return cls(skip=True, reason=reason)

    @classmethod
    def failed(cls, error: Exception) -> "SkipOutcome":
        return cls(skip=True, reason="error", error=f"{type(error).__name__}: {error}")


@dataclass
class OccurrenceLedger:
    """
    Page-scoped record of phrases already linked.

    Create one per page; it only ever grows.
    """
    _linked: Set[str] = field(default_factory=set)

    def __contains__(self, phrase: str) -> bool:
        return phrase in self._linked

    def __len__(self) -> int:
        return len(self._linked)

    def __iter__(self) -> Iterator[str]:
        return iter(self._linked)

    def add(self, phrase: str) -> None:
        self._linked.add(phrase)
