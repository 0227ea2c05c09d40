"""
Two-phase discovery: find entities on clean text, link them in the real tree.

The article extract (boilerplate stripped) is the best text for deciding
*which* names are real entities, but links must go into the original markup
so navigation, ads and captions stay untouched. Phase 1 runs the full
resolver over the extract; phase 2 only re-locates the discovered names in
each text leaf. When the extract is unusable the linker falls back to running
the full resolver on every leaf.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from .diagnostics import DiagnosticTrace
from .injector import InjectionCoordinator, InjectionResult
from .resolver import EntityResolver

logger = logging.getLogger(__name__)

MODE_TWO_PHASE = "two-phase"
MODE_SINGLE_PHASE = "single-phase"


@dataclass(frozen=True)
class ArticleExtract:
    """What an article extractor hands back for one page."""
    text: Optional[str]
    title: Optional[str]
    is_suitable: bool


class ArticleExtractor(ABC):
    """Opaque readability-style extractor supplied by the host."""

    @abstractmethod
    def extract(self, markup: str, base_url: Optional[str] = None) -> ArticleExtract:
        """Return clean article text, or is_suitable=False"""


@dataclass
class LinkingResult:
    """Injection outcome plus what the discovery phase found."""
    injection: InjectionResult
    mode: str
    discovered: List[str] = field(default_factory=list)
    discovery_trace: Optional[DiagnosticTrace] = None
    article_title: Optional[str] = None

    @property
    def linked(self) -> int:
        return self.injection.linked


class TwoPhaseLinker:
    """
    Coordinates discovery on the article extract with injection into the tree.

    Example:
        >>> linker = TwoPhaseLinker(coordinator)
        >>> result = linker.link([body], ArticleExtract(text, "Title", True))
        >>> result.mode
        'two-phase'
    """

    def __init__(self, coordinator: InjectionCoordinator):
        self.coordinator = coordinator

    @property
    def resolver(self) -> EntityResolver:
        return self.coordinator.resolver

    def discover(
        self,
        article: ArticleExtract,
        debug: bool = False,
    ) -> Tuple[List[str], Optional[DiagnosticTrace]]:
        """
        Phase 1: distinct entity names in the article text.

        Returns:
            (names, trace) where trace is None unless debug is set
        """
        trace = DiagnosticTrace() if debug else None
        names = self.resolver.discover_entities(article.text or '', trace=trace)
        return names, trace

    def link(
        self,
        roots: Iterable[Any],
        article: Optional[ArticleExtract] = None,
        debug: bool = False,
    ) -> LinkingResult:
        """
        Link one page.

        Args:
            roots: Article-body containers in the original tree
            article: Extractor output for the same page; None or unsuitable
                means single-phase linking
            debug: Collect diagnostic traces

        Returns:
            LinkingResult
        """
        if article is None or not article.is_suitable or not article.text:
            logger.info("Article extract unsuitable, linking each text leaf directly")
            injection = self.coordinator.inject(roots, debug=debug)
            return LinkingResult(injection=injection, mode=MODE_SINGLE_PHASE)

        names, discovery_trace = self.discover(article, debug=debug)
        logger.info(f"Discovered {len(names)} entities in {len(article.text)} chars of \"{article.title}\"")

        injection = self.coordinator.inject(roots, known_entities=names, debug=debug)
        return LinkingResult(
            injection=injection,
            mode=MODE_TWO_PHASE,
            discovered=names,
            discovery_trace=discovery_trace,
            article_title=article.title,
        )
