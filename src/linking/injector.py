"""
Injection Coordinator

Walks an eligible content tree and wraps the first occurrence of each entity
name on the page in a hyperlink.

Rules:
- Article-body roots are entered unconditionally; every other element is
  asked to the skip-rule classifier first
- Text under an existing hyperlink is never linked
- Elements we created earlier (carrying the link class) are left alone
- Each distinct name is linked at most once per page, across all text leaves
- Text between matches is kept verbatim; escaping is the host's job

Hosts plug in through TreeAdapter, so the coordinator never touches a
concrete tree type.
"""

import logging
from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from .diagnostics import DiagnosticTrace, RejectionReason
from .models import LinkRecord, Match, OccurrenceLedger
from .resolver import EntityResolver
from .skip_rules import NodeInspector, SkipRuleClassifier
from .urls import extract_context, to_wiki_url

logger = logging.getLogger(__name__)

DEFAULT_LINK_CLASS = "wikilink"
MIN_TEXT_LENGTH = 3


@dataclass(frozen=True)
class LinkSegment:
    """A span of text to be wrapped in a hyperlink by the host."""
    text: str
    url: str
    title: str
    css_class: str = DEFAULT_LINK_CLASS


Segment = Union[str, LinkSegment]


class TreeAdapter(NodeInspector):
    """
    Host-side view of a content tree.

    Extends the classifier's NodeInspector with traversal and text
    replacement primitives.
    """

    @abstractmethod
    def children(self, node: Any) -> List[Any]:
        """Snapshot of the node's children, in document order"""

    @abstractmethod
    def is_element(self, node: Any) -> bool:
        """True for element nodes"""

    @abstractmethod
    def is_text(self, node: Any) -> bool:
        """True for plain text nodes (not comments, CDATA, doctypes)"""

    @abstractmethod
    def text_of(self, node: Any) -> str:
        """Unescaped text of a text node"""

    @abstractmethod
    def replace_text(self, node: Any, segments: Sequence[Segment]) -> None:
        """Replace a text node with plain text and link segments, in order"""


@dataclass
class InjectionResult:
    """Outcome of one injection run over a page."""
    linked: int = 0
    links: List[LinkRecord] = field(default_factory=list)
    trace: Optional[DiagnosticTrace] = None


class InjectionCoordinator:
    """
    Links entity mentions in a content tree.

    Example:
        >>> coordinator = InjectionCoordinator(resolver, SoupTreeAdapter(soup))
        >>> result = coordinator.inject([article], debug=True)
        >>> result.linked
        2
    """

    def __init__(
        self,
        resolver: EntityResolver,
        adapter: TreeAdapter,
        classifier: Optional[SkipRuleClassifier] = None,
        url_builder: Callable[[str], str] = to_wiki_url,
        link_class: str = DEFAULT_LINK_CLASS,
        min_text_length: int = MIN_TEXT_LENGTH,
    ):
        self.resolver = resolver
        self.adapter = adapter
        self.classifier = classifier or SkipRuleClassifier(adapter)
        self.url_builder = url_builder
        self.link_class = link_class
        self.min_text_length = min_text_length

    def inject(
        self,
        roots: Iterable[Any],
        known_entities: Optional[Iterable[str]] = None,
        debug: bool = False,
        ledger: Optional[OccurrenceLedger] = None,
        inside_article: bool = True,
    ) -> InjectionResult:
        """
        Link entities under each root, in document order.

        Args:
            roots: Article-body containers; the tree is modified in place
            known_entities: Names discovered on a cleaner view of the page.
                When given, leaves are only searched for these names.
            debug: Record a DiagnosticTrace
            ledger: Page-scoped ledger; a fresh one is created when omitted
            inside_article: Roots are article bodies (list items and table
                cells beneath them are eligible)

        Returns:
            InjectionResult with the number of distinct names linked
        """
        ledger = ledger if ledger is not None else OccurrenceLedger()
        trace = DiagnosticTrace() if debug else None
        known = list(known_entities) if known_entities is not None else None
        links: List[LinkRecord] = []

        for root in roots:
            self._walk(root, ledger, links, trace, known, inside_article)

        logger.debug(f"Linked {len(links)} entities")
        return InjectionResult(linked=len(links), links=links, trace=trace)

    def _walk(
        self,
        root: Any,
        ledger: OccurrenceLedger,
        links: List[LinkRecord],
        trace: Optional[DiagnosticTrace],
        known: Optional[List[str]],
        inside_article: bool,
    ) -> None:
        # (node, inside_link, is_root); children pushed reversed to keep document order
        stack = [(root, False, True)]

        while stack:
            node, inside_link, is_root = stack.pop()

            if self.adapter.is_text(node):
                if not inside_link:
                    self._link_text(node, ledger, links, trace, known)
                continue

            if not self.adapter.is_element(node):
                continue

            if self.classifier.classify(node, is_root=is_root, inside_article=inside_article).skip:
                continue

            if self.link_class in self.adapter.class_string(node).split():
                continue

            now_inside_link = inside_link or (self.adapter.tag_name(node) or '').upper() == 'A'

            for child in reversed(self.adapter.children(node)):
                stack.append((child, now_inside_link, False))

    def _find(self, text: str, known: Optional[List[str]], trace: Optional[DiagnosticTrace]) -> List[Match]:
        if known is not None:
            return self.resolver.find_known_matches(text, known, trace=trace)
        return self.resolver.find_matches(text, trace=trace)

    def _link_text(
        self,
        node: Any,
        ledger: OccurrenceLedger,
        links: List[LinkRecord],
        trace: Optional[DiagnosticTrace],
        known: Optional[List[str]],
    ) -> None:
        text = self.adapter.text_of(node)
        if len(text.strip()) < self.min_text_length:
            return

        matches = self._find(text, known, trace)
        logger.debug(f"{len(matches)} matches in {len(text)}-char leaf")
        if not matches:
            return

        segments: List[Segment] = []
        last_index = 0

        for match in matches:
            if match.text in ledger:
                if trace is not None:
                    trace.reject(match.text, RejectionReason.ALREADY_LINKED)
                continue

            if match.start > last_index:
                segments.append(text[last_index:match.start])

            url = self.url_builder(match.text)
            segments.append(LinkSegment(
                text=text[match.start:match.end],
                url=url,
                title=match.text,
                css_class=self.link_class,
            ))
            last_index = match.end
            ledger.add(match.text)

            links.append(LinkRecord(
                text=match.text,
                url=url,
                context=extract_context(text, match.start, len(match.text)),
            ))
            if trace is not None:
                trace.accept(match.text)

        if not any(isinstance(segment, LinkSegment) for segment in segments):
            return

        if last_index < len(text):
            segments.append(text[last_index:])

        self.adapter.replace_text(node, segments)
