"""
Server-side host: link entities inside a BeautifulSoup-parsed HTML page.

SoupTreeAdapter teaches the linking core how to read and rewrite a
BeautifulSoup tree. HtmlLinker is the whole-page entry point: parse, pick the
article-body roots, optionally extract the article for two-phase discovery,
inject links, serialise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString, Script, Stylesheet, TemplateString
from soupsieve import SelectorSyntaxError

from ..linking.discovery import ArticleExtractor, LinkingResult, TwoPhaseLinker
from ..linking.injector import (
    DEFAULT_LINK_CLASS,
    MIN_TEXT_LENGTH,
    InjectionCoordinator,
    LinkSegment,
    Segment,
    TreeAdapter,
)
from ..linking.resolver import EntityResolver
from ..linking.urls import to_wiki_url
from .sites import SiteRegistry

logger = logging.getLogger(__name__)

DEFAULT_ARTICLE_SELECTOR = "article, main, body"

# Strings that are markup, not prose
_NON_PROSE_STRINGS = (PreformattedString, Script, Stylesheet, TemplateString)


class SoupTreeAdapter(TreeAdapter):
    """TreeAdapter over a BeautifulSoup document."""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    def tag_name(self, node: Any) -> Optional[str]:
        return node.name if isinstance(node, Tag) else None

    def class_string(self, node: Any) -> str:
        if not isinstance(node, Tag):
            return ''
        value = node.get('class')
        if value is None:
            return ''
        if isinstance(value, (list, tuple)):
            return ' '.join(value)
        return str(value)

    def matches_closest(self, node: Any, selector: str) -> bool:
        return node.css.closest(selector) is not None

    def children(self, node: Any) -> List[Any]:
        return list(node.children) if isinstance(node, Tag) else []

    def is_element(self, node: Any) -> bool:
        return isinstance(node, Tag)

    def is_text(self, node: Any) -> bool:
        return isinstance(node, NavigableString) and not isinstance(node, _NON_PROSE_STRINGS)

    def text_of(self, node: Any) -> str:
        return str(node)

    def replace_text(self, node: Any, segments: Sequence[Segment]) -> None:
        replacements = []
        for segment in segments:
            if isinstance(segment, LinkSegment):
                link = self.soup.new_tag('a', attrs={
                    'href': segment.url,
                    'class': segment.css_class,
                    'title': segment.title,
                })
                link.string = segment.text
                replacements.append(link)
            elif segment:
                replacements.append(NavigableString(segment))
        node.replace_with(*replacements)


@dataclass
class HtmlLinkResult:
    """Linked page markup plus the linking details."""
    html: str
    result: LinkingResult
    selector: str

    @property
    def linked(self) -> int:
        return self.result.linked


def select_roots(soup: BeautifulSoup, selector: Optional[str]) -> List[Tag]:
    """
    Article-body roots for a comma-separated selector list.

    Selectors are tried in order and the first one with any match wins.
    Falls back to <body>, then to the whole document.
    """
    if selector:
        for candidate in (part.strip() for part in selector.split(',')):
            if not candidate:
                continue
            try:
                elements = soup.select(candidate)
            except SelectorSyntaxError as e:
                logger.warning(f"Ignoring invalid article selector '{candidate}': {e}")
                continue
            if elements:
                return elements

    body = soup.find('body')
    return [body] if body is not None else [soup]


class HtmlLinker:
    """
    Links entities in raw HTML pages.

    Shares the resolver (and its catalogue) across calls; every call gets
    its own parse tree, coordinator and ledger.

    Example:
        >>> linker = HtmlLinker(EntityResolver(EntityCatalogue(["Barack Obama"])))
        >>> linker.link("<p>the reporter met Barack Obama.</p>", article_selector="p").linked
        1
    """

    def __init__(
        self,
        resolver: EntityResolver,
        extractor: Optional[ArticleExtractor] = None,
        sites: Optional[SiteRegistry] = None,
        default_selector: str = DEFAULT_ARTICLE_SELECTOR,
        url_builder: Callable[[str], str] = to_wiki_url,
        link_class: str = DEFAULT_LINK_CLASS,
        min_text_length: int = MIN_TEXT_LENGTH,
        parser: str = 'html.parser',
    ):
        self.resolver = resolver
        self.extractor = extractor
        self.sites = sites
        self.default_selector = default_selector
        self.url_builder = url_builder
        self.link_class = link_class
        self.min_text_length = min_text_length
        self.parser = parser

    def resolve_selector(self, base_url: Optional[str], article_selector: Optional[str]) -> str:
        if article_selector:
            return article_selector
        if base_url and self.sites is not None:
            site_selector = self.sites.selector_for(base_url)
            if site_selector:
                return site_selector
        return self.default_selector

    def link(
        self,
        html: str,
        base_url: Optional[str] = None,
        article_selector: Optional[str] = None,
        debug: bool = False,
        two_phase: bool = True,
    ) -> HtmlLinkResult:
        """
        Link one HTML page.

        Args:
            html: Page markup
            base_url: Page URL; used for site lookup and by the extractor
            article_selector: Overrides the site/default selector
            debug: Collect diagnostic traces
            two_phase: Discover entities on the article extract first
                (needs an extractor)

        Returns:
            HtmlLinkResult with the serialised page
        """
        soup = BeautifulSoup(html, self.parser)
        adapter = SoupTreeAdapter(soup)
        coordinator = InjectionCoordinator(
            self.resolver,
            adapter,
            url_builder=self.url_builder,
            link_class=self.link_class,
            min_text_length=self.min_text_length,
        )

        selector = self.resolve_selector(base_url, article_selector)
        roots = select_roots(soup, selector)

        article = None
        if two_phase and self.extractor is not None:
            article = self.extractor.extract(html, base_url)

        result = TwoPhaseLinker(coordinator).link(roots, article, debug=debug)
        logger.info(f"Linked {result.linked} entities ({result.mode}) in {base_url or 'inline markup'}")

        return HtmlLinkResult(html=str(soup), result=result, selector=selector)
