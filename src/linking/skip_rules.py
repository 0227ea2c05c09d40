"""
Structural skip rules for link injection.

Decides whether a content node may contribute links at all. The classifier
never sees a concrete tree type: hosts hand it a NodeInspector that answers
three questions (tag name, class string, ancestor-or-self selector match),
so the same rules apply to a parsed HTML tree and to any other host.

Principle: when in doubt, don't link.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, FrozenSet, Optional, Sequence

from .models import SkipOutcome

logger = logging.getLogger(__name__)

SKIP_TAGS: FrozenSet[str] = frozenset({
    # Script/style
    'SCRIPT', 'STYLE', 'NOSCRIPT',
    # Interactive elements
    'A', 'BUTTON', 'INPUT', 'TEXTAREA', 'SELECT', 'LABEL',
    # Navigation/chrome
    'NAV', 'HEADER', 'FOOTER', 'ASIDE',
    # Headlines are navigation, not body text
    'H1', 'H2', 'H3', 'H4', 'H5', 'H6',
    # Code/preformatted
    'CODE', 'PRE', 'KBD', 'SAMP',
    # Media/embedded
    'SVG', 'MATH', 'IFRAME', 'OBJECT', 'EMBED', 'CANVAS',
    # Document metadata
    'HEAD', 'TITLE', 'META', 'LINK',
    # Photo credits/descriptions
    'FIGCAPTION',
    # Lists are usually navigation/teasers outside an article body
    'LI',
    # Tables are usually data outside an article body
    'TH', 'TD',
})

SKIP_SELECTORS: Sequence[str] = (
    # ARIA roles
    '[role="navigation"]',
    '[role="banner"]',
    '[role="contentinfo"]',
    '[role="complementary"]',
    '[role="search"]',
    '[role="menu"]',
    '[role="menubar"]',
    '[role="toolbar"]',
    '[role="button"]',
    '[aria-hidden="true"]',
    # Data attributes
    '[data-component="nav"]',
    '[data-component="navigation"]',
    '[data-component="header"]',
    '[data-testid="promo"]',
    '[data-testid="card"]',
    # Commerce/shopping
    '[data-commerce]',
    '[data-affiliate]',
)

# Case-insensitive substrings of the node's own class attribute.
# Ancestors are not checked: layout classes on distant wrappers would
# otherwise knock out whole article bodies.
SKIP_CLASS_PATTERNS: Sequence[str] = (
    # Navigation/menus
    'menu', 'nav-', '-nav',
    # Headlines/titles
    'headline', 'title', 'heading',
    # Teasers/decks/leads
    'teaser', 'dek', 'lede', 'leadin', 'lead-in', 'standfirst', 'summary', 'excerpt',
    # Cards/promos
    'card', 'promo', 'tout', 'featured', 'spotlight',
    # Credits/captions
    'credit', 'caption', 'byline', 'author', 'source',
    # Interactive/widgets
    'widget', 'embed', 'video-', '-video', 'interactive',
    # Item listings
    'item-info', 'item-image', 'list-item',
    # Layout rails
    'rail', 'sidebar', 'related',
    # Intro/outro sections
    'intro', 'outro', 'g-intro', 'g-leadin',
    # Commerce
    'commerce', 'shopping', 'buyline', 'affiliate', 'product',
    # Structured data
    'speakable', 'schema', 'ld-json',
)

# Skipped globally, but real content inside an article body (liveblogs, data tables)
ARTICLE_ALLOWED_TAGS: FrozenSet[str] = frozenset({'LI', 'TH', 'TD'})


class NodeInspector(ABC):
    """Read-only questions the classifier may ask about a host node."""

    @abstractmethod
    def tag_name(self, node: Any) -> Optional[str]:
        """Element tag name, any case; None for non-elements"""

    @abstractmethod
    def class_string(self, node: Any) -> str:
        """Raw class attribute value, '' when absent"""

    @abstractmethod
    def matches_closest(self, node: Any, selector: str) -> bool:
        """True if the node or any ancestor matches the CSS selector"""


class CallbackInspector(NodeInspector):
    """
    NodeInspector built from plain callables.

    Handy for hosts that already expose closest()/className-style helpers.
    """

    def __init__(
        self,
        closest_fn: Callable[[Any, str], bool],
        class_fn: Optional[Callable[[Any], str]] = None,
        tag_fn: Optional[Callable[[Any], Optional[str]]] = None,
    ):
        self._closest_fn = closest_fn
        self._class_fn = class_fn
        self._tag_fn = tag_fn or (lambda node: getattr(node, 'tag_name', None))

    def tag_name(self, node: Any) -> Optional[str]:
        return self._tag_fn(node)

    def class_string(self, node: Any) -> str:
        if self._class_fn is None:
            return ''
        return self._class_fn(node) or ''

    def matches_closest(self, node: Any, selector: str) -> bool:
        return bool(self._closest_fn(node, selector))


class SkipRuleClassifier:
    """
    Tag, selector and class-pattern rules, evaluated in that order.

    Any exception raised while interrogating a node yields a skip outcome.
    """

    def __init__(
        self,
        inspector: NodeInspector,
        skip_tags: FrozenSet[str] = SKIP_TAGS,
        skip_selectors: Sequence[str] = SKIP_SELECTORS,
        class_patterns: Sequence[str] = SKIP_CLASS_PATTERNS,
        article_allowed_tags: FrozenSet[str] = ARTICLE_ALLOWED_TAGS,
    ):
        self.inspector = inspector
        self.skip_tags = frozenset(tag.upper() for tag in skip_tags)
        self.skip_selectors = tuple(skip_selectors)
        self.class_patterns = tuple(pattern.lower() for pattern in class_patterns)
        self.article_allowed_tags = frozenset(tag.upper() for tag in article_allowed_tags)

    def classify(self, node: Any, is_root: bool = False, inside_article: bool = False) -> SkipOutcome:
        """
        Decide whether a node is eligible for linking.

        Args:
            node: Host node
            is_root: The node was selected as the article body; never skipped itself
            inside_article: The node descends from an article-body root, so
                list items and table cells are allowed

        Returns:
            SkipOutcome; skip=True means neither the node nor its subtree is linked
        """
        if is_root:
            return SkipOutcome.keep()
        if node is None:
            return SkipOutcome(skip=True, reason="error", error="missing node")

        try:
            return self._evaluate(node, inside_article)
        except Exception as e:
            logger.debug(f"Skip rule evaluation failed, skipping node: {e}")
            return SkipOutcome.failed(e)

    def _evaluate(self, node: Any, inside_article: bool) -> SkipOutcome:
        tag = (self.inspector.tag_name(node) or '').upper()

        if inside_article and tag in self.article_allowed_tags:
            return SkipOutcome.keep()

        if tag in self.skip_tags:
            return SkipOutcome.skipped(f"tag:{tag}")

        for selector in self.skip_selectors:
            if self.inspector.matches_closest(node, selector):
                return SkipOutcome.skipped(f"selector:{selector}")

        class_lower = self.inspector.class_string(node).lower()
        if class_lower:
            for pattern in self.class_patterns:
                if pattern in class_lower:
                    return SkipOutcome.skipped(f"class:{pattern}")

        return SkipOutcome.keep()

    def should_skip(self, node: Any, is_root: bool = False, inside_article: bool = False) -> bool:
        return self.classify(node, is_root=is_root, inside_article=inside_article).skip
