"""
Pytest configuration and fixtures for Wikilinker tests
"""
import re
import json
import pytest
from typing import Any, List, Optional, Sequence

from src.linking import EntityCatalogue, EntityResolver, LinkSegment, TreeAdapter

# Test data
SAMPLE_TITLES = [
    "Barack Obama",
    "Angela Merkel",
    "Paris",
    "Berlin",
    "Google",
    "FBI",
    "New York",
    "New York City",
    "Secretary of State",
]

SAMPLE_ARTICLE_HTML = """<html><head><title>Summit report</title></head><body>
<nav><ul><li><a href="/world">World</a></li><li>Stories about Barack Obama</li></ul></nav>
<article>
<h1>Leaders meet in Paris</h1>
<p>On Tuesday the reporter met Barack Obama in Paris to discuss the summit.</p>
<p>Later that day, aides said Barack Obama would fly on to Berlin with officials from the FBI.</p>
<p>Readers can find <a href="https://example.com/merkel">a profile of Angela Merkel</a> elsewhere.</p>
<figure><img src="summit.jpg"><figcaption>Photo of Angela Merkel in Berlin</figcaption></figure>
<ul><li>A live update mentioned Angela Merkel again.</li></ul>
</article>
<footer>Copyright Google</footer>
</body></html>"""

SAMPLE_ARTICLE_LINKS = ["Barack Obama", "Paris", "Berlin", "FBI", "Angela Merkel"]


class FakeNode:
    """Minimal dict-backed tree node: an element (tag set) or a text leaf (text set)."""

    def __init__(self, tag: Optional[str] = None, text: Optional[str] = None, attrs=None, children=()):
        self.tag = tag
        self.text = text
        self.attrs = dict(attrs or {})
        self.parent = None
        self.children: List["FakeNode"] = []
        for child in children:
            self.append(child)

    def append(self, child: "FakeNode") -> None:
        child.parent = self
        self.children.append(child)

    def find_all(self, tag: str) -> List["FakeNode"]:
        found = []
        for child in self.children:
            if child.tag == tag:
                found.append(child)
            found.extend(child.find_all(tag))
        return found

    def get_text(self) -> str:
        if self.text is not None:
            return self.text
        return ''.join(child.get_text() for child in self.children)


def el(tag: str, *children: FakeNode, **attrs: str) -> FakeNode:
    """Element helper; attribute names use underscores for dashes (aria_hidden=...)."""
    return FakeNode(
        tag=tag,
        attrs={name.replace('_', '-').rstrip('-'): value for name, value in attrs.items()},
        children=children,
    )


def txt(text: str) -> FakeNode:
    return FakeNode(text=text)


_ATTRIBUTE_SELECTOR = re.compile(r'^\[([\w-]+)(?:="([^"]*)")?\]$')


class FakeTreeAdapter(TreeAdapter):
    """TreeAdapter over FakeNode; understands attribute selectors only."""

    def tag_name(self, node: Any) -> Optional[str]:
        return node.tag

    def class_string(self, node: Any) -> str:
        return node.attrs.get('class', '')

    def matches_closest(self, node: Any, selector: str) -> bool:
        parsed = _ATTRIBUTE_SELECTOR.match(selector)
        if not parsed:
            raise ValueError(f"Unsupported selector: {selector}")
        name, value = parsed.groups()
        current = node
        while current is not None:
            if name in current.attrs and (value is None or current.attrs[name] == value):
                return True
            current = current.parent
        return False

    def children(self, node: Any) -> List[Any]:
        return list(node.children)

    def is_element(self, node: Any) -> bool:
        return node.tag is not None

    def is_text(self, node: Any) -> bool:
        return node.text is not None

    def text_of(self, node: Any) -> str:
        return node.text

    def replace_text(self, node: Any, segments: Sequence[Any]) -> None:
        replacements = []
        for segment in segments:
            if isinstance(segment, LinkSegment):
                replacements.append(el('a', txt(segment.text), href=segment.url, class_=segment.css_class,
                                       title=segment.title))
            else:
                replacements.append(txt(segment))
        parent = node.parent
        index = parent.children.index(node)
        for replacement in replacements:
            replacement.parent = parent
        parent.children[index:index + 1] = replacements


@pytest.fixture
def catalogue():
    """Small catalogue shared by the linking tests"""
    return EntityCatalogue(SAMPLE_TITLES)


@pytest.fixture
def resolver(catalogue):
    """Resolver over the sample catalogue"""
    return EntityResolver(catalogue)


@pytest.fixture
def fake_adapter():
    """Dict-backed tree host"""
    return FakeTreeAdapter()


@pytest.fixture
def sample_article_html():
    """News-style page with navigation, captions and existing links"""
    return SAMPLE_ARTICLE_HTML


@pytest.fixture
def catalogue_file(tmp_path):
    """Catalogue JSON file on disk"""
    path = tmp_path / "entities.json"
    with open(path, 'w') as f:
        json.dump(SAMPLE_TITLES, f)
    return path
