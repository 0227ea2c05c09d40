"""
Host adapters: BeautifulSoup trees, trafilatura article extraction and
per-site article selectors.
"""

from .article import TrafilaturaExtractor
from .sites import SiteRegistry
from .soup import HtmlLinker, HtmlLinkResult, SoupTreeAdapter, select_roots

__all__ = [
    'HtmlLinker',
    'HtmlLinkResult',
    'SiteRegistry',
    'SoupTreeAdapter',
    'TrafilaturaExtractor',
    'select_roots',
]
