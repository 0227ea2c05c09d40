"""
Article extraction with trafilatura.

Produces the clean-text view used for entity discovery. Pages whose extract
is missing or too short to be an article are reported as unsuitable, which
sends the linker down the single-phase path.
"""

import logging
from typing import Optional

import trafilatura

from ..linking.discovery import ArticleExtract, ArticleExtractor

logger = logging.getLogger(__name__)

READERABLE_MIN_LENGTH = 140

UNSUITABLE = ArticleExtract(text=None, title=None, is_suitable=False)


class TrafilaturaExtractor(ArticleExtractor):
    """
    Boilerplate-stripping extractor.

    Args:
        min_length: Shortest extract (in characters) still treated as an article
    """

    def __init__(self, min_length: int = READERABLE_MIN_LENGTH):
        self.min_length = min_length

    def extract(self, markup: str, base_url: Optional[str] = None) -> ArticleExtract:
        try:
            text = trafilatura.extract(
                markup,
                url=base_url,
                include_comments=False,
                include_tables=True,
                include_links=False,
                favor_precision=True,
            )
        except Exception as e:
            logger.error(f"Article extraction failed for {base_url or 'inline markup'}: {e}")
            return UNSUITABLE

        if not text or len(text.strip()) < self.min_length:
            logger.debug(f"Extract too short to be an article ({len(text or '')} chars)")
            return UNSUITABLE

        title = None
        try:
            metadata = trafilatura.extract_metadata(markup, default_url=base_url)
            if metadata is not None:
                title = metadata.title
        except Exception as e:
            logger.warning(f"Metadata extraction failed: {e}")

        return ArticleExtract(text=text, title=title, is_suitable=True)
