"""
Per-site article-body selectors.

The sites file maps a hostname to the CSS selector list that picks out the
article body on that site:

    {
        "theguardian.com": {
            "name": "The Guardian",
            "articleSelector": "[data-gu-name='body'], .article-body-commercial-selector",
            "homepage": "https://www.theguardian.com"
        }
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class SiteRegistry:
    """Hostname -> site configuration lookup."""

    def __init__(self, sites: Optional[Dict[str, Dict[str, Any]]] = None):
        self.sites: Dict[str, Dict[str, Any]] = dict(sites or {})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SiteRegistry":
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        logger.info(f"Loaded {len(data)} site configurations from {path}")
        return cls(data)

    def lookup(self, url: str) -> Optional[Dict[str, Any]]:
        """
        Find the configuration for a page URL.

        Exact hostname first (``www.`` ignored), then any configured domain
        the hostname is a subdomain of.
        """
        try:
            hostname = urlparse(url).hostname or ''
        except ValueError:
            return None
        if hostname.startswith('www.'):
            hostname = hostname[4:]
        if not hostname:
            return None

        if hostname in self.sites:
            return self.sites[hostname]

        for domain, config in self.sites.items():
            if hostname.endswith('.' + domain):
                return config

        return None

    def selector_for(self, url: str) -> Optional[str]:
        config = self.lookup(url)
        if config is None:
            return None
        return config.get('articleSelector')

    def __len__(self) -> int:
        return len(self.sites)
