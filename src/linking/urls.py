"""
Hyperlink targets and match-context snippets.
"""

from urllib.parse import quote

WIKIPEDIA_BASE_URL = "https://en.wikipedia.org/wiki/"


def to_wiki_url(entity_name: str, base_url: str = WIKIPEDIA_BASE_URL) -> str:
    """
    Map an entity name to its Wikipedia article URL.

    Examples:
        >>> to_wiki_url("Barack Obama")
        'https://en.wikipedia.org/wiki/Barack_Obama'
        >>> to_wiki_url("AT&T")
        'https://en.wikipedia.org/wiki/AT%26T'
    """
    return base_url + quote(entity_name.replace(' ', '_'), safe="()'!*-._~")


def extract_context(text: str, index: int, length: int, words: int = 3) -> str:
    """
    Show a match with up to `words` words either side, match in brackets.

    Example:
        >>> extract_context("the reporter met Barack Obama in New York today", 17, 12)
        'the reporter met [Barack Obama] in New York'
    """
    before = text[:index].split()[-words:] if words else []
    after = text[index + length:].split()[:words]
    matched = text[index:index + length]
    return f"{' '.join(before)} [{matched}] {' '.join(after)}".strip()
