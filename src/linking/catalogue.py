"""
Entity catalogue: the static set of linkable titles.

Loaded once per process and never mutated afterwards, so a single instance
can be shared by every page being processed.
"""

import json
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Union

logger = logging.getLogger(__name__)


class EntityCatalogue:
    """
    Immutable set of known title strings, keyed by exact surface form.

    Example:
        >>> catalogue = EntityCatalogue(["Barack Obama", "Google"])
        >>> "Google" in catalogue
        True
        >>> "google" in catalogue
        False
    """

    def __init__(self, titles: Iterable[str] = ()):
        self._titles: FrozenSet[str] = frozenset(titles)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EntityCatalogue":
        """
        Load a catalogue from a JSON array of title strings.

        Raises:
            FileNotFoundError: if the file does not exist
            ValueError: if the JSON top level is not an array
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Catalogue file {path} must contain a JSON array, got {type(data).__name__}")

        titles = [title for title in data if isinstance(title, str)]
        ignored = len(data) - len(titles)
        if ignored:
            logger.warning(f"Ignored {ignored} non-string entries in {path}")

        catalogue = cls(titles)
        logger.info(f"Loaded {len(catalogue)} entities from {path}")
        return catalogue

    def __contains__(self, title: object) -> bool:
        return title in self._titles

    def __len__(self) -> int:
        return len(self._titles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._titles)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._titles)})"
