"""Language catalog loader.

Fetches the linguist language definition document once per loader and
derives the color table and the list of recognised names from it.
"""

import asyncio
import logging
from types import MappingProxyType
from typing import Optional

import yaml
from pydantic import ValidationError

from github_trending.errors import DecodeError
from github_trending.integrations.page_fetcher import PageFetcher
from github_trending.models import Language, LanguageCatalog

logger = logging.getLogger(__name__)


def parse_catalog(document: str) -> LanguageCatalog:
    """Parse a languages.yml document.

    Args:
        document: YAML text mapping language name to {color, aliases, ...}

    Returns:
        Catalog keyed by canonical language name

    Raises:
        DecodeError: If the text is not YAML or not a mapping of mappings
    """
    try:
        raw = yaml.safe_load(document)
    except yaml.YAMLError as e:
        raise DecodeError(f"Invalid language YAML: {e}") from e

    if not isinstance(raw, dict):
        raise DecodeError(f"Language YAML must be a mapping, got {type(raw).__name__}")

    catalog: dict[str, Language] = {}
    for name, entry in raw.items():
        try:
            catalog[str(name)] = Language.model_validate(entry or {})
        except ValidationError as e:
            raise DecodeError(f"Invalid entry for language {name!r}: {e}") from e
    return catalog


class LanguageCatalogLoader:
    """Loads and memoizes the language catalog.

    The first call to load() fetches the document; every later call on the
    same instance returns the identical cached object, a read-only mapping
    shared by every caller. Concurrent first calls share one fetch.
    """

    def __init__(self, fetcher: PageFetcher, url: str) -> None:
        self.fetcher = fetcher
        self.url = url
        self._cache: Optional[LanguageCatalog] = None
        self._lock = asyncio.Lock()

    async def load(self) -> LanguageCatalog:
        if self._cache is not None:
            return self._cache

        async with self._lock:
            if self._cache is None:
                document = await self.fetcher.fetch(self.url)
                self._cache = MappingProxyType(parse_catalog(document))
                logger.debug(f"Loaded {len(self._cache)} languages from {self.url}")
        return self._cache

    async def colors_by_name(self) -> dict[str, str]:
        """Map lowercased names and aliases to hex colors.

        Languages without a color are left out entirely.
        """
        catalog = await self.load()
        result: dict[str, str] = {}
        for name, lang in catalog.items():
            if not lang.color:
                continue
            result[name.lower()] = lang.color
            for alias in lang.aliases:
                result[alias.lower()] = lang.color
        return result

    async def all_names(self) -> list[str]:
        """Every canonical name plus aliases.

        Aliases are listed only for languages that declare a color, the same
        gate colors_by_name() applies.
        """
        catalog = await self.load()
        result: list[str] = []
        for name, lang in catalog.items():
            result.append(name)
            if not lang.color:
                continue
            result.extend(lang.aliases)
        return result
