"""Trending page and language catalog scraper.

Example:
    >>> scraper = Scraper()
    >>> repos = await scraper.scrape_trending_repos_full_info("python")
    >>> repos[0].model_dump(by_alias=True)
"""

from typing import Optional

import httpx

from github_trending.config import ScraperConfig
from github_trending.integrations.language_catalog import LanguageCatalogLoader
from github_trending.integrations.listing_parser import parse_full_records, parse_slugs
from github_trending.integrations.page_fetcher import PageFetcher
from github_trending.models import LanguageCatalog, RepositorySlug, ScrapedRepository

ALL_LANGUAGES = "all"


def trending_params(lang_name: Optional[str]) -> Optional[dict[str, str]]:
    """Query parameters selecting one language on the trending page.

    None, "" and "all" select the unfiltered page.
    """
    if not lang_name or lang_name.strip().lower() == ALL_LANGUAGES:
        return None
    return {"l": lang_name.strip()}


class Scraper:
    """Scrapes the trending page and the language definition document.

    Args:
        config: Proxy, compression and endpoint options
        transport: Custom httpx transport for every request
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or ScraperConfig()
        self.fetcher = PageFetcher(
            proxy=self.config.proxy,
            use_compression=self.config.use_compression,
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
            transport=transport,
        )
        self.languages = LanguageCatalogLoader(self.fetcher, self.config.languages_url)

    @property
    def trending_url(self) -> str:
        return f"{self.config.github_url.rstrip('/')}/trending"

    async def fetch_trend_page(self, lang_name: Optional[str] = None) -> str:
        """Fetch the raw trending page HTML for one language."""
        return await self.fetcher.fetch(self.trending_url, params=trending_params(lang_name))

    async def scrape_trending_repos(self, lang_name: Optional[str] = None) -> list[RepositorySlug]:
        html = await self.fetch_trend_page(lang_name)
        return parse_slugs(html)

    async def scrape_trending_repos_full_info(
        self, lang_name: Optional[str] = None
    ) -> list[ScrapedRepository]:
        html = await self.fetch_trend_page(lang_name)
        return parse_full_records(html)

    async def fetch_language_yaml(self) -> LanguageCatalog:
        """Language catalog, fetched once per scraper."""
        return await self.languages.load()

    async def scrape_language_colors(self) -> dict[str, str]:
        return await self.languages.colors_by_name()

    async def scrape_language_names(self) -> list[str]:
        return await self.languages.all_names()
