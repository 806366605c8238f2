"""Trending aggregator.

Combines the trending scraper with the REST API: slugs scraped from the
trending page are expanded into full API payloads, optionally checked for
a README, and gathered for one or many languages.

Public API:
    Client: Aggregates trending data per language

Example:
    >>> client = Client(token="...")
    >>> trends = await client.trending_for(["go", "rust"])
    >>> [repo["full_name"] for repo in trends["go"]]
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional, TypeVar

import httpx

from github_trending.config import ScraperConfig
from github_trending.errors import TrendingError
from github_trending.integrations.repository_client import RepositoryClient
from github_trending.models import Repository, RepositorySlug
from github_trending.scraper import Scraper
from github_trending.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def readme_url_for(repo: Repository) -> Optional[str]:
    """README location for an API payload, None if the payload lacks the fields."""
    html_url = repo.get("html_url")
    default_branch = repo.get("default_branch")
    if not html_url or not default_branch:
        return None
    return f"{html_url}/blob/{default_branch}/README.md"


class Client:
    """Fetches trending repositories with their full API metadata.

    Args:
        config: Proxy, compression and endpoint options
        token: API token sent as ``Authorization: token <value>``
        transport: Custom httpx transport for every request
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.scraper = Scraper(config, transport=transport)
        self.repositories = RepositoryClient(
            self.scraper.fetcher,
            token=token,
            api_url=self.scraper.config.api_url,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "Client":
        """Build a client from environment settings, token included."""
        settings = settings or get_settings()
        return cls(
            ScraperConfig.from_settings(settings),
            token=settings.get_github_token(),
            transport=transport,
        )

    @property
    def config(self) -> ScraperConfig:
        return self.scraper.config

    @property
    def token(self) -> Optional[str]:
        return self.repositories.token

    async def fetch_repository(self, slug: RepositorySlug) -> Repository:
        return await self.repositories.get_repository(slug)

    async def trending_slugs(self, lang: Optional[str] = None) -> list[RepositorySlug]:
        """Owner/name pairs from the trending page; no API calls."""
        return await self.scraper.scrape_trending_repos(lang)

    async def trending(self, lang: Optional[str] = None) -> list[Repository]:
        """API payloads for every trending repository, in listing order.

        Raises:
            NetworkError, HttpError, DecodeError: From the page or any API call
        """
        slugs = await self.trending_slugs(lang)
        logger.info(f"Fetching {len(slugs)} repositories trending for {lang or 'all'}")
        return list(await asyncio.gather(*(self.fetch_repository(slug) for slug in slugs)))

    async def append_readme(self, repo: Repository) -> Repository:
        """Check for a README and record its URL.

        Never raises: on any failure the same record is returned unchanged.
        On success a copy carrying ``readme_url`` is returned.
        """
        readme_url = readme_url_for(repo)
        if readme_url is None:
            return repo

        try:
            await self.scraper.fetcher.request("HEAD", readme_url)
        except TrendingError as e:
            logger.debug(f"No README for {repo.get('full_name', repo.get('html_url'))}: {e}")
            return repo

        return {**repo, "readme_url": readme_url}

    async def trending_with_readme(self, lang: Optional[str] = None) -> list[Repository]:
        repos = await self.trending(lang)
        return list(await asyncio.gather(*(self.append_readme(repo) for repo in repos)))

    async def _for_languages(
        self,
        langs: list[str],
        fetch: Callable[[str], Awaitable[list[T]]],
    ) -> dict[str, list[T]]:
        """Run fetch once per language concurrently; any failure fails all."""
        if isinstance(langs, str):
            raise ValueError("langs must be a list of languages, not a string")

        results = await asyncio.gather(*(fetch(lang) for lang in langs))
        return dict(zip(langs, results))

    async def trending_slugs_for(self, langs: list[str]) -> dict[str, list[RepositorySlug]]:
        return await self._for_languages(langs, self.trending_slugs)

    async def trending_for(self, langs: list[str]) -> dict[str, list[Repository]]:
        return await self._for_languages(langs, self.trending)

    async def trending_with_readme_for(self, langs: list[str]) -> dict[str, list[Repository]]:
        """Trending repositories with README lookups, keyed by language."""
        return await self._for_languages(langs, self.trending_with_readme)
