"""Clients and parsers for the trending page, language catalog and REST API."""

from github_trending.integrations.language_catalog import LanguageCatalogLoader
from github_trending.integrations.listing_parser import parse_full_records, parse_slugs
from github_trending.integrations.page_fetcher import PageFetcher
from github_trending.integrations.repository_client import RepositoryClient

__all__ = [
    "LanguageCatalogLoader",
    "PageFetcher",
    "RepositoryClient",
    "parse_full_records",
    "parse_slugs",
]
