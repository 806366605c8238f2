"""Trending repository listings and language metadata from GitHub."""

from github_trending.client import Client
from github_trending.config import ScraperConfig
from github_trending.errors import DecodeError, HttpError, NetworkError, TrendingError
from github_trending.models import (
    Language,
    LanguageCatalog,
    LangsRepositories,
    Repository,
    RepositorySlug,
    ScrapedRepository,
)
from github_trending.scraper import Scraper
from github_trending.utils.logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Client",
    "DecodeError",
    "HttpError",
    "Language",
    "LanguageCatalog",
    "LangsRepositories",
    "NetworkError",
    "Repository",
    "RepositorySlug",
    "ScrapedRepository",
    "Scraper",
    "ScraperConfig",
    "TrendingError",
    "setup_logging",
]
