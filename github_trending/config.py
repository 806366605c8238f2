"""Runtime configuration handed to the scraper and client constructors."""

from typing import Optional

from pydantic import BaseModel, Field

from github_trending.utils.config import Settings


class ScraperConfig(BaseModel):
    """Constructor-level options shared by every outbound request.

    Attributes:
        proxy: Upstream proxy URL, None for a direct connection
        use_compression: Ask for gzip/deflate when fetching pages
        timeout: Per-request transport timeout in seconds
        user_agent: User-Agent header value
        github_url: Base URL of the site serving the trending page
        api_url: Base URL of the REST API
        languages_url: URL of the language definition YAML document
    """

    proxy: Optional[str] = None
    use_compression: bool = True
    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = "github-trending-python"
    github_url: str = "https://github.com"
    api_url: str = "https://api.github.com"
    languages_url: str = (
        "https://raw.githubusercontent.com/github/linguist/master/lib/linguist/languages.yml"
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScraperConfig":
        return cls(
            proxy=settings.HTTP_PROXY_URL,
            use_compression=settings.USE_COMPRESSION,
            timeout=settings.API_TIMEOUT,
            user_agent=settings.USER_AGENT,
            github_url=settings.GITHUB_URL,
            api_url=settings.GITHUB_API_URL,
            languages_url=settings.LANGUAGES_URL,
        )
