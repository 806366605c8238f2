"""REST API client for repository metadata."""

from typing import Optional

from github_trending.errors import DecodeError
from github_trending.integrations.page_fetcher import PageFetcher
from github_trending.models import Repository, RepositorySlug

API_ACCEPT = "application/vnd.github.v3+json"


class RepositoryClient:
    """Fetches full repository payloads from the REST API.

    Args:
        fetcher: Shared page fetcher (proxy, timeout, User-Agent)
        token: API token; no Authorization header is sent when None
        api_url: Base URL of the REST API
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        token: Optional[str] = None,
        api_url: str = "https://api.github.com",
    ) -> None:
        self.fetcher = fetcher
        self.token = token or None
        self.api_url = api_url.rstrip("/")

    def build_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.fetcher.user_agent,
            "Accept": API_ACCEPT,
        }
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def get_repository(self, slug: RepositorySlug) -> Repository:
        """Fetch the API payload for one repository.

        Args:
            slug: Repository owner and name

        Returns:
            Decoded JSON object, passed through unchanged

        Raises:
            NetworkError: If the API could not be reached
            HttpError: If the API answered with a non-2xx status
            DecodeError: If the body is not a JSON object
        """
        url = f"{self.api_url}/repos/{slug.owner}/{slug.name}"
        response = await self.fetcher.request("GET", url, headers=self.build_headers())

        # The API occasionally returns truncated JSON
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON for {slug.full_name}: {e}", url=url) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object for {slug.full_name}, got {type(data).__name__}",
                url=url,
            )
        return data
