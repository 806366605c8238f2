"""Record types produced by the scraper and the API client.

Scraped records are immutable pydantic models whose validation enforces
the listing invariants (non-negative counts, hex colors). API records are
passed through untouched as plain dictionaries since their shape belongs
to the upstream API.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

HEX_COLOR_PATTERN = r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$"

RE_HREF_SCRAPE = re.compile(r"^/([^/]+)/([^/]+)$")


class RepositorySlug(BaseModel):
    """Repository identified by its owner and name path segments."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    name: str = Field(min_length=1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @classmethod
    def from_href(cls, href: Optional[str]) -> Optional["RepositorySlug"]:
        """Build a slug from a relative link of the form ``/<owner>/<name>``.

        Returns None when the link does not match that shape.
        """
        if not href:
            return None
        match = RE_HREF_SCRAPE.match(href.strip())
        if match is None:
            return None
        return cls(owner=match.group(1), name=match.group(2))


class ScrapedRepository(RepositorySlug):
    """Full record scraped from one trending list item.

    Attributes:
        index: Zero-based position among the records of one parse
        description: Repository description, None when not shown
        language: Display name of the primary language
        lang_color: Hex color of the language swatch
        all_stars: Total star count
        todays_stars: Stars gained in the trending period
        forks: Fork count
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    index: int = Field(ge=0)
    description: Optional[str] = None
    language: Optional[str] = None
    lang_color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    all_stars: Optional[int] = Field(default=None, ge=0)
    todays_stars: Optional[int] = Field(default=None, ge=0)
    forks: Optional[int] = Field(default=None, ge=0)


class Language(BaseModel):
    """One entry of the language definition document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    color: Optional[str] = None
    aliases: List[str] = Field(default_factory=list)

    @field_validator("aliases", mode="before")
    @classmethod
    def coerce_aliases(cls, v: Any) -> Any:
        # YAML loads numeric-looking aliases as int
        if v is None:
            return []
        if isinstance(v, list):
            return [str(alias) for alias in v]
        return v


# Canonical language name -> definition; loaders hand out a read-only view
LanguageCatalog = Mapping[str, Language]

# Payload returned by the REST API, optionally with "readme_url" added
JSONValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
Repository = Dict[str, JSONValue]

# Requested language key -> records, in caller order
LangsRepositories = Dict[str, List[Any]]
