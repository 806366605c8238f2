"""Trending page parser.

Turns trending page HTML into repository records. Both the legacy
markup (``.repo-list li`` items) and the current one (``article.Box-row``
items) are recognised.

Every field is extracted independently: a missing element degrades that
field to None and never aborts the rest of the page. An item whose link
is not ``/<owner>/<name>`` is skipped with a warning in both modes, and
indices are assigned over the kept items only.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from github_trending.models import RepositorySlug, ScrapedRepository

logger = logging.getLogger(__name__)

ITEM_SELECTOR = "article.Box-row, .repo-list li"
LINK_SELECTOR = "h2 a, h3 a"
LANGUAGE_SELECTOR = '[itemprop="programmingLanguage"]'
LANG_COLOR_SELECTOR = ".repo-language-color"
COUNT_SELECTOR = "a.muted-link.d-inline-block.mr-3, a.Link--muted.d-inline-block.mr-3"
TODAYS_STARS_SELECTOR = (
    ".f6.text-gray.mt-2 > span:last-child, "
    ".f6.color-fg-muted.mt-2 > span:last-child"
)

BACKGROUND_COLOR_PREFIX = "background-color:"

RE_DIGITS = re.compile(r"\d+")
RE_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")


def _leading_text(element: Optional[Tag]) -> Optional[str]:
    """First non-blank text node directly under element, trimmed."""
    if element is None:
        return None
    for child in element.children:
        if isinstance(child, NavigableString) and not isinstance(child, Comment):
            text = child.strip()
            if text:
                return text
    return None


def _own_text(element: Tag) -> str:
    """Text nodes directly under element, ignoring nested icons."""
    return "".join(
        str(s) for s in element.find_all(string=True, recursive=False)
        if not isinstance(s, Comment)
    )


def parse_count(text: Optional[str]) -> Optional[int]:
    """Parse a displayed count such as ``"1,234"`` or ``"56 stars today"``.

    Thousands separators are removed and the first run of digits is read
    as a base-10 integer. Returns None when there is no digit.
    """
    if not text:
        return None
    match = RE_DIGITS.search(text.replace(",", ""))
    if match is None:
        return None
    return int(match.group(0), 10)


def parse_lang_color(style: Optional[str]) -> Optional[str]:
    """Extract the hex color from an inline ``background-color:`` style."""
    if not style:
        return None
    style = style.strip()
    if not style.startswith(BACKGROUND_COLOR_PREFIX):
        return None
    value = style[len(BACKGROUND_COLOR_PREFIX):].split(";")[0].strip()
    if not RE_COLOR.match(value):
        return None
    return value


def _item_slug(item: Tag) -> Optional[RepositorySlug]:
    link = item.select_one(LINK_SELECTOR)
    href = link.get("href") if link is not None else None
    slug = RepositorySlug.from_href(href)
    if slug is None:
        logger.warning(f"Invalid repo: {href!r}")
    return slug


def _iter_items(html: str) -> list[Tag]:
    soup = BeautifulSoup(html, "html.parser")
    return soup.select(ITEM_SELECTOR)


def parse_slugs(html: str) -> list[RepositorySlug]:
    """Parse owner/name pairs from a trending page, in listing order.

    Args:
        html: Trending page markup

    Returns:
        One slug per well-formed list item
    """
    slugs = []
    for item in _iter_items(html):
        slug = _item_slug(item)
        if slug is not None:
            slugs.append(slug)
    return slugs


def parse_full_records(html: str) -> list[ScrapedRepository]:
    """Parse full repository records from a trending page.

    Args:
        html: Trending page markup

    Returns:
        Records in listing order with ``index`` running 0..n-1
    """
    records = []
    for item in _iter_items(html):
        slug = _item_slug(item)
        if slug is None:
            continue

        color_elem = item.select_one(LANG_COLOR_SELECTOR)
        lang_color = parse_lang_color(color_elem.get("style")) if color_elem else None

        # First count link is stars, second is forks
        counts = item.select(COUNT_SELECTOR)
        all_stars = parse_count(_own_text(counts[0])) if len(counts) > 0 else None
        forks = parse_count(_own_text(counts[1])) if len(counts) > 1 else None

        todays_elem = item.select_one(TODAYS_STARS_SELECTOR)
        todays_stars = parse_count(todays_elem.get_text()) if todays_elem else None

        records.append(
            ScrapedRepository(
                index=len(records),
                owner=slug.owner,
                name=slug.name,
                description=_leading_text(item.find("p")),
                language=_leading_text(item.select_one(LANGUAGE_SELECTOR)),
                lang_color=lang_color,
                all_stars=all_stars,
                todays_stars=todays_stars,
                forks=forks,
            )
        )

    return records
