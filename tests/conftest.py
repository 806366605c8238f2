"""Shared fixtures: sample trending markup and stubbed HTTP transports."""

import shutil
from pathlib import Path
from typing import Callable

import httpx
import pytest

from github_trending.utils.config import reset_settings

# Current trending page markup (article.Box-row items)
TRENDING_HTML = """
<html><body>
<div class="Box">
  <article class="Box-row">
    <h2 class="h3 lh-condensed">
      <a href="/psf/black" class="Link">
        <span class="text-normal">psf /</span> black
      </a>
    </h2>
    <p class="col-9 color-fg-muted my-1 pr-4">
      The uncompromising Python code formatter
    </p>
    <div class="f6 color-fg-muted mt-2">
      <span class="d-inline-block ml-0 mr-3">
        <span class="repo-language-color" style="background-color: #3572A5"></span>
        <span itemprop="programmingLanguage">Python</span>
      </span>
      <a href="/psf/black/stargazers" class="Link--muted d-inline-block mr-3">
        <svg aria-label="star" class="octicon octicon-star"></svg>
        38,123
      </a>
      <a href="/psf/black/forks" class="Link--muted d-inline-block mr-3">
        <svg aria-label="fork" class="octicon octicon-repo-forked"></svg>
        2,456
      </a>
      <span class="d-inline-block mr-3">Built by</span>
      <span class="d-inline-block float-sm-right">
        <svg aria-label="star" class="octicon octicon-star"></svg>
        1,024 stars today
      </span>
    </div>
  </article>
  <article class="Box-row">
    <h2 class="h3 lh-condensed">
      <a href="/rust-lang/rust" class="Link">rust-lang / rust</a>
    </h2>
    <div class="f6 color-fg-muted mt-2">
      <a href="/rust-lang/rust/stargazers" class="Link--muted d-inline-block mr-3">
        <svg class="octicon octicon-star"></svg>
        91,000
      </a>
      <span class="d-inline-block float-sm-right">87 stars today</span>
    </div>
  </article>
</div>
</body></html>
"""

# Legacy trending page markup (.repo-list li items)
LEGACY_TRENDING_HTML = """
<ol class="repo-list">
  <li class="col-12 d-block width-full py-4 border-bottom">
    <div class="d-inline-block col-9 mb-1">
      <h3><a href="/golang/go">golang / go</a></h3>
    </div>
    <div class="py-1">
      <p class="col-9 d-inline-block text-gray m-0 pr-4">
        The Go programming language
      </p>
    </div>
    <div class="f6 text-gray mt-2">
      <span class="d-inline-block mr-3">
        <span class="repo-language-color ml-0" style="background-color:#00ADD8;"></span>
        <span itemprop="programmingLanguage">
          Go
        </span>
      </span>
      <a class="muted-link d-inline-block mr-3" href="/golang/go/stargazers">
        <svg class="octicon octicon-star"></svg>
        52,301
      </a>
      <a class="muted-link d-inline-block mr-3" href="/golang/go/network">
        <svg class="octicon octicon-repo-forked"></svg>
        7,120
      </a>
      <span class="d-inline-block float-sm-right">
        <svg class="octicon octicon-star"></svg>
        230 stars today
      </span>
    </div>
  </li>
</ol>
"""

LANGUAGES_YAML = """
Go:
  type: programming
  color: "#00ADD8"
  aliases:
  - golang
Python:
  type: programming
  color: "#3572A5"
  aliases:
  - python3
  - rusthon
Text:
  type: prose
  aliases:
  - fundamental
  - plain text
"""


@pytest.fixture(scope="session", autouse=True)
def backup_env_file():
    """Backup .env file during test session to prevent pollution."""
    env_file = Path(".env")
    backup_file = Path(".env.test_backup")

    if env_file.exists():
        shutil.copy(env_file, backup_file)
        env_file.unlink()

    yield

    if backup_file.exists():
        shutil.move(backup_file, env_file)


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset the settings singleton around every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def trending_html() -> str:
    return TRENDING_HTML


@pytest.fixture
def legacy_trending_html() -> str:
    return LEGACY_TRENDING_HTML


@pytest.fixture
def languages_yaml() -> str:
    return LANGUAGES_YAML


@pytest.fixture
def recorded_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Build a MockTransport from a handler and record every request it sees."""

    def build(handler: Callable[[httpx.Request], httpx.Response]):
        requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        return httpx.MockTransport(record), requests

    return build
