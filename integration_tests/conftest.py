"""Shared fixtures for live-network tests against github.com."""

import os
from pathlib import Path

import pytest

from github_trending.utils.config import reset_settings


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless explicitly requested."""
    if os.getenv("RUN_LIVE_TESTS") == "1":
        return
    skip_live = pytest.mark.skip(reason="set RUN_LIVE_TESTS=1 to hit the real site")
    here = Path(__file__).resolve().parent
    for item in items:
        if here in item.path.parents:
            item.add_marker(skip_live)


@pytest.fixture(autouse=True)
def setup_test_env():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def github_token() -> str:
    token = os.getenv("GITHUB_TOKEN")
    if not token:
        pytest.skip("GITHUB_TOKEN not set")
    return token
