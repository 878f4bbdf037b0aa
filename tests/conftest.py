from pathlib import Path
from typing import Any

import pytest

from siteconfig.components.site_config import ENV_OVERRIDES
from siteconfig.components.site_config.component import CONFIG_PATH_ENV

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def clean_site_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SITE_* variables from the outer shell out of every test."""
    for key in [CONFIG_PATH_ENV, *ENV_OVERRIDES]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def full_raw() -> dict[str, Any]:
    """Every field set, as in the reference site.yaml."""
    return {
        "title": "Soggy Newspaper",
        "author": "Nicholas Lane",
        "description": "Repository of neat things I learn",
        "primaryColor": "#3498db",
        "showHeaderImage": True,
        "showShareButtons": True,
        "postsPerPage": 5,
        "social": {
            "website": "https://soggy.space",
            "github": "https://github.com/soggiest",
            "twitter": "https://twitter.com/apinick",
        },
    }


@pytest.fixture
def minimal_raw() -> dict[str, Any]:
    """Only the required fields."""
    return {
        "title": "Soggy Newspaper",
        "author": "Nicholas Lane",
        "primaryColor": "#3498db",
        "postsPerPage": 5,
    }
