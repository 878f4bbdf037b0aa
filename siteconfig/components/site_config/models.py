"""
Site config component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from siteconfig.core.entities import SiteConfig
from siteconfig.core.services.site_config import Violation


@dataclass(frozen=True)
class LoadSiteConfigInput:
    """Input for loading a site config file."""

    config_path: Path | str | None = None
    apply_env: bool = True


@dataclass(frozen=True)
class LoadSiteConfigOutput:
    """Output from loading a site config file."""

    raw: dict[str, Any]
    errors: list[Violation] = field(default_factory=list)
    success: bool = True
    source: Path | None = None


@dataclass(frozen=True)
class ValidateSiteConfigInput:
    """Input for validating a raw record."""

    raw: Any


@dataclass(frozen=True)
class ValidateSiteConfigOutput:
    """Output from validating a raw record."""

    config: SiteConfig | None
    errors: list[Violation]
    is_valid: bool
