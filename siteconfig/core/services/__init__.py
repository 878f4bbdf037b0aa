"""
Core services for site-config.
"""

from .site_config import (
    AlreadyLoadedError,
    ConfigStore,
    NotLoadedError,
    SiteConfigError,
    ValidationError,
    Violation,
    collect_violations,
    load_site_config,
    validate_site_config,
)

__all__ = [
    "AlreadyLoadedError",
    "ConfigStore",
    "NotLoadedError",
    "SiteConfigError",
    "ValidationError",
    "Violation",
    "collect_violations",
    "validate_site_config",
    "load_site_config",
]
