"""
site-config: validated, immutable site configuration for static site builds.
"""

from siteconfig.core.entities import SiteConfig, SocialLinks
from siteconfig.core.services.site_config import (
    AlreadyLoadedError,
    ConfigStore,
    NotLoadedError,
    SiteConfigError,
    ValidationError,
    Violation,
    load_site_config,
)

__all__ = [
    "AlreadyLoadedError",
    "ConfigStore",
    "NotLoadedError",
    "SiteConfig",
    "SiteConfigError",
    "SocialLinks",
    "ValidationError",
    "Violation",
    "load_site_config",
]
