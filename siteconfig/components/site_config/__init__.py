"""
Site config component - Load and validate the site configuration file.
"""

from .component import (
    CONFIG_PATH_ENV,
    DEFAULT_CONFIG_PATH,
    ENV_OVERRIDES,
    apply_env_overrides,
    coerce_env_value,
    resolve_config_path,
    run,
    run_load,
    run_validate,
)
from .models import (
    LoadSiteConfigInput,
    LoadSiteConfigOutput,
    ValidateSiteConfigInput,
    ValidateSiteConfigOutput,
)
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Component entry points
    "run",
    "run_load",
    "run_validate",
    # Helpers
    "apply_env_overrides",
    "coerce_env_value",
    "resolve_config_path",
    # Models
    "LoadSiteConfigInput",
    "LoadSiteConfigOutput",
    "ValidateSiteConfigInput",
    "ValidateSiteConfigOutput",
    # Ports
    "FileSystemPort",
    "EnvironmentPort",
    # Constants
    "CONFIG_PATH_ENV",
    "DEFAULT_CONFIG_PATH",
    "ENV_OVERRIDES",
]
