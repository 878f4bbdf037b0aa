"""
Site config component - Load site.yaml / site.json and validate it.

The config file is found from an explicit path, the SITE_CONFIG_PATH
environment variable, or site.yaml at the project root. SITE_* environment
variables may then override individual fields before validation.
"""

from __future__ import annotations

import copy
import logging
import re
from pathlib import Path
from typing import Any

import yaml

from siteconfig.core.services.site_config import SCHEMA_FIELD, Violation, validate_site_config

from .models import (
    LoadSiteConfigInput,
    LoadSiteConfigOutput,
    ValidateSiteConfigInput,
    ValidateSiteConfigOutput,
)
from .ports import EnvironmentPort, FileSystemPort

logger = logging.getLogger(__name__)

# Default config file path (relative to project root)
DEFAULT_CONFIG_PATH = "site.yaml"
CONFIG_PATH_ENV = "SITE_CONFIG_PATH"
SOURCE_FIELD = "_source"

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

# env var -> (path into the raw record, value kind)
ENV_OVERRIDES: dict[str, tuple[tuple[str, ...], str]] = {
    "SITE_TITLE": (("title",), "str"),
    "SITE_AUTHOR": (("author",), "str"),
    "SITE_DESCRIPTION": (("description",), "str"),
    "SITE_PRIMARY_COLOR": (("primaryColor",), "str"),
    "SITE_SHOW_HEADER_IMAGE": (("showHeaderImage",), "bool"),
    "SITE_SHOW_SHARE_BUTTONS": (("showShareButtons",), "bool"),
    "SITE_POSTS_PER_PAGE": (("postsPerPage",), "int"),
    "SITE_SOCIAL_WEBSITE": (("social", "website"), "str"),
    "SITE_SOCIAL_GITHUB": (("social", "github"), "str"),
    "SITE_SOCIAL_TWITTER": (("social", "twitter"), "str"),
}

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})
_INT_RE = re.compile(r"^[+-]?\d+$")


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def resolve_config_path(config_path: Path | str | None, env: EnvironmentPort) -> Path:
    """Explicit path, then SITE_CONFIG_PATH, then site.yaml at the project root."""
    if config_path is not None:
        return Path(config_path)

    env_path = env.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_CONFIG_PATH


def coerce_env_value(value: str, kind: str) -> Any:
    """
    Convert an environment string to the field's type.

    Values that don't parse are returned unchanged so validation can
    report them against the right field.
    """
    if kind == "bool":
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        return value
    if kind == "int":
        stripped = value.strip()
        if _INT_RE.match(stripped):
            return int(stripped)
        return value
    return value


def apply_env_overrides(raw: dict[str, Any], env: EnvironmentPort) -> dict[str, Any]:
    """Return a copy of raw with SITE_* environment overrides applied."""
    result = copy.deepcopy(raw)

    for env_key, (path, kind) in ENV_OVERRIDES.items():
        value = env.get(env_key)
        if value is None:
            continue

        target = result
        for part in path[:-1]:
            target = target.setdefault(part, {})
            if not isinstance(target, dict):
                break
        else:
            target[path[-1]] = coerce_env_value(value, kind)
            logger.debug("Applied %s override to %s", env_key, ".".join(path))
            continue

        logger.debug("Skipped %s override: %s is not a mapping", env_key, path[0])

    return result


def _read_file(path: Path, fs: FileSystemPort) -> Any:
    suffix = path.suffix.lower()
    if suffix in YAML_SUFFIXES:
        return fs.read_yaml(path)
    return fs.read_json(path)


def _failure(code: str, message: str, source: Path) -> LoadSiteConfigOutput:
    return LoadSiteConfigOutput(
        raw={},
        errors=[Violation(field=SOURCE_FIELD, code=code, message=message)],
        success=False,
        source=source,
    )


def run_load(
    inp: LoadSiteConfigInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> LoadSiteConfigOutput:
    """
    Load the raw config record from the file system.

    Args:
        inp: Input containing optional config path.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        LoadSiteConfigOutput with the raw record or errors.
    """
    config_path = resolve_config_path(inp.config_path, env)
    logger.debug("Resolved site config path: %s", config_path)

    if config_path.suffix.lower() not in YAML_SUFFIXES + JSON_SUFFIXES:
        return _failure(
            "unsupported_format",
            f"Unsupported config format '{config_path.suffix}': use .yaml, .yml or .json",
            config_path,
        )

    if not fs.exists(config_path):
        return _failure("not_found", f"Site config file not found: {config_path}", config_path)

    try:
        data = _read_file(config_path, fs)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return _failure("parse_error", f"Failed to parse site config file: {e}", config_path)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        return LoadSiteConfigOutput(
            raw={},
            errors=[
                Violation(
                    field=SCHEMA_FIELD,
                    code="invalid_type",
                    message=f"Site config must be a mapping, got {type(data).__name__}",
                )
            ],
            success=False,
            source=config_path,
        )

    if inp.apply_env:
        data = apply_env_overrides(data, env)

    return LoadSiteConfigOutput(raw=data, errors=[], success=True, source=config_path)


def run_validate(inp: ValidateSiteConfigInput) -> ValidateSiteConfigOutput:
    """
    Validate a raw record.

    Pure function - no I/O operations.

    Args:
        inp: Input containing the raw record.

    Returns:
        ValidateSiteConfigOutput with the config or every violation found.
    """
    config, errors = validate_site_config(inp.raw)
    return ValidateSiteConfigOutput(config=config, errors=errors, is_valid=config is not None)


def run(
    inp: LoadSiteConfigInput,
    *,
    fs: FileSystemPort,
    env: EnvironmentPort,
) -> ValidateSiteConfigOutput:
    """
    Load and validate the site config.

    This is the main entry point for the site config component.

    Args:
        inp: Input containing optional config path.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        ValidateSiteConfigOutput with the validated config or errors.
    """
    load_result = run_load(inp, fs=fs, env=env)
    if not load_result.success:
        return ValidateSiteConfigOutput(config=None, errors=load_result.errors, is_valid=False)

    return run_validate(ValidateSiteConfigInput(raw=load_result.raw))
