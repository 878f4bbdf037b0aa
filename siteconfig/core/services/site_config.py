"""
Site config loader, validator and store.

load_site_config() is a pure transform from a raw mapping to a SiteConfig.
Every violation is collected in a single pass so one run reports everything
wrong with the input.

ConfigStore holds the loaded config for the lifetime of a build process. It is
created once at startup and handed to whatever needs to read the config.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from siteconfig.core.entities import SiteConfig

logger = logging.getLogger(__name__)

SCHEMA_FIELD = "_schema"

# pydantic error type -> violation code
_ERROR_CODES: dict[str, str] = {
    "missing": "required",
    "extra_forbidden": "unknown_field",
    "string_type": "invalid_type",
    "int_type": "invalid_type",
    "bool_type": "invalid_type",
    "model_type": "invalid_type",
    "model_attributes_type": "invalid_type",
    "dict_type": "invalid_type",
    "string_pattern_mismatch": "invalid_format",
    "greater_than": "out_of_range",
    "empty": "empty",
    "invalid_url": "invalid_url",
}

# python attribute name -> external field name
_EXTERNAL_NAMES: dict[str, str] = {
    name: info.alias for name, info in SiteConfig.model_fields.items() if info.alias
}


@dataclass(frozen=True)
class Violation:
    """A single problem found in a raw config record."""

    field: str
    code: str
    message: str


class SiteConfigError(Exception):
    """Base class for site config errors."""


class ValidationError(SiteConfigError):
    """Raised when a raw config record fails validation."""

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = violations
        super().__init__(
            f"Site config validation failed: {'; '.join(v.message for v in violations)}"
        )

    @property
    def missing_fields(self) -> list[str]:
        return [v.field for v in self.violations if v.code == "required"]


class NotLoadedError(SiteConfigError):
    """Raised when the config is read before a successful load."""


class AlreadyLoadedError(SiteConfigError):
    """Raised when loading into a store that already holds a config."""


def _violations_from_pydantic(exc: PydanticValidationError) -> list[Violation]:
    violations: list[Violation] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if loc and loc[0] in _EXTERNAL_NAMES:
            loc = (_EXTERNAL_NAMES[loc[0]], *loc[1:])
        field = ".".join(str(part) for part in loc) if loc else SCHEMA_FIELD
        code = _ERROR_CODES.get(error.get("type", ""), "invalid_value")
        msg = error.get("msg", "Invalid value")
        violations.append(Violation(field=field, code=code, message=f"Field '{field}': {msg}"))
    return violations


def validate_site_config(raw: Any) -> tuple[SiteConfig | None, list[Violation]]:
    """Validate raw, returning (config, []) or (None, violations)."""
    data = dict(raw) if isinstance(raw, Mapping) else raw
    try:
        return SiteConfig.model_validate(data), []
    except PydanticValidationError as e:
        return None, _violations_from_pydantic(e)


def collect_violations(raw: Any) -> list[Violation]:
    """
    Validate a raw record without raising.

    Returns:
        List of violations (empty if valid).
    """
    _, violations = validate_site_config(raw)
    return violations


def load_site_config(raw: Mapping[str, Any]) -> SiteConfig:
    """
    Build a SiteConfig from a raw mapping of external field names.

    Optional fields get their defaults. No side effects.

    Raises:
        ValidationError: listing every missing or invalid field.
    """
    config, violations = validate_site_config(raw)
    if config is None:
        raise ValidationError(violations)
    return config


class ConfigStore:
    """
    Write-once holder for the process's SiteConfig.

    A failed load leaves the store empty so the input can be fixed and
    loaded again. After a successful load the record is read-only and can be
    shared between readers without locking.
    """

    def __init__(self) -> None:
        self._config: SiteConfig | None = None

    @property
    def is_loaded(self) -> bool:
        return self._config is not None

    def load(self, raw: Mapping[str, Any]) -> SiteConfig:
        """
        Validate raw and keep the result.

        Raises:
            AlreadyLoadedError: If a config was already loaded.
            ValidationError: If raw fails validation.
        """
        if self._config is not None:
            raise AlreadyLoadedError("Site config already loaded for this process")

        try:
            config = load_site_config(raw)
        except ValidationError as e:
            logger.warning("Site config rejected with %d violation(s)", len(e.violations))
            raise

        self._config = config
        logger.info("Site config loaded: %r by %s", config.title, config.author)
        return config

    def get(self) -> SiteConfig:
        """
        Get the loaded config.

        Raises:
            NotLoadedError: If load() has not succeeded yet.
        """
        if self._config is None:
            raise NotLoadedError("Site config not loaded. Call ConfigStore.load() at startup.")
        return self._config
