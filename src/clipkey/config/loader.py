"""Load and merge configuration from .clipkey.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from clipkey.config.schema import (
    OUTPUT_FORMATS,
    AllowlistConfig,
    ClipkeyConfig,
    DenylistConfig,
    DomainsConfig,
    LimitsConfig,
    OutputConfig,
    PrefixesConfig,
)

CONFIG_FILENAME = ".clipkey.toml"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _env_int(name: str) -> Optional[int]:
    val = os.environ.get(name)
    if not val:
        return None
    try:
        return int(val)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, val)
        return None


def _merge_env_overrides(cfg: ClipkeyConfig) -> None:
    """Apply CLIPKEY_* environment variable overrides."""
    if val := os.environ.get("CLIPKEY_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    val = os.environ.get("CLIPKEY_DISABLE_PREFIXES")
    if val and isinstance(cfg.prefixes.disable, list):
        cfg.prefixes.disable.extend(p.strip() for p in val.split(",") if p.strip())
    if (min_length := _env_int("CLIPKEY_MIN_LENGTH")) is not None:
        cfg.limits.min_length = min_length
    if (max_length := _env_int("CLIPKEY_MAX_LENGTH")) is not None:
        cfg.limits.max_length = max_length


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    section_data = data.get(section, {})
    if not isinstance(section_data, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in section_data.items() if k in valid_fields}
    return cls(**filtered)


def validate(cfg: ClipkeyConfig) -> None:
    """Reject settings the classifier cannot work with."""
    limits = cfg.limits
    if not isinstance(limits.min_length, int) or not isinstance(limits.max_length, int):
        raise ConfigError("[limits] min_length and max_length must be integers")
    if limits.min_length < 1:
        raise ConfigError(f"[limits] min_length must be at least 1, got {limits.min_length}")
    if limits.max_length < limits.min_length:
        raise ConfigError(
            f"[limits] max_length ({limits.max_length}) is below min_length ({limits.min_length})"
        )
    for name, value in (
        ("prefixes.disable", cfg.prefixes.disable),
        ("denylist.markers", cfg.denylist.markers),
        ("domains.suffixes", cfg.domains.suffixes),
        ("allowlist.patterns", cfg.allowlist.patterns),
    ):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            section, key = name.split(".")
            raise ConfigError(f"[{section}] {key} must be a list of strings")
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"[output] unknown format: {cfg.output.format}")
    if not isinstance(cfg.output.redact_all, bool):
        raise ConfigError("[output] redact_all must be true or false")


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> ClipkeyConfig:
    """Load, validate, and return a ClipkeyConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = ClipkeyConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = ClipkeyConfig(
            version=raw.get("version", "1.0"),
            limits=_build_section(raw, LimitsConfig, "limits"),
            prefixes=_build_section(raw, PrefixesConfig, "prefixes"),
            denylist=_build_section(raw, DenylistConfig, "denylist"),
            domains=_build_section(raw, DomainsConfig, "domains"),
            allowlist=_build_section(raw, AllowlistConfig, "allowlist"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        logger.debug("Loaded config from %s", config_path)

    _merge_env_overrides(cfg)
    validate(cfg)
    return cfg
