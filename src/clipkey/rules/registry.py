"""Prefix registry — loads built-in and custom prefixes, applies config filters."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Set

import yaml

from clipkey.config.schema import ClipkeyConfig
from clipkey.rules.models import KeyPrefix, RuleSet

CUSTOM_PREFIX_DIR = ".clipkey-prefixes"

logger = logging.getLogger(__name__)


class RuleError(Exception):
    """Raised when a custom prefix file or allowlist pattern is malformed."""


class RuleRegistry:
    """Mutable builder for the classifier's lookup tables."""

    def __init__(self) -> None:
        self._prefixes: Dict[str, KeyPrefix] = {}
        self._disabled: Set[str] = set()
        self._markers: List[str] = []
        self._domains: List[str] = []
        self._common_words: List[str] = []
        self._allowlist: List[str] = []

    # ---- registration ----

    def register(self, prefix: KeyPrefix) -> None:
        self._prefixes[prefix.id] = prefix

    def register_many(self, prefixes: list[KeyPrefix]) -> None:
        for p in prefixes:
            self.register(p)

    def add_markers(self, markers: list[str]) -> None:
        _extend_unique(self._markers, (m.lower() for m in markers if m))

    def add_domains(self, domains: list[str]) -> None:
        _extend_unique(self._domains, (_as_suffix(d) for d in domains if d))

    def add_common_words(self, words: list[str]) -> None:
        _extend_unique(self._common_words, (w.lower() for w in words if w))

    def add_allowlist(self, patterns: list[str]) -> None:
        _extend_unique(self._allowlist, patterns)

    # ---- queries ----

    @property
    def all_prefixes(self) -> List[KeyPrefix]:
        return list(self._prefixes.values())

    def get(self, prefix_id: str) -> Optional[KeyPrefix]:
        return self._prefixes.get(prefix_id)

    def enabled_prefixes(self) -> List[KeyPrefix]:
        return [p for p in self._prefixes.values() if p.id not in self._disabled]

    # ---- config filtering ----

    def disable(self, prefix_ids: list[str]) -> None:
        for prefix_id in prefix_ids:
            if prefix_id not in self._prefixes:
                logger.warning("Cannot disable unknown prefix id %s", prefix_id)
            self._disabled.add(prefix_id)

    def apply_config(self, config: ClipkeyConfig) -> None:
        """Fold the config's extra markers, domains and disables into the tables."""
        self.disable(config.prefixes.disable)
        self.add_markers(config.denylist.markers)
        self.add_domains(config.domains.suffixes)
        self.add_allowlist(config.allowlist.patterns)

    # ---- custom prefix loading ----

    def load_custom_prefixes(self, directory: Path) -> int:
        """Load YAML prefix files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_prefixes(path)
        return count

    def _load_yaml_prefixes(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise RuleError(f"Failed to read {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "id" not in entry or "prefix" not in entry:
                raise RuleError(f"{path}: every entry needs an 'id' and a 'prefix'")
            min_length = entry.get("min_length")
            if min_length is not None and not isinstance(min_length, int):
                raise RuleError(f"{path}: min_length of {entry['id']} must be an integer")
            prefix = KeyPrefix(
                id=str(entry["id"]),
                name=str(entry.get("name", entry["id"])),
                prefix=str(entry["prefix"]),
                min_length=min_length,
            )
            self.register(prefix)
            count += 1
        return count

    # ---- freezing ----

    def build(self) -> RuleSet:
        """Snapshot the registry into an immutable RuleSet."""
        try:
            allowlist = tuple(re.compile(p, re.IGNORECASE) for p in self._allowlist)
        except re.error as exc:
            raise RuleError(f"Invalid allowlist pattern: {exc}") from exc
        return RuleSet(
            prefixes=tuple(self.enabled_prefixes()),
            markers=tuple(self._markers),
            domains=tuple(self._domains),
            common_words=tuple(self._common_words),
            allowlist=allowlist,
        )


def _as_suffix(domain: str) -> str:
    domain = domain.strip().lower()
    return domain if domain.startswith(".") else f".{domain}"


def _extend_unique(target: List[str], items) -> None:
    for item in items:
        if item not in target:
            target.append(item)


def builtin_registry() -> RuleRegistry:
    """A registry holding only the built-in tables."""
    from clipkey.rules.builtin import (
        ALL_BUILTIN_PREFIXES,
        COMMON_WORDS,
        PLACEHOLDER_MARKERS,
        SECRET_DOMAINS,
    )

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_PREFIXES)
    registry.add_markers(PLACEHOLDER_MARKERS)
    registry.add_domains(SECRET_DOMAINS)
    registry.add_common_words(COMMON_WORDS)
    return registry


def build_registry(config: ClipkeyConfig, root: Path) -> RuleRegistry:
    """Create a fully populated, config-filtered registry."""
    registry = builtin_registry()

    # Custom prefixes from .clipkey-prefixes/
    loaded = registry.load_custom_prefixes(root / CUSTOM_PREFIX_DIR)
    if loaded:
        logger.debug("Loaded %d custom prefixes", loaded)

    registry.apply_config(config)
    return registry
