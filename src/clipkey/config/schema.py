"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]

OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class LimitsConfig:
    min_length: int = 10  # shorter inputs are never secrets
    max_length: int = 256  # longer inputs are documents, not keys


@dataclass
class PrefixesConfig:
    disable: List[str] = field(default_factory=list)  # KeyPrefix ids


@dataclass
class DenylistConfig:
    markers: List[str] = field(default_factory=list)  # added to the built-in markers


@dataclass
class DomainsConfig:
    suffixes: List[str] = field(default_factory=list)  # added to the built-in suffixes


@dataclass
class AllowlistConfig:
    patterns: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    redact_all: bool = False


@dataclass
class ClipkeyConfig:
    version: str = "1.0"
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    prefixes: PrefixesConfig = field(default_factory=PrefixesConfig)
    denylist: DenylistConfig = field(default_factory=DenylistConfig)
    domains: DomainsConfig = field(default_factory=DomainsConfig)
    allowlist: AllowlistConfig = field(default_factory=AllowlistConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
