"""Lookup tables — models, registry, built-in tables."""

from clipkey.rules.models import KeyPrefix, RuleSet
from clipkey.rules.registry import RuleError, RuleRegistry, build_registry

__all__ = ["KeyPrefix", "RuleError", "RuleRegistry", "RuleSet", "build_registry"]
