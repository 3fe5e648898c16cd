"""Tests for lookup-table models, the registry, and built-in tables."""

import pytest
import yaml

from clipkey import Classifier, Stage
from clipkey.config.schema import ClipkeyConfig, PrefixesConfig
from clipkey.rules.builtin import ALL_BUILTIN_PREFIXES, DEFAULT_RULES, PLACEHOLDER_MARKERS
from clipkey.rules.models import KeyPrefix, RuleSet
from clipkey.rules.registry import RuleError, RuleRegistry, build_registry, builtin_registry

from samples import AWS_KEY


class TestKeyPrefixModel:
    def test_matches(self):
        prefix = KeyPrefix(id="T", name="T", prefix="abc_")
        assert prefix.matches("abc_123") is True
        assert prefix.matches("ABC_123") is False

    def test_frozen(self):
        prefix = KeyPrefix(id="T", name="T", prefix="abc_")
        with pytest.raises(AttributeError):
            prefix.prefix = "x"  # type: ignore[misc]


class TestRuleSet:
    def test_match_prefix(self):
        assert DEFAULT_RULES.match_prefix(AWS_KEY).id == "AWS_ACCESS_KEY"
        assert DEFAULT_RULES.match_prefix("nothing here") is None

    def test_has_domain_suffix_or_contains(self):
        assert DEFAULT_RULES.has_domain("x.okta.com") == ".okta.com"
        assert DEFAULT_RULES.has_domain("x.okta.com.evil") == ".okta.com"
        assert DEFAULT_RULES.has_domain("okta.com") is None

    def test_empty_ruleset_rejects_nothing(self):
        empty = RuleSet()
        assert empty.has_marker("example") is None
        assert empty.is_allowlisted("anything") is False


class TestRuleRegistry:
    def test_register_and_query(self):
        reg = RuleRegistry()
        prefix = KeyPrefix(id="P1", name="P1", prefix="p1_")
        reg.register(prefix)
        assert reg.get("P1") is prefix
        assert len(reg.all_prefixes) == 1

    def test_disable(self):
        reg = RuleRegistry()
        reg.register_many([
            KeyPrefix(id="P1", name="P1", prefix="p1_"),
            KeyPrefix(id="P2", name="P2", prefix="p2_"),
        ])
        cfg = ClipkeyConfig()
        cfg.prefixes = PrefixesConfig(disable=["P2"])
        reg.apply_config(cfg)

        enabled = reg.enabled_prefixes()
        assert [p.id for p in enabled] == ["P1"]
        assert [p.id for p in reg.build().prefixes] == ["P1"]

    def test_markers_lowercased_and_unique(self):
        reg = RuleRegistry()
        reg.add_markers(["ChangeMe", "changeme", ""])
        assert reg.build().markers == ("changeme",)

    def test_domains_get_leading_dot(self):
        reg = RuleRegistry()
        reg.add_domains(["Corp.Acme.io", ".other.io"])
        assert reg.build().domains == (".corp.acme.io", ".other.io")

    def test_invalid_allowlist_pattern(self):
        reg = RuleRegistry()
        reg.add_allowlist(["(unclosed"])
        with pytest.raises(RuleError):
            reg.build()

    def test_builtin_registry_matches_default_rules(self):
        assert builtin_registry().build() == DEFAULT_RULES

    def test_load_custom_yaml_prefixes(self, tmp_path):
        prefix_dir = tmp_path / ".clipkey-prefixes"
        prefix_dir.mkdir()
        (prefix_dir / "custom.yaml").write_text(yaml.dump([{
            "id": "CUSTOM_1",
            "name": "Custom Key",
            "prefix": "cst_",
            "min_length": 30,
        }]))
        (prefix_dir / "notes.txt").write_text("ignored")

        reg = RuleRegistry()
        assert reg.load_custom_prefixes(prefix_dir) == 1
        assert reg.get("CUSTOM_1") == KeyPrefix(
            id="CUSTOM_1", name="Custom Key", prefix="cst_", min_length=30
        )

    def test_single_mapping_file(self, tmp_path):
        (tmp_path / "one.yml").write_text("id: ONE\nprefix: one_\n")
        reg = RuleRegistry()
        assert reg.load_custom_prefixes(tmp_path) == 1
        assert reg.get("ONE").name == "ONE"

    def test_missing_directory(self, tmp_path):
        assert RuleRegistry().load_custom_prefixes(tmp_path / "nope") == 0

    @pytest.mark.parametrize(
        "content",
        ["- name: no id\n  prefix: x_\n", "- id: X\n", "- id: X\n  prefix: x_\n  min_length: long\n", "[unclosed"],
    )
    def test_malformed_yaml_raises(self, tmp_path, content):
        (tmp_path / "bad.yaml").write_text(content)
        with pytest.raises(RuleError):
            RuleRegistry().load_custom_prefixes(tmp_path)


class TestBuildRegistry:
    def test_disabling_prefix_defers_to_soft_score(self, tmp_path):
        cfg = ClipkeyConfig()
        cfg.prefixes.disable = ["AWS_ACCESS_KEY"]
        clf = Classifier(build_registry(cfg, tmp_path).build())
        assert clf.classify(AWS_KEY).stage is Stage.SOFT_SCORE

    def test_custom_prefix_and_domain(self, config_dir):
        from clipkey.config.loader import load_config

        clf = Classifier.from_config(load_config(config_dir), config_dir)

        verdict = clf.classify("acme_Q7x2Lm9Rt4Wv8Kp3Zb1N")
        assert verdict.is_secret is True
        assert verdict.label == "Acme API Key"
        assert verdict.reason == "Acme API Key prefix"

        verdict = clf.classify("svc-7731.internal.acmecloud.io")
        assert verdict.stage is Stage.HARD_SIGNAL
        assert verdict.is_secret is True

    def test_allowlist_and_limits_from_config(self, config_dir):
        from clipkey.config.loader import load_config

        clf = Classifier.from_config(load_config(config_dir), config_dir)
        assert clf.min_length == 12
        verdict = clf.classify("build-9f86d081884c7d65")
        assert verdict.stage is Stage.QUICK_REJECT
        assert verdict.reason == "matches allowlist"

    def test_extra_marker(self, tmp_path):
        cfg = ClipkeyConfig()
        cfg.denylist.markers = ["ACME"]
        clf = Classifier(build_registry(cfg, tmp_path).build())
        assert clf.classify("acme_Q7x2Lm9Rt4Wv8Kp3Zb1N").stage is Stage.QUICK_REJECT


class TestBuiltinTables:
    @pytest.mark.parametrize("prefix", ALL_BUILTIN_PREFIXES, ids=lambda p: p.id)
    def test_prefix_has_required_fields(self, prefix):
        assert prefix.id
        assert prefix.name
        assert prefix.prefix
        if prefix.min_length is not None:
            assert prefix.min_length > len(prefix.prefix)

    def test_prefix_ids_unique(self):
        ids = [p.id for p in ALL_BUILTIN_PREFIXES]
        assert len(ids) == len(set(ids))

    def test_markers_lowercase(self):
        assert all(m == m.lower() for m in PLACEHOLDER_MARKERS)
