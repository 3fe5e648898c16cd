"""Tests for structural hard signals."""

import pytest

from clipkey.classifier.hard_signals import (
    UNDECIDED,
    HardSignal,
    hard_signal,
    looks_like_base64,
    looks_like_hex,
    looks_like_jwt,
)
from clipkey.rules.builtin import DEFAULT_RULES

from samples import AWS_KEY, BASE64_BLOB, GITHUB_PAT, GOOGLE_CLIENT_ID, LONG_JWT, SHA256_HEX, SHORT_JWT


def _signal(s: str):
    return hard_signal(s, len(s), DEFAULT_RULES)


class TestKnownPrefixes:
    def test_aws_key(self):
        match = _signal(AWS_KEY)
        assert match.signal is HardSignal.POSITIVE
        assert match.label == "AWS Access Key ID"

    def test_github_pat(self):
        match = _signal(GITHUB_PAT)
        assert match.signal is HardSignal.POSITIVE
        assert match.label == "GitHub Personal Access Token"
        assert match.reason == "GitHub Personal Access Token prefix"

    def test_generic_fallback(self):
        # glpat- has no minimum of its own; 20 chars clears the generic 16
        match = _signal("glpat-Xy7Qm2Rv9Kt4Wp")
        assert match.signal is HardSignal.POSITIVE
        assert match.reason == "known prefix 'glpat-'"

    def test_below_minimum_and_fallback_undecided(self):
        assert _signal("ghp_a1B2c3D4e") == UNDECIDED

    def test_prefix_is_case_sensitive(self):
        assert _signal("akiaz7q2m4x9b3k8w1r5").signal is HardSignal.UNDECIDED


class TestJwt:
    def test_long_jwt(self):
        assert len(LONG_JWT) == 155
        match = _signal(LONG_JWT)
        assert match.signal is HardSignal.POSITIVE
        assert match.reason == "JSON Web Token"

    def test_short_jwt_is_not_a_hard_signal(self):
        assert len(SHORT_JWT) == 92
        assert looks_like_jwt(SHORT_JWT) is True
        assert _signal(SHORT_JWT) == UNDECIDED

    def test_shape(self):
        assert looks_like_jwt("abcdefgh.ijklmnop.qrstuvwx") is True
        assert looks_like_jwt("abcdefgh.ijklmnop") is False
        assert looks_like_jwt("abcdefgh.ijk.qrstuvwx") is False
        assert looks_like_jwt("abcdefgh.ijkl+nop.qrstuvwx") is False
        assert looks_like_jwt("abcdefgh.ijklmnop.qrstuvwx.yz") is False


class TestBlobs:
    def test_hex(self):
        assert _signal(SHA256_HEX).reason == "hex blob"

    def test_hex_bounds(self):
        assert looks_like_hex("deadBEEF0123") is True
        assert looks_like_hex("deadbeeg") is False
        assert _signal("a1" * 15) == UNDECIDED  # 30 chars
        assert _signal("a1b2" * 33).reason != "hex blob"  # 132 chars

    def test_base64(self):
        assert _signal(BASE64_BLOB).reason == "base64 blob"

    def test_base64_needs_digit_or_mark(self):
        letters = "AbCdEfGhIjKlMnOpQrStUvWxYzAbCdEf"
        assert len(letters) == 32
        assert looks_like_base64(letters) is True
        assert _signal(letters) == UNDECIDED

    def test_base64_needs_padding_multiple(self):
        assert looks_like_base64("abcd1") is False


class TestDomains:
    @pytest.mark.parametrize(
        "value",
        [GOOGLE_CLIENT_ID, "tenant42.onmicrosoft.com", "MyApp.Auth0.com", "my-proj.supabase.co/rest"],
    )
    def test_credential_domains(self, value):
        match = _signal(value)
        assert match.signal is HardSignal.POSITIVE
        assert match.reason.startswith("credential domain")

    def test_plain_text_undecided(self):
        assert _signal("ConfigurationManager") == UNDECIDED
