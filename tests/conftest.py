"""Shared test fixtures — sample values and config directories."""

from __future__ import annotations

from pathlib import Path

import pytest

from samples import AWS_KEY, RANDOM_TOKEN


@pytest.fixture
def aws_key() -> str:
    return AWS_KEY


@pytest.fixture
def random_token() -> str:
    return RANDOM_TOKEN


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A working directory with a .clipkey.toml and a custom prefix file."""
    (tmp_path / ".clipkey.toml").write_text(
        'version = "1.0"\n'
        "[limits]\n"
        "min_length = 12\n"
        "[domains]\n"
        'suffixes = ["internal.acmecloud.io"]\n'
        "[allowlist]\n"
        'patterns = ["^build-[0-9a-f]+$"]\n'
    )
    prefixes = tmp_path / ".clipkey-prefixes"
    prefixes.mkdir()
    (prefixes / "acme.yaml").write_text(
        "- id: ACME_KEY\n"
        "  name: Acme API Key\n"
        "  prefix: acme_\n"
        "  min_length: 24\n"
    )
    return tmp_path
