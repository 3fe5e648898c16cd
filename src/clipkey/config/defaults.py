"""Starter .clipkey.toml template."""

DEFAULT_TOML = """\
# clipkey configuration
version = "1.0"

[limits]
min_length = 10           # shorter values are never flagged
max_length = 256          # longer values are treated as documents

[prefixes]
# disable = ["STRIPE_PUBLISHABLE_LIVE"]   # built-in or custom prefix ids

[denylist]
# markers = ["changeme", "redacted"]     # extra placeholder markers

[domains]
# suffixes = [".internal.example.org"]   # extra credential-bearing hostnames

[allowlist]
# patterns = ["^build-[0-9a-f]{40}$"]     # regexes for known non-secrets

[output]
format = "terminal"       # terminal | json
redact_all = false        # hide every character of flagged values
"""
