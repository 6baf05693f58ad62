"""Built-in content seeded into a fresh Foreman home."""

from __future__ import annotations

from pathlib import Path

_RESOURCES = Path(__file__).parent / "resources"

DEFAULT_USER_CONFIG = (_RESOURCES / "default-foreman.toml").read_text(encoding="utf-8")

DEFAULT_AUTH_CONFIG = """\
# This file is for authentication tokens managed by Foreman.
# Tokens are used to raise rate limits and reach private releases.

# github = "YOUR_TOKEN_HERE"
# gitlab = "YOUR_TOKEN_HERE"
# artifactory = "YOUR_TOKEN_HERE"
"""
