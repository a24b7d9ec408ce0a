"""
Version helpers for binkit.

- Exposes __version__ (PEP 440-compatible when possible).
- Best-effort detection from:
    1) BINKIT_VERSION env var (authoritative override)
    2) installed distribution metadata
    3) fallback DEFAULT_VERSION

This module has **no external dependencies** and is safe to import very early.
"""

from __future__ import annotations

import os
from importlib.metadata import PackageNotFoundError, version as _pkg_version

DEFAULT_VERSION = "0.1.0"
DISTRIBUTION = "binkit"


def resolve_version() -> str:
    """
    Determine the version string in priority:
      1) BINKIT_VERSION environment variable (verbatim)
      2) package metadata of the installed distribution
      3) DEFAULT_VERSION
    """
    env = os.getenv("BINKIT_VERSION")
    if env and env.strip():
        return env.strip()
    try:
        return _pkg_version(DISTRIBUTION)
    except PackageNotFoundError:
        return DEFAULT_VERSION


__version__ = resolve_version()


if __name__ == "__main__":
    print(__version__)
