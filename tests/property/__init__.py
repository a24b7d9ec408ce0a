"""
tests.property package bootstrap.

Hypothesis profiles for the binkit property tests.

- dev:  100 examples, random (local default)
- ci:   300 examples, derandomized, verbose (picked when CI is truthy)
- fast: 25 examples, for quick edit/test loops

HYPOTHESIS_PROFILE=dev|ci|fast overrides the automatic choice. Per-test
tweaks go through @settings(...) on the test itself.
"""
from __future__ import annotations

import os
from typing import Final

from hypothesis import HealthCheck, Verbosity, given, settings
from hypothesis import strategies as st

_SUPPRESS = (HealthCheck.too_slow, HealthCheck.filter_too_much)

settings.register_profile(
    "dev",
    settings(max_examples=100, deadline=None, suppress_health_check=_SUPPRESS),
)
settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=_SUPPRESS,
        verbosity=Verbosity.verbose,
        derandomize=True,
    ),
)
settings.register_profile(
    "fast",
    settings(max_examples=25, deadline=None, suppress_health_check=_SUPPRESS),
)


def _env_truthy(name: str) -> bool:
    return (os.getenv(name) or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or ("ci" if _env_truthy("CI") else "dev")
settings.load_profile(_active)


def active_profile() -> str:
    """Return the name of the active Hypothesis profile."""
    return _active


def small_alphabet(max_size: int = 64):
    """Bytes over a three-letter alphabet, so strip targets actually match."""
    return st.lists(st.sampled_from(b"abc"), max_size=max_size).map(bytes)


__all__ = ["st", "given", "settings", "active_profile", "small_alphabet"]
