"""
tests.unit
==========

Small shared helpers for unit-test modules:

    from tests.unit import FIXTURES, fixture_path

Paths
-----
- Repository root is inferred relative to this file.
- Fixtures live under `tests/fixtures/`.
"""

from __future__ import annotations

from pathlib import Path

# tests/unit/__init__.py -> tests -> <root>
ROOT: Path = Path(__file__).resolve().parents[2]
FIXTURES: Path = ROOT / "tests" / "fixtures"

__all__ = ["ROOT", "FIXTURES", "fixture_path"]


def fixture_path(relpath: str) -> Path:
    """Absolute path of `tests/fixtures/<relpath>`; raises if missing."""
    path = (FIXTURES / relpath).resolve()
    if not path.exists():
        raise FileNotFoundError(str(path))
    return path
