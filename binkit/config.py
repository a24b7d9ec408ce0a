"""
binkit configuration loader.

Goals
-----
- Zero external deps (stdlib only).
- Layered config with clear precedence:
    1) Explicit overrides passed to `load()` (highest)
    2) Environment variables (BINKIT_*)
    3) Config file (TOML or JSON)
    4) Built-in defaults (lowest)
- Typed dataclass with validation.

The library functions keep their literal defaults (a single space for strip,
``b"..."`` for abbreviate); this configuration feeds the `binkit` CLI and
applications that want those defaults to be operator-tunable.
"""

from __future__ import annotations

import json
import os
import sys
import tomllib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from binkit.errors import ConfigError

# ------------------------------
# Defaults & helpers
# ------------------------------

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STRIP_TARGET = b" "
DEFAULT_ELLIPSIS = b"..."

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "WARN", "INFO", "DEBUG", "NOTSET"}
_LOG_FORMATS = {"json", "text"}


def _expand(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def _parse_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _as_bytes(value: Any, name: str) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise ConfigError(f"{name} must be text or bytes", field=name, got=type(value).__name__)


# ------------------------------
# Typed configuration model
# ------------------------------

@dataclass
class Config:
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: Optional[str] = None  # None = auto (JSON when not a TTY)
    strip_target: bytes = DEFAULT_STRIP_TARGET
    ellipsis: bytes = DEFAULT_ELLIPSIS
    hex_uppercase: bool = False

    @property
    def json_logs(self) -> Optional[bool]:
        if self.log_format is None:
            return None
        return self.log_format == "json"

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        for k in ("strip_target", "ellipsis"):
            d[k] = d[k].decode("utf-8", errors="backslashreplace")
        return d


# ------------------------------
# File loader (TOML / JSON)
# ------------------------------

def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError("config file not found", path=str(path))
    suffix = path.suffix.lower()
    if suffix not in {".toml", ".tml", ".json"}:
        raise ConfigError(f"unsupported config format: {suffix}; use .toml or .json", path=str(path))
    try:
        with path.open("rb") as f:
            data = json.load(f) if suffix == ".json" else tomllib.load(f)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError("config file does not parse", path=str(path), reason=str(e)) from e
    except OSError as e:
        raise ConfigError("config file cannot be read", path=str(path), reason=str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError("config root must be a table", path=str(path))
    # Allow either a flat table or a [binkit] section.
    section = data.get("binkit", data)
    if not isinstance(section, dict):
        raise ConfigError("config root must be a table", path=str(path))
    return section


def _env_layer() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if "BINKIT_LOG_LEVEL" in os.environ:
        out["log_level"] = os.environ["BINKIT_LOG_LEVEL"]
    if "BINKIT_LOG_FORMAT" in os.environ:
        out["log_format"] = os.environ["BINKIT_LOG_FORMAT"]
    if "BINKIT_STRIP_TARGET" in os.environ:
        out["strip_target"] = os.environ["BINKIT_STRIP_TARGET"]
    if "BINKIT_ELLIPSIS" in os.environ:
        out["ellipsis"] = os.environ["BINKIT_ELLIPSIS"]
    if "BINKIT_HEX_UPPERCASE" in os.environ:
        out["hex_uppercase"] = _parse_bool(os.environ["BINKIT_HEX_UPPERCASE"])
    return out


# ------------------------------
# Main loader
# ------------------------------

def load(config_file: Optional[str | Path] = None, **overrides: Any) -> Config:
    """
    Load the binkit configuration.

    Precedence: overrides > env > file > defaults.

    Parameters
    ----------
    config_file : str | Path | None
        Optional path to a TOML or JSON file with the keys
        log_level, log_format, strip_target, ellipsis, hex_uppercase
        (either at the top level or under a ``binkit`` table).
    overrides : Any
        Keyword overrides, e.g. load(ellipsis="…", log_level="DEBUG").
        ``None`` values are ignored.
    """
    base: Dict[str, Any] = asdict(Config())

    if config_file:
        base.update(_load_file(_expand(config_file)))

    base.update(_env_layer())
    base.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(base) - set(Config.__dataclass_fields__))
    if unknown:
        raise ConfigError("unknown config keys", keys=unknown)

    cfg = Config(
        log_level=str(base["log_level"]).strip().upper(),
        log_format=_normalize_format(base["log_format"]),
        strip_target=_as_bytes(base["strip_target"], "strip_target"),
        ellipsis=_as_bytes(base["ellipsis"], "ellipsis"),
        hex_uppercase=_coerce_bool(base["hex_uppercase"]),
    )
    _validate_config(cfg)
    return cfg


def _normalize_format(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip().lower()
    return s or None


def _coerce_bool(v: Any) -> bool:
    if isinstance(v, str):
        return _parse_bool(v)
    return bool(v)


def _validate_config(cfg: Config) -> None:
    if cfg.log_level not in _LOG_LEVELS:
        raise ConfigError("invalid log_level", got=cfg.log_level, allowed=sorted(_LOG_LEVELS))
    if cfg.log_format is not None and cfg.log_format not in _LOG_FORMATS:
        raise ConfigError("invalid log_format", got=cfg.log_format, allowed=sorted(_LOG_FORMATS))
    if len(cfg.strip_target) == 0:
        raise ConfigError("strip_target must not be empty")


# ------------------------------
# CLI helper
# ------------------------------

def main(argv: List[str] | None = None) -> int:
    """
    CLI usage:

        python -m binkit.config                      # load defaults/env; print JSON
        python -m binkit.config path/to/binkit.toml  # load file; print JSON
    """
    argv = list(argv if argv is not None else sys.argv[1:])
    path = argv[0] if argv else None
    try:
        cfg = load(path)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2
    print(json.dumps(cfg.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
