"""
binkit - logging
----------------

Structured logging for the library and the CLI:
- JSON or concise colored text formats
- Safe JSON serialization (bytes → hex, Paths → str)
- Simple, dependency-free setup (stdlib only)

Library modules only ever obtain loggers through `get_logger` and emit DEBUG
records; handlers are installed by the application (or the `binkit` CLI)
through `configure`.

Usage
-----
    from binkit import logging as blog

    blog.configure(json=False, level="DEBUG")
    log = blog.get_logger(__name__)
    log.debug("stripped", extra={"removed": 3})
"""

from __future__ import annotations

import datetime as _dt
import io
import json
import logging
import os
import sys
import traceback
import types
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "binkit"

# LogRecord attributes that are not structured extras.
_RESERVED = frozenset(
    (
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
    )
)

_LEVEL_TO_INT = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

ANSI = types.SimpleNamespace(
    RESET="\x1b[0m",
    BOLD="\x1b[1m",
    FG=types.SimpleNamespace(
        RED="\x1b[31m",
        GREEN="\x1b[32m",
        YELLOW="\x1b[33m",
        MAGENTA="\x1b[35m",
        CYAN="\x1b[36m",
        GREY="\x1b[90m",
        WHITE="\x1b[37m",
    ),
)

_LEVEL_COLOR = {
    logging.DEBUG: ANSI.FG.GREY,
    logging.INFO: ANSI.FG.GREEN,
    logging.WARNING: ANSI.FG.YELLOW,
    logging.ERROR: ANSI.FG.RED,
    logging.CRITICAL: ANSI.BOLD + ANSI.FG.MAGENTA,
}


def _utcnow_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat(timespec="milliseconds")


def _supports_color(stream: Any) -> bool:
    try:
        return stream.isatty() and os.environ.get("NO_COLOR") is None
    except Exception:
        return False


def _coerce_value(v: Any) -> Any:
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v).hex()
    if isinstance(v, (list, tuple)):
        return [_coerce_value(i) for i in v]
    if isinstance(v, dict):
        return {str(k): _coerce_value(i) for k, i in v.items()}
    if isinstance(v, Path):
        return str(v)
    if is_dataclass(v) and not isinstance(v, type):
        return _coerce_value(asdict(v))
    return str(v)


def _extras(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        k: _coerce_value(v)
        for k, v in record.__dict__.items()
        if not k.startswith("_") and k not in _RESERVED and k != "message"
    }


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": _utcnow_iso(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k, v in _extras(record).items():
            payload.setdefault(k, v)

        if record.exc_info:
            payload["err"] = "".join(
                traceback.format_exception(*record.exc_info)
            ).rstrip()

        return json.dumps(payload, separators=(",", ":"), default=str)


class TextFormatter(logging.Formatter):
    """
    Human-friendly one-liner:
      2026-01-05T12:34:56.789+00:00 | DEBUG | binkit.rand | duplicate=1 | redraw
    With colors when supported.
    """

    def __init__(self, stream: Any = None):
        super().__init__()
        self._color = _supports_color(stream) if stream is not None else False

    def format(self, record: logging.LogRecord) -> str:
        ts = _utcnow_iso()
        lvl = record.levelname
        name = record.name
        extras = " ".join(f"{k}={v}" for k, v in _extras(record).items())

        if self._color:
            c = _LEVEL_COLOR.get(record.levelno, ANSI.FG.WHITE)
            lvl_s = f"{c}{lvl:<5}{ANSI.RESET}"
            name_s = f"{ANSI.FG.CYAN}{name}{ANSI.RESET}"
            ts_s = f"{ANSI.FG.GREY}{ts}{ANSI.RESET}"
        else:
            lvl_s = f"{lvl:<5}"
            name_s = name
            ts_s = ts

        line = f"{ts_s} | {lvl_s} | {name_s}"
        if extras:
            line += f" | {extras}"
        line += f" | {record.getMessage()}"

        if record.exc_info:
            tb = "".join(traceback.format_exception(*record.exc_info)).rstrip()
            line += "\n" + tb
        return line


# ----------------------------
# Public setup API
# ----------------------------


def configure(
    *,
    json: Optional[bool] = None,
    level: str | int = "INFO",
    stream: io.TextIOBase | Any = None,
) -> logging.Logger:
    """
    Configure the ``binkit`` logger with a single console handler.

    Parameters
    ----------
    json : bool | None
        If None, determined by env BINKIT_LOG_FORMAT=(json|text) and TTY detection.
    level : str | int
        Minimum log level.
    stream : TextIO
        Stream for the console handler (default: stderr).
    """
    stream = stream if stream is not None else sys.stderr
    chosen_json = _decide_json(json, stream)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(coerce_level(level))
    for h in list(logger.handlers):
        logger.removeHandler(h)

    console = logging.StreamHandler(stream)
    console.setLevel(coerce_level(level))
    console.setFormatter(JSONFormatter() if chosen_json else TextFormatter(stream))
    logger.addHandler(console)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a stdlib logger inside the ``binkit`` namespace."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return _LEVEL_TO_INT.get(level.strip().upper(), logging.INFO)


# ----------------------------
# Internals
# ----------------------------


def _decide_json(json_flag: Optional[bool], stream: Any) -> bool:
    if json_flag is not None:
        return json_flag
    env = _env_json_override()
    if env is not None:
        return env
    # JSON when piped, text when interactive
    return not _supports_color(stream)


def _env_json_override() -> Optional[bool]:
    env = os.environ.get("BINKIT_LOG_FORMAT", "").strip().lower()
    if env == "json":
        return True
    if env == "text":
        return False
    return None


# Library default: stay silent unless the application configures handlers.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


__all__ = [
    "ROOT_LOGGER_NAME",
    "JSONFormatter",
    "TextFormatter",
    "configure",
    "get_logger",
    "coerce_level",
]
