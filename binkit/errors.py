"""
binkit - errors
---------------

A small, consistent error system for the byte utilities.

Design goals
------------
- One root `BinkitError` with machine-friendly `code` and optional `data`.
- Concrete subclasses for the failure kinds callers branch on
  (invalid argument, invalid textual format, invalid hex, configuration).
- Safe JSON representation (`to_dict`) suitable for logs and CLI output.

Argument and format errors also derive from `ValueError`, so callers that only
know the builtin hierarchy still catch them.

This module uses only stdlib.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

# ---------------------------------------------------------------------------
# Error codes & classes
# ---------------------------------------------------------------------------


class ErrorCode(str, Enum):
    INTERNAL = "BINKIT/INTERNAL"
    INVALID_ARGUMENT = "BINKIT/INVALID_ARGUMENT"
    INVALID_FORMAT = "BINKIT/INVALID_FORMAT"
    INVALID_HEX = "BINKIT/INVALID_HEX"
    CONFIG = "BINKIT/CONFIG"


@dataclass(eq=False)
class BinkitError(Exception):
    """
    Root error for binkit.

    Attributes
    ----------
    code: str
        Machine-stable error code (see ErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (sizes, widths, offending input). JSON-serializable.
    cause: Optional[BaseException]
        Wrapped original exception; not included in equality comparison.
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        Exception.__init__(self, f"{_code_value(self.code)}: {self.message}")

    def with_context(self, **ctx: Any) -> "BinkitError":
        """Return a copy with extra context merged into ``data``."""
        d = dict(self.data)
        for k, v in ctx.items():
            d[k] = _coerce_json(v)
        new = _clone(self)
        new.data = d
        return new

    def with_cause(self, exc: BaseException) -> "BinkitError":
        """Attach/replace the causal exception (returns a new instance)."""
        new = _clone(self)
        new.cause = exc
        new.__cause__ = exc
        return new

    def to_dict(self, include_cause: bool = False) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs and CLI output."""
        out = {
            "code": str(_code_value(self.code)),
            "message": self.message,
            "data": _coerce_json(self.data),
        }
        if include_cause and self.cause is not None:
            out["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return out

    def __str__(self) -> str:  # pragma: no cover - human formatting
        parts = [f"{_code_value(self.code)}: {self.message}"]
        if self.data:
            preview = ", ".join(f"{k}={_preview(v)}" for k, v in self.data.items())
            parts.append(f"[{preview}]")
        return " ".join(parts)


class InternalError(BinkitError):
    def __init__(self, message="internal error", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INTERNAL, message=message, data=_jsonmap(data)
        )


class InvalidArgument(BinkitError, ValueError):
    """Malformed mode/target/width combination or out-of-range argument."""

    def __init__(self, message="invalid argument", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT, message=message, data=_jsonmap(data)
        )


class InvalidFormat(BinkitError, ValueError):
    """Textual parse failure (numeric conversions)."""

    def __init__(self, message="invalid format", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FORMAT, message=message, data=_jsonmap(data)
        )


class InvalidHex(InvalidFormat):
    def __init__(self, encoded: Any, position: Optional[int] = None) -> None:
        super().__init__(message="invalid hex binary", input=encoded)
        self.code = ErrorCode.INVALID_HEX
        self.args = (f"{ErrorCode.INVALID_HEX.value}: {self.message}",)
        if position is not None:
            self.data["position"] = position


class ConfigError(BinkitError):
    def __init__(self, message="invalid configuration", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.CONFIG, message=message, data=_jsonmap(data)
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

T = TypeVar("T", bound=BinkitError)


def wrap(exc: BaseException, *, as_: Type[T] = InternalError, **ctx: Any) -> T:
    """
    Wrap any exception into a BinkitError subclass, attaching context.
    If `exc` is already a BinkitError, returns a context-enriched copy.
    """
    if isinstance(exc, BinkitError):
        return exc.with_context(**ctx)  # type: ignore[return-value]
    err = as_(str(exc) or "wrapped exception", **ctx)  # type: ignore[call-arg]
    return err.with_cause(exc)  # type: ignore[return-value]


def _clone(err: BinkitError) -> BinkitError:
    # Subclasses have narrower __init__ signatures; copy without calling them.
    new = err.__class__.__new__(err.__class__)
    new.__dict__.update(err.__dict__)
    new.data = dict(err.data)
    new.args = err.args
    return new


def _code_value(code: Any) -> str:
    return code.value if isinstance(code, Enum) else str(code)


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; hex-encode bytes; stringify the rest.
    if v is None or isinstance(v, (bool, int, float, str)):
        return v
    if isinstance(v, (bytes, bytearray, memoryview)):
        return bytes(v).hex()
    if isinstance(v, (list, tuple)):
        return [_coerce_json(i) for i in v]
    if isinstance(v, dict):
        return {str(k): _coerce_json(i) for k, i in v.items()}
    return str(v)


def _preview(v: Any, limit: int = 96) -> str:
    s = str(_coerce_json(v))
    return s if len(s) <= limit else s[:limit] + "…"


__all__ = [
    "ErrorCode",
    "BinkitError",
    "InternalError",
    "InvalidArgument",
    "InvalidFormat",
    "InvalidHex",
    "ConfigError",
    "wrap",
]
