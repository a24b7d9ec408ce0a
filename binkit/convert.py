"""
binkit.convert
==============

Conversions between byte sequences and other values:

- `to_binary`: any value → bytes (one rule per kind of value)
- `Symbol` / `SymbolTable` / `try_binary_to_existing_symbol`: interned
  symbol lookup with a byte-sequence fallback
- `format`: printf-style formatting into bytes
- `to_float` / `to_number`: strict numeric parsing of byte sequences

Numeric grammar
---------------
integer: ``[+-]?[0-9]+``
float:   ``[+-]?[0-9]+\\.[0-9]+([eE][+-]?[0-9]+)?``

No surrounding whitespace, no ``_`` separators, and a float needs digits on
both sides of the point (``b"1."`` and ``b".5"`` are rejected).
"""

from __future__ import annotations

import math
import re
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Set, Union

from binkit.errors import InvalidArgument, InvalidFormat, wrap
from binkit.hexcodec import BytesLike, as_bytes, is_byteslike
from binkit.logging import get_logger

log = get_logger(__name__)

_INT_RE = re.compile(rb"[+-]?[0-9]+")
_FLOAT_RE = re.compile(rb"[+-]?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")
_INT_CHUNK = 1000
# printf conversion: %[(key)][flags][width][.precision][length]type
_CONVERSION_RE = re.compile(rb"%(?:\([^)]*\))?[-#0 +]*(\*|[0-9]+)?(?:\.(\*|[0-9]*))?[hlL]?(.)", re.DOTALL)

# Accepted spellings for try_binary_to_existing_symbol.
_ENCODINGS = {
    "latin1": "latin-1",
    "latin-1": "latin-1",
    "unicode": "utf-8",
    "utf8": "utf-8",
    "utf-8": "utf-8",
}


# ---------------------------------------------------------------------------
# Symbols
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Symbol:
    """A named constant; equal names are the same symbol within a table."""

    name: str

    def __str__(self) -> str:
        return self.name


class SymbolTable:
    """
    Thread-safe interner for `Symbol` values.

    A symbol "exists" once something has interned it; lookups never create
    symbols.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._symbols: Dict[str, Symbol] = {}
        self._lock = threading.Lock()
        for name in names:
            self.intern(name)

    def intern(self, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f"symbol name must be str, got {type(name).__name__}")
        with self._lock:
            sym = self._symbols.get(name)
            if sym is None:
                sym = self._symbols[name] = Symbol(name)
            return sym

    def lookup(self, name: str) -> Optional[Symbol]:
        return self._symbols.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))


DEFAULT_SYMBOLS = SymbolTable()


def symbol(name: str) -> Symbol:
    """Intern ``name`` in the process-wide default table."""
    return DEFAULT_SYMBOLS.intern(name)


def try_binary_to_existing_symbol(
    data: BytesLike,
    encoding: str = "utf8",
    table: Optional[SymbolTable] = None,
) -> Union[Symbol, BytesLike]:
    """
    Return the already interned symbol named by ``data``, or ``data`` itself.

    ``encoding`` is one of ``latin1``, ``unicode`` or ``utf8``. Data that does
    not decode, an unknown encoding, and a name nobody interned all take the
    fallback path; this function does not raise for them.
    """
    table = DEFAULT_SYMBOLS if table is None else table
    codec = _ENCODINGS.get(str(encoding).lower())
    if codec is None or not is_byteslike(data):
        log.debug("symbol lookup skipped", extra={"encoding": str(encoding)})
        return data
    try:
        name = bytes(data).decode(codec)
    except UnicodeDecodeError:
        log.debug("symbol lookup: undecodable input", extra={"encoding": codec})
        return data
    sym = table.lookup(name)
    return data if sym is None else sym


# ---------------------------------------------------------------------------
# Value → bytes
# ---------------------------------------------------------------------------


def to_binary(value: Any) -> bytes:
    """
    Convert ``value`` to a byte sequence.

    - bytes-like → the same bytes
    - `Symbol`, `Enum` member, ``bool`` (symbol-like) → UTF-8 of the name
      (``True`` → ``b"true"``)
    - ``int`` → decimal text
    - ``float`` → shortest round-tripping text (``repr``)
    - ``str`` → UTF-8
    - anything else → UTF-8 of ``str(value)``
    """
    if is_byteslike(value):
        return bytes(value)
    if isinstance(value, Symbol):
        return value.name.encode("utf-8")
    if isinstance(value, bool):
        return b"true" if value else b"false"
    if isinstance(value, Enum):
        return value.name.encode("utf-8")
    if isinstance(value, int):
        return str(int(value)).encode("ascii")
    if isinstance(value, float):
        return repr(value).encode("ascii")
    if isinstance(value, str):
        return value.encode("utf-8")
    return str(value).encode("utf-8")


def _text_slots(tmpl: bytes) -> Set[int]:
    """Argument positions consumed by ``%s``/``%b`` conversions."""
    slots: Set[int] = set()
    pos = 0
    for m in _CONVERSION_RE.finditer(tmpl):
        width, precision, conv = m.group(1), m.group(2), m.group(3)
        if conv == b"%":
            continue
        pos += (width == b"*") + (precision == b"*")
        if conv in (b"s", b"b"):
            slots.add(pos)
        pos += 1
    return slots


def format(template: Union[BytesLike, str], args: Sequence[Any] = ()) -> bytes:
    """
    printf-style formatting into bytes: ``template % tuple(args)``.

    A ``str`` template and ``str`` arguments are UTF-8 encoded first. Any
    value given to ``%s`` or ``%b`` is rendered through `to_binary`, so
    numbers, symbols and enum members print as text; ``%d``, ``%x``, ``%f``
    and friends still take numbers. A malformed template or mismatched
    arguments raise `InvalidArgument`.

    >>> format(b"%s=%d", [b"answer", 42])
    b'answer=42'
    >>> format(b"%s/%s", [7, True])
    b'7/true'
    """
    if isinstance(template, str):
        tmpl = template.encode("utf-8")
    else:
        tmpl = as_bytes(template, name="template")
    slots = _text_slots(tmpl)
    values = tuple(
        to_binary(a) if i in slots or isinstance(a, str) else a
        for i, a in enumerate(args)
    )
    try:
        return tmpl % values
    except (TypeError, ValueError) as exc:
        raise wrap(exc, as_=InvalidArgument, template=tmpl, arity=len(values)) from exc


# ---------------------------------------------------------------------------
# bytes → numbers
# ---------------------------------------------------------------------------


def _numeric_text(data: Union[BytesLike, str]) -> bytes:
    if isinstance(data, str):
        try:
            return data.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidFormat("not a numeric representation", input=data) from None
    return as_bytes(data)


def _parse_int(raw: bytes) -> Optional[int]:
    if not _INT_RE.fullmatch(raw):
        return None
    digits = raw.lstrip(b"+-")
    # int() refuses very long digit strings, so fold them in slices
    value = 0
    for start in range(0, len(digits), _INT_CHUNK):
        chunk = digits[start : start + _INT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if raw.startswith(b"-") else value


def _parse_float(raw: bytes) -> Optional[float]:
    if not _FLOAT_RE.fullmatch(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        raise InvalidFormat("float out of range", input=raw)
    return value


def to_float(data: Union[BytesLike, str]) -> float:
    """
    Parse an integer or float representation into a float.

    >>> to_float(b"5")
    5.0
    >>> to_float(b"-1.25")
    -1.25
    """
    raw = _numeric_text(data)
    as_int = _parse_int(raw)
    if as_int is not None:
        try:
            return float(as_int)
        except OverflowError:
            raise InvalidFormat("float out of range", input=raw) from None
    as_float = _parse_float(raw)
    if as_float is None:
        raise InvalidFormat("not a numeric representation", input=raw)
    return as_float


def to_number(data: Union[BytesLike, str]) -> Union[int, float]:
    """
    Parse a numeric representation, preferring the integer form.

    >>> to_number(b"42")
    42
    >>> to_number(b"4.2")
    4.2
    """
    raw = _numeric_text(data)
    as_int = _parse_int(raw)
    if as_int is not None:
        return as_int
    as_float = _parse_float(raw)
    if as_float is None:
        raise InvalidFormat("not a numeric representation", input=raw)
    return as_float


__all__ = [
    "Symbol",
    "SymbolTable",
    "DEFAULT_SYMBOLS",
    "symbol",
    "try_binary_to_existing_symbol",
    "to_binary",
    "format",
    "to_float",
    "to_number",
]
