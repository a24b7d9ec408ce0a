"""
binkit - command line front end for the byte utilities.

Global options:
  --config PATH                Path to a TOML/JSON config file (env: BINKIT_CONFIG)
  --log-level TEXT             Log level override
  --json-logs / --text-logs    Force the log format
  --json                       Report errors as JSON

Examples:
  binkit hex "ab_YZ"
  binkit unhex 61625f595a
  binkit strip "ababbabcabcabbab" --target ab --mode order
  binkit abbreviate "hello world" 6
  binkit fixed-encode 16 16 1.5
  binkit fixed-decode 16 16 00018000
  binkit random 8 4

Configuration is resolved in this order (highest to lowest priority):
  1. Command-line flags
  2. Environment variables (BINKIT_*)
  3. Config file (--config / BINKIT_CONFIG)
  4. Built-in defaults
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Iterator, List, Optional

import typer

from binkit import config as binkit_config
from binkit import logging as blog
from binkit.convert import to_number
from binkit.errors import BinkitError
from binkit.fixed_point import fixed_point_binary_to_number, number_to_fixed_point_binary
from binkit.hexcodec import from_hex, to_hex
from binkit.rand import generate_random_list
from binkit.strip import Direction, StripMode, strip as strip_bytes
from binkit.text import abbreviate as abbreviate_bytes
from binkit.text import fill as fill_bytes
from binkit.text import join as join_bytes
from binkit.version import __version__

app = typer.Typer(
    name="binkit",
    help="Byte-sequence utilities: hex, strip, abbreviate, fixed-point, random.",
    no_args_is_help=True,
    add_completion=False,
)

log = blog.get_logger(__name__)


class GlobalContext:
    def __init__(self) -> None:
        self.config: binkit_config.Config = binkit_config.Config()
        self.json_output: bool = False


_ctx = GlobalContext()


def _fail(err: BinkitError) -> None:
    if _ctx.json_output:
        typer.echo(json.dumps(err.to_dict(), sort_keys=True), err=True)
    else:
        typer.echo(f"error: {err}", err=True)
    raise typer.Exit(2)


@contextmanager
def _reported() -> Iterator[None]:
    try:
        yield
    except BinkitError as e:
        log.debug("command failed", extra={"code": e.to_dict()["code"]})
        _fail(e)


def _text(data: bytes) -> str:
    return data.decode("utf-8", errors="backslashreplace")


def _hex_out(data: bytes) -> str:
    h = to_hex(data).decode("ascii")
    return h.upper() if _ctx.config.hex_uppercase else h


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to config file (TOML or JSON)",
        envvar="BINKIT_CONFIG",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    ),
    json_logs: Optional[bool] = typer.Option(
        None,
        "--json-logs/--text-logs",
        help="Force JSON or text log lines",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Report errors as JSON",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
) -> None:
    """
    binkit CLI - byte-sequence utilities.

    Text arguments are taken as UTF-8 bytes.
    """
    _ctx.json_output = json_output
    log_format = None if json_logs is None else ("json" if json_logs else "text")
    with _reported():
        _ctx.config = binkit_config.load(config, log_level=log_level, log_format=log_format)
    blog.configure(json=_ctx.config.json_logs, level=_ctx.config.log_level)
    log.debug("config loaded", extra=_ctx.config.to_dict())


@app.command("hex")
def hex_cmd(value: str = typer.Argument(..., help="Text to encode")) -> None:
    """Encode text as lowercase hex."""
    typer.echo(_hex_out(value.encode("utf-8")))


@app.command("unhex")
def unhex_cmd(value: str = typer.Argument(..., help="Hex digits to decode")) -> None:
    """Decode hex digits; an odd digit count is left-padded with 0."""
    with _reported():
        typer.echo(_text(from_hex(value)))


@app.command("strip")
def strip_cmd(
    value: str = typer.Argument(..., help="Text to strip"),
    direction: Direction = typer.Option(Direction.BOTH, "--direction", "-d", case_sensitive=False),
    target: Optional[str] = typer.Option(None, "--target", "-t", help="Bytes to strip (default: config strip_target)"),
    mode: StripMode = typer.Option(StripMode.SINGLE, "--mode", "-m", case_sensitive=False),
) -> None:
    """Strip a run of target bytes from one or both ends."""
    tgt = target.encode("utf-8") if target is not None else _ctx.config.strip_target
    with _reported():
        typer.echo(_text(strip_bytes(value.encode("utf-8"), direction, tgt, mode)))


@app.command("abbreviate")
def abbreviate_cmd(
    value: str = typer.Argument(..., help="Text to shorten"),
    max_length: int = typer.Argument(..., help="Maximum length in bytes"),
    ellipsis: Optional[str] = typer.Option(None, "--ellipsis", "-e", help="Marker (default: config ellipsis)"),
) -> None:
    """Truncate text to MAX_LENGTH bytes, ending with an ellipsis."""
    marker = ellipsis.encode("utf-8") if ellipsis is not None else _ctx.config.ellipsis
    with _reported():
        typer.echo(_text(abbreviate_bytes(value.encode("utf-8"), max_length, marker)))


@app.command("fill")
def fill_cmd(
    byte: int = typer.Argument(..., help="Byte value 0..255"),
    count: int = typer.Argument(..., help="Repetitions"),
) -> None:
    """Print COUNT copies of BYTE as hex."""
    with _reported():
        typer.echo(_hex_out(fill_bytes(byte, count)))


@app.command("join")
def join_cmd(
    separator: str = typer.Argument(..., help="Separator text"),
    parts: List[str] = typer.Argument(None, help="Parts to join"),
) -> None:
    """Join PARTS with SEPARATOR."""
    with _reported():
        typer.echo(_text(join_bytes([p.encode("utf-8") for p in parts or []], separator.encode("utf-8"))))


@app.command("fixed-encode")
def fixed_encode_cmd(
    integer_bits: int = typer.Argument(..., help="Integer part width in bits"),
    fraction_bits: int = typer.Argument(..., help="Fraction part width in bits"),
    number: str = typer.Argument(..., help="Number to encode"),
    signed: bool = typer.Option(False, "--signed", help="Two's complement field"),
) -> None:
    """Encode NUMBER as a big-endian fixed-point field (printed as hex)."""
    with _reported():
        value = to_number(number)
        typer.echo(_hex_out(number_to_fixed_point_binary(integer_bits, fraction_bits, value, signed=signed)))


@app.command("fixed-decode")
def fixed_decode_cmd(
    integer_bits: int = typer.Argument(..., help="Integer part width in bits"),
    fraction_bits: int = typer.Argument(..., help="Fraction part width in bits"),
    encoded: str = typer.Argument(..., help="Field bytes as hex"),
    signed: bool = typer.Option(False, "--signed", help="Two's complement field"),
    exact: bool = typer.Option(False, "--exact", help="Print an exact fraction"),
) -> None:
    """Decode a big-endian fixed-point field given as hex."""
    with _reported():
        value = fixed_point_binary_to_number(
            integer_bits, fraction_bits, from_hex(encoded), signed=signed, exact=exact
        )
        typer.echo(str(value))


@app.command("random")
def random_cmd(
    byte_size: int = typer.Argument(..., help="Bytes per value"),
    count: int = typer.Argument(..., help="Number of distinct values"),
) -> None:
    """Print COUNT distinct random values of BYTE_SIZE bytes, one hex per line."""
    with _reported():
        for value in generate_random_list(byte_size, count):
            typer.echo(_hex_out(value))


@app.command("to-number")
def to_number_cmd(value: str = typer.Argument(..., help="Numeric text")) -> None:
    """Parse an integer or float representation."""
    with _reported():
        typer.echo(repr(to_number(value)))


def main() -> None:
    """Entry point for the binkit CLI."""
    app()


if __name__ == "__main__":
    main()
