"""Command-line front end: parse, normalize and apply ISO 8601 durations."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable

import click
import structlog

from durationkit import __version__
from durationkit.calendar import apply_to_date, subtract_from_date
from durationkit.config.logging import configure_logging
from durationkit.config.models import CliSettings
from durationkit.duration import UNITS, Duration, DurationError, parse

logger = structlog.get_logger(__name__)

_UNIT_CHOICE = click.Choice([u.key for u in UNITS])


def _payload(value: Any) -> Any:
    if isinstance(value, Duration):
        return {"duration": value.render(), "fields": value.as_dict()}
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _emit(settings: CliSettings, op: str, fn: Callable[[], Any]) -> None:
    """Run ``fn`` and print its result; library errors exit with status 1."""
    try:
        result = fn()
    except DurationError as exc:
        logger.debug("cli.failed", op=op, error=type(exc).__name__)
        if settings.json_output:
            error = {"code": type(exc).__name__, "message": str(exc)}
            click.echo(json.dumps({"ok": False, "op": op, "error": error}))
            raise click.exceptions.Exit(1) from exc
        raise click.ClickException(str(exc)) from exc

    if settings.json_output:
        click.echo(json.dumps({"ok": True, "op": op, "data": _payload(result)}))
    else:
        click.echo(result.render() if isinstance(result, Duration) else _payload(result))


def _parse_timestamp(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise click.BadParameter(f"{text!r} is not an ISO 8601 timestamp.") from exc


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="durationkit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool, log_json: bool) -> None:
    """durationkit: ISO 8601 duration arithmetic."""
    settings = CliSettings(json_output=json_output, verbose=verbose, log_json=log_json)
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    ctx.obj = settings
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("parse")
@click.argument("text")
@click.option("--normalize", "do_normalize", is_flag=True, help="Normalize before printing.")
@click.pass_obj
def parse_cmd(settings: CliSettings, text: str, do_normalize: bool) -> None:
    """Print the canonical form of TEXT."""

    def run() -> Duration:
        d = parse(text)
        if do_normalize:
            d.normalize()
        return d

    _emit(settings, "parse", run)


@cli.command("normalize")
@click.argument("text")
@click.pass_obj
def normalize_cmd(settings: CliSettings, text: str) -> None:
    """Carry fractions and overflow between units of TEXT."""
    _emit(settings, "normalize", lambda: parse(text).normalized())


@cli.command("add")
@click.argument("a")
@click.argument("b")
@click.pass_obj
def add_cmd(settings: CliSettings, a: str, b: str) -> None:
    """Print A + B."""
    _emit(settings, "add", lambda: parse(a) + parse(b))


@cli.command("sub")
@click.argument("a")
@click.argument("b")
@click.pass_obj
def sub_cmd(settings: CliSettings, a: str, b: str) -> None:
    """Print A - B."""
    _emit(settings, "sub", lambda: parse(a) - parse(b))


@cli.command("invert")
@click.argument("text")
@click.pass_obj
def invert_cmd(settings: CliSettings, text: str) -> None:
    """Negate every field of TEXT."""
    _emit(settings, "invert", lambda: parse(text).invert())


@cli.command("reduce")
@click.argument("text")
@click.argument("unit", type=_UNIT_CHOICE)
@click.pass_obj
def reduce_cmd(settings: CliSettings, text: str, unit: str) -> None:
    """Drop every field of TEXT finer than UNIT."""
    _emit(settings, "reduce", lambda: parse(text).reduce_precision(unit))


@cli.command("seconds")
@click.argument("text")
@click.pass_obj
def seconds_cmd(settings: CliSettings, text: str) -> None:
    """Total length of TEXT in seconds."""
    _emit(settings, "seconds", lambda: parse(text).to_seconds())


@cli.command("apply")
@click.argument("text")
@click.argument("timestamp")
@click.pass_obj
def apply_cmd(settings: CliSettings, text: str, timestamp: str) -> None:
    """Add TEXT to an ISO 8601 TIMESTAMP (UTC when no offset is given)."""
    date = _parse_timestamp(timestamp)
    _emit(settings, "apply", lambda: apply_to_date(parse(text), date))


@cli.command("subtract-from")
@click.argument("text")
@click.argument("timestamp")
@click.pass_obj
def subtract_from_cmd(settings: CliSettings, text: str, timestamp: str) -> None:
    """Subtract TEXT from an ISO 8601 TIMESTAMP (UTC when no offset is given)."""
    date = _parse_timestamp(timestamp)
    _emit(settings, "subtract-from", lambda: subtract_from_date(parse(text), date))


def main() -> None:
    cli()
