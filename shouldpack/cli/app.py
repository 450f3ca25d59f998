import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from shouldkit import compare_text
from shouldpack.assertions import AssertionResult
from shouldpack.diff import ELLIPSES, MAX_ARROW_INDEX
from shouldpack.messages import FailureMessageFormatter, FormatterConfigError

app = typer.Typer(help="shouldkit CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("shouldkit")
    except PackageNotFoundError:
        from shouldpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show shouldkit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _read_operand(value: str, *, literal: bool, encoding: str) -> str:
    if literal:
        return value
    return Path(value).read_text(encoding=encoding)


@app.command()
def compare(
    expected: str = typer.Argument(..., help="Path to the expected text (or the text itself with --literal)."),
    actual: str = typer.Argument(..., help="Path to the actual text (or the text itself with --literal)."),
    literal: bool = typer.Option(
        False,
        "--literal",
        help="Treat EXPECTED and ACTUAL as the strings to compare instead of file paths.",
    ),
    message: str | None = typer.Option(
        None,
        "--message",
        help="Extra line appended to the failure report.",
    ),
    encoding: str = typer.Option(
        "utf-8",
        "--encoding",
        help="Encoding used to read EXPECTED and ACTUAL files.",
    ),
    max_width: int = typer.Option(
        60,
        "--max-width",
        help="Maximum width of the quoted string snippets (at least 7).",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable comparison output.",
    ),
) -> None:
    """Compare two texts and print the mismatch report on failure."""
    try:
        expected_text = _read_operand(expected, literal=literal, encoding=encoding)
        actual_text = _read_operand(actual, literal=literal, encoding=encoding)
        formatter = FailureMessageFormatter(
            max_string_width=max_width,
            max_arrow_index=min(MAX_ARROW_INDEX, max_width - len(ELLIPSES) - 1),
        )
    except (OSError, LookupError, UnicodeDecodeError, FormatterConfigError) as error:
        error_message = f"compare failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 1,
                    "message": error_message,
                    "expected": expected,
                    "actual": actual,
                }
            )
        else:
            _echo(error_message, err=True)
        raise typer.Exit(code=1) from error

    result: AssertionResult = compare_text(
        expected_text,
        actual_text,
        expected_expr=None if literal else expected,
        actual_expr=None if literal else actual,
        message=message,
        formatter=formatter,
    )

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "expected": expected,
                "actual": actual,
            }
        )
    elif result.passed:
        _echo("texts match")
    else:
        _echo(result.message, force=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
