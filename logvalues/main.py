"""
logvalues command line interface
"""

import json
import logging
import os
import time
from typing import Any, List, Optional

import typer

from logvalues.features import Feature, FeatureRegistry, OperationResult

LOG_LEVEL_ENV = "LOGVALUES_LOG_LEVEL"

# Module-level logger
logger = logging.getLogger("logvalues.main")

# Create CLI app with Typer
app = typer.Typer(
    name="logvalues",
    help="logvalues - parse, render and inspect structured log message templates",
    add_completion=False,
)


# ----------------- Helper Functions -----------------


class ElapsedMsFormatter(logging.Formatter):
    """Formatter that shows milliseconds since program start, right-aligned for up to 9999 seconds."""

    def __init__(self, fmt=None, datefmt=None, *args, **kwargs):
        super().__init__(fmt, datefmt, *args, **kwargs)
        self.start_time = time.monotonic()
        self.width = 8  # Enough for '9999000ms'

    def format(self, record):
        elapsed_ms = int((time.monotonic() - self.start_time) * 1000)
        if elapsed_ms < 10**7:
            elapsed = f"[{elapsed_ms:>{self.width}}ms]"
        else:
            elapsed = f"[{elapsed_ms}ms]"
        record.elapsed = elapsed
        return super().format(record)


VERBOSE_LEVEL = 15  # Between INFO (20) and DEBUG (10)
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")


def resolve_log_level(debug: bool = False, verbose: bool = False) -> int:
    """Pick the log level from flags, then from the environment"""
    if debug:
        return logging.DEBUG
    if verbose:
        return VERBOSE_LEVEL
    configured = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if configured:
        level = logging.getLevelName(configured)
        if isinstance(level, int):
            return level
    return logging.INFO


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    formatter = ElapsedMsFormatter("%(elapsed)s %(levelname)s %(message)s")
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(resolve_log_level(debug, verbose))


def _feature_or_exit(feature_name: str) -> Feature:
    feature = FeatureRegistry.get_feature(feature_name)
    if not feature:
        logger.error("Unknown feature: %s", feature_name)
        raise typer.Exit(code=1)
    return feature


def _handle_cli_result(feature_name: str, result: OperationResult) -> Any:
    if not result.success:
        logger.error("%s failed: %s", feature_name, result.error or "Unknown error")
        raise typer.Exit(code=1)
    logger.debug("%s completed successfully", feature_name)
    return result.data


def _decode_values(values: Optional[List[str]], json_values: bool) -> List[Any]:
    if not values:
        return []
    if not json_values:
        return list(values)
    decoded: List[Any] = []
    for text in values:
        try:
            decoded.append(json.loads(text))
        except json.JSONDecodeError as e:
            logger.error("Value %r is not valid JSON: %s", text, e)
            raise typer.Exit(code=1)
    return decoded


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


# ----------------- CLI Commands -----------------


@app.command()
def version() -> None:
    """Show the logvalues version"""
    setup_logging(False)
    data = _handle_cli_result("version", _feature_or_exit("version").handler())
    print(f"logvalues version: {data.get('version', 'unknown')}")


@app.command()
def parse(
    template: str = typer.Argument(..., help="Message template"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Show the canonical positional form and the placeholder names"""
    setup_logging(debug)
    data = _handle_cli_result("parse", _feature_or_exit("parse").handler(template=template))
    _print_json(data)


@app.command("format")
def format_command(
    template: str = typer.Argument(..., help="Message template"),
    values: Optional[List[str]] = typer.Argument(None, help="Positional argument values"),
    json_values: bool = typer.Option(
        False, "--json-values", help="Decode each value as JSON (null, lists, numbers)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging (between info and debug)"),
) -> None:
    """Render a template with positional values"""
    setup_logging(debug, verbose)
    arguments = _decode_values(values, json_values)
    logger.log(VERBOSE_LEVEL, "Rendering %r with %d value(s)", template, len(arguments))
    data = _handle_cli_result(
        "format", _feature_or_exit("format").handler(template=template, values=arguments)
    )
    print(data["message"])


@app.command("values")
def values_command(
    template: str = typer.Argument(..., help="Message template"),
    values: Optional[List[str]] = typer.Argument(None, help="Positional argument values"),
    json_values: bool = typer.Option(
        False, "--json-values", help="Decode each value as JSON (null, lists, numbers)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Print the named values of a template as JSON"""
    setup_logging(debug)
    arguments = _decode_values(values, json_values)
    data = _handle_cli_result(
        "values", _feature_or_exit("values").handler(template=template, values=arguments)
    )
    _print_json(data)


if __name__ == "__main__":
    app()
