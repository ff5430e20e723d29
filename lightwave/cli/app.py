"""
LightWave CLI.

Command-line client for the LightWave LED server.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    lightwave --help                              # Show help

    # Effects
    lightwave effects list                        # List available effects
    lightwave effects info rainbow                # Effect details and parameters
    lightwave effects start rainbow -p speed=0.5  # Start an effect
    lightwave effects running                     # Currently running effect
    lightwave effects stop                        # Stop the running effect

    # LEDs
    lightwave leds color "#ff8800"                # Set color (any server format)
    lightwave leds brightness 0.5                 # Set brightness (0.0 - 1.0)
    lightwave leds clear                          # Turn off all LEDs

    # System
    lightwave status                              # Server status

Options:
    --base-url, -u    Server API URL (or LIGHTWAVE_URL)
    --output, -o      json (default) or text
    --config, -c      YAML config file (or LIGHTWAVE_CONFIG)
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from lightwave import __version__
from lightwave.cli.commands import effects_app, leds_app
from lightwave.cli.render import console, print_error, render_status
from lightwave.cli.runner import execute
from lightwave.cli.state import CLIState
from lightwave.core.config import load_config, resolve_base_url, resolve_timeout
from lightwave.core.exceptions import ConfigurationError
from lightwave.core.logging import setup_logging


class OutputFormat(str, Enum):
    json = "json"
    text = "text"


app = typer.Typer(
    name="lightwave",
    help="LightWave LED control client - effects, LEDs and server status.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(effects_app, name="effects")
app.add_typer(leds_app, name="leds")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"lightwave {__version__}")
        raise typer.Exit()


@app.command()
def status(ctx: typer.Context) -> None:
    """
    Get the current system status.

    Examples:
        lightwave status
        lightwave -o text status
    """
    execute(ctx, lambda client: client.get_status(), text_view=render_status)


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url", "--url", "-u",
        help="API server URL (can also be set with LIGHTWAVE_URL)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout", "-t",
        min=0.1,
        help="Request timeout in seconds",
    ),
    output: Optional[OutputFormat] = typer.Option(
        None,
        "--output", "-o",
        case_sensitive=False,
        help="Output format: json (colored response body) or text (readable summary)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        dir_okay=False,
        help="YAML config file (can also be set with LIGHTWAVE_CONFIG)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    LightWave LED control client.

    Talks to a LightWave server over HTTP and prints its JSON responses.
    """
    try:
        config = load_config(config_path)
        api_url = resolve_base_url(base_url, config)
        request_timeout = resolve_timeout(timeout, config)
    except ConfigurationError as e:
        print_error(e)
        raise typer.Exit(1)

    # Configure logging based on flags
    if debug:
        setup_logging(config.logging, level="DEBUG")
    elif verbose:
        setup_logging(config.logging, level="INFO")
    else:
        setup_logging(config.logging)

    ctx.obj = CLIState(
        api_url=api_url,
        timeout=request_timeout,
        output=output.value if output is not None else config.output.format,
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
