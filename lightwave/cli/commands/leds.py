"""
LED Commands.

Commands that act on the strip directly: color, brightness, clear.
"""

import typer
from rich.markup import escape

from lightwave.cli.runner import execute

app = typer.Typer(help="LED control commands", no_args_is_help=True)


@app.command()
def color(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Color in any format the server accepts (hex, rgb, hsl, hsv, name)"),
) -> None:
    """
    Set the color of the LEDs.

    The value is sent as-is; the server detects its format.

    Examples:
        lightwave leds color "#ff8800"
        lightwave leds color "rgb(255, 136, 0)"
        lightwave leds color orange
    """
    execute(
        ctx,
        lambda client: client.set_color(value),
        message=f"LED color set to [cyan]{escape(value)}[/cyan] successfully.",
    )


@app.command(context_settings={"ignore_unknown_options": True})
def brightness(
    ctx: typer.Context,
    value: float = typer.Argument(..., help="Brightness from 0.0 to 1.0"),
) -> None:
    """
    Set the brightness of the LEDs (0.0 - 1.0).

    Out-of-range values are rejected without contacting the server.

    Examples:
        lightwave leds brightness 0.5
    """
    execute(
        ctx,
        lambda client: client.set_brightness(value),
        message=f"LED brightness set to [cyan]{value * 100:.1f}%[/cyan] successfully.",
    )


@app.command()
def clear(ctx: typer.Context) -> None:
    """
    Turn off all LEDs.

    Examples:
        lightwave leds clear
    """
    execute(ctx, lambda client: client.clear_leds(), message="LEDs cleared successfully.")
