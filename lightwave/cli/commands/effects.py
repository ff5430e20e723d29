"""
Effect Commands.

Commands for listing, inspecting, starting and stopping server-side effects.
"""

from typing import Optional

import typer
from rich.markup import escape

from lightwave.cli.client import LightWaveClient
from lightwave.cli.params import parse_params
from lightwave.cli.render import (
    print_warning,
    render_effect_info,
    render_effect_names,
    render_effects_list,
    render_running,
)
from lightwave.cli.runner import execute
from lightwave.core.exceptions import ApiResponseError, LightWaveError

app = typer.Typer(help="Effect management commands", no_args_is_help=True)


async def _suggest_effects(client: LightWaveClient, name: str) -> None:
    """Report an unknown effect and list the known ones. Listing is best effort."""
    print_warning(f"Effect '{name}' not found")
    try:
        render_effect_names(await client.list_effects())
    except LightWaveError:
        pass


@app.command("list")
def list_effects(ctx: typer.Context) -> None:
    """
    List all available effects.

    Examples:
        lightwave effects list
        lightwave -o text effects list
    """
    execute(ctx, lambda client: client.list_effects(), text_view=render_effects_list)


@app.command()
def info(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the effect"),
) -> None:
    """
    Get detailed info about a specific effect.

    Examples:
        lightwave effects info rainbow
    """

    async def call(client: LightWaveClient):
        try:
            return await client.get_effect_info(name)
        except ApiResponseError as e:
            if e.status_code == 404:
                await _suggest_effects(client, name)
            raise

    execute(ctx, call, text_view=render_effect_info)


@app.command()
def start(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the effect to start"),
    param: Optional[list[str]] = typer.Option(
        None,
        "--param", "-p",
        help="Effect parameter as key=value (repeatable)",
    ),
) -> None:
    """
    Start an effect.

    Parameter values are typed: true/false, integers and floats are sent as
    JSON booleans and numbers, anything else as a string.

    Examples:
        lightwave effects start rainbow
        lightwave effects start rainbow -p speed=0.5 -p reverse=true
    """
    try:
        params = parse_params(param)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--param")

    async def call(client: LightWaveClient):
        try:
            return await client.start_effect(name, params)
        except ApiResponseError as e:
            if e.status_code == 404:
                await _suggest_effects(client, name)
            raise

    execute(
        ctx,
        call,
        message=f"Started effect [bold cyan]{escape(name)}[/bold cyan]",
    )


@app.command()
def stop(ctx: typer.Context) -> None:
    """
    Stop the currently running effect.

    Examples:
        lightwave effects stop
    """

    async def call(client: LightWaveClient):
        try:
            return await client.stop_effect()
        except ApiResponseError as e:
            if e.status_code == 404:
                print_warning("No effect is currently running")
            raise

    execute(ctx, call, message="Effect stopped successfully.")


@app.command()
def running(ctx: typer.Context) -> None:
    """
    Get info about the currently running effect.

    Examples:
        lightwave effects running
    """
    execute(ctx, lambda client: client.get_running_effect(), text_view=render_running)
