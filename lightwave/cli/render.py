"""
Terminal Rendering.

Everything the CLI prints goes through here. Command output goes to stdout,
errors and hints go to stderr so `lightwave ... | jq` keeps working.

Two output modes:
    json  - the response body, pretty-printed with syntax coloring
    text  - human-readable views of effects and status
"""

import json
from typing import Any

from pydantic import BaseModel, ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from lightwave.core.exceptions import DeserializationError, LightWaveError
from lightwave.schemas import (
    EffectDetailedInfo,
    EffectsListResponse,
    EffectStatusResponse,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def parse_as(model: type[BaseModel], data: Any) -> Any:
    """Validate a response body against the view model, as a parse error if it does not fit."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise DeserializationError(str(e)) from e


# =============================================================================
# Primitives
# =============================================================================


def print_json(data: Any) -> None:
    """Pretty-print a JSON value with syntax coloring."""
    console.print_json(data=data)


def print_success(message: str) -> None:
    console.print(f"[green]{message}[/green]")


def print_error(error: LightWaveError | str) -> None:
    """Print an error in red on stderr."""
    err_console.print(f"[red]{escape(str(error))}[/red]")


def print_warning(message: str) -> None:
    err_console.print(f"[yellow]{escape(message)}[/yellow]")


def format_value(value: Any) -> str:
    """Format a JSON value as Rich markup, colored by type."""
    if value is None:
        return "[dim]null[/dim]"
    if isinstance(value, bool):
        return "[green]true[/green]" if value else "[red]false[/red]"
    if isinstance(value, (int, float)):
        return f"[cyan]{value}[/cyan]"
    if isinstance(value, str):
        return f'[yellow]"{escape(value)}"[/yellow]'
    if isinstance(value, list):
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(
            f"[cyan]{escape(str(k))}[/cyan]: {format_value(v)}" for k, v in value.items()
        )
        return "{" + items + "}"
    return escape(json.dumps(value, default=str))


def format_time(seconds: float) -> str:
    """Format a duration in seconds as 12.3s, 2m 5.0s or 1h 2m 3.0s."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    if seconds < 3600:
        minutes = int(seconds // 60)
        return f"{minutes}m {seconds - minutes * 60:.1f}s"
    hours = int(seconds // 3600)
    minutes = int((seconds - hours * 3600) // 60)
    secs = seconds - hours * 3600 - minutes * 60
    return f"{hours}h {minutes}m {secs:.1f}s"


# =============================================================================
# Text views
# =============================================================================


def render_effects_list(data: Any) -> None:
    resp = parse_as(EffectsListResponse, data)

    console.print("\n[bold underline]Available Effects:[/bold underline]\n")
    for effect in resp.effects:
        console.print(
            f"• [bold green]{escape(effect.name)}[/bold green] - {escape(effect.description.strip())}"
        )
    console.print(f"\n[bold]Total:[/bold] [cyan]{len(resp.effects)}[/cyan]\n")


def render_effect_names(data: Any) -> None:
    """Short list of effect names, used as a hint after a 404."""
    resp = parse_as(EffectsListResponse, data)

    err_console.print("\n[bold]Available effects:[/bold]\n")
    for effect in resp.effects:
        err_console.print(f"• [green]{escape(effect.name)}[/green]")
    err_console.print()


def render_effect_info(data: Any) -> None:
    resp = parse_as(EffectDetailedInfo, data)

    console.print(
        f"\n[bold underline]Effect[/bold underline]: [bold green]{escape(resp.name)}[/bold green]\n"
    )
    console.print(f"• [bold]Description[/bold]: {escape(resp.description)}")

    if not resp.parameters:
        console.print("\n[yellow]No parameters available.[/yellow]\n")
        return

    console.print("\n[bold underline]Parameters:[/bold underline]\n")
    for param in resp.parameters:
        console.print(
            f"• [bold green]{escape(param.name)}[/bold green]: {escape(param.description)}"
        )
        console.print(f"  - [bold]Type[/bold]: [cyan]{escape(param.param_type)}[/cyan]")
        console.print(f"  - [bold]Default[/bold]: {format_value(param.default)}")
        if param.min_value is not None:
            console.print(f"  - [bold]Min Value[/bold]: {format_value(param.min_value)}")
        if param.max_value is not None:
            console.print(f"  - [bold]Max Value[/bold]: {format_value(param.max_value)}")
        if param.options:
            options = ", ".join(f"[yellow]{escape(o)}[/yellow]" for o in param.options)
            console.print(f"  - [bold]Options[/bold]: {options}")
        console.print()


def _print_parameters(parameters: dict[str, Any] | None) -> None:
    for key, value in (parameters or {}).items():
        console.print(f"  - [cyan]{escape(key)}[/cyan]: {format_value(value)}")


def render_running(data: Any) -> None:
    resp = parse_as(EffectStatusResponse, data)

    if not resp.running:
        console.print("\n[yellow]No effect is currently running.[/yellow]\n")
        return

    console.print("\n[bold underline]Running Effect:[/bold underline]\n")
    console.print(f"• [bold]Name[/bold]: [green]{escape(resp.name or '')}[/green]")
    console.print(f"• [bold]Description[/bold]: {escape(resp.description or '')}")
    if resp.parameters is not None:
        console.print("• [bold]Parameters[/bold]:")
        _print_parameters(resp.parameters)
    if resp.start_time:
        console.print(f"• [bold]Started[/bold]: {escape(resp.start_time)}")
    if resp.runtime is not None:
        console.print(f"• [bold]Runtime[/bold]: [cyan]{format_time(resp.runtime)}[/cyan]")
    console.print()


def render_status(data: Any) -> None:
    resp = parse_as(EffectStatusResponse, data)

    console.print("\n[bold underline]LightWave Status:[/bold underline]\n")

    if resp.running:
        console.print("• [bold]Status[/bold]: [green]Running[/green]")
        console.print(f"• [bold]Effect[/bold]: [bold green]{escape(resp.name or '')}[/bold green]")
        if resp.runtime is not None:
            console.print(f"• [bold]Runtime[/bold]: [cyan]{format_time(resp.runtime)}[/cyan]")
        if resp.parameters:
            console.print("\n[bold]Parameters:[/bold]\n")
            _print_parameters(resp.parameters)
    else:
        console.print("• [bold]Status[/bold]: [yellow]Idle[/yellow]")
        console.print("• [bold]Effect[/bold]: [dim]None[/dim]")

    console.print()
