"""
Command Runner.

Shared plumbing for every command: open a client, make the call inside one
asyncio.run, render the result, and turn any LightWaveError into a red
message on stderr plus exit status 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer

from lightwave.cli.client import LightWaveClient
from lightwave.cli.render import print_error, print_json, print_success
from lightwave.cli.state import CLIState
from lightwave.core.exceptions import LightWaveError
from lightwave.core.logging import get_logger

logger = get_logger(__name__)

ApiCall = Callable[[LightWaveClient], Awaitable[Any]]


def get_state(ctx: typer.Context) -> CLIState:
    """Return the state set by the root callback, or defaults."""
    return ctx.ensure_object(CLIState)


async def _call_with_client(state: CLIState, call: ApiCall) -> Any:
    async with state.create_client() as client:
        return await call(client)


def execute(
    ctx: typer.Context,
    call: ApiCall,
    text_view: Callable[[Any], None] | None = None,
    message: str | None = None,
) -> None:
    """
    Run one API call and render its result.

    Args:
        ctx: Typer context carrying CLIState.
        call: Coroutine function taking the client.
        text_view: Renderer for --output text. Commands without one print
            `message` in text mode.
        message: Rich markup confirmation, printed in text mode and in json
            mode when the server returns an empty body.
    """
    state = get_state(ctx)

    try:
        data = asyncio.run(_call_with_client(state, call))

        if state.text_mode and text_view is not None:
            text_view(data)
        elif message is not None and (state.text_mode or data is None):
            print_success(message)
        else:
            print_json(data)

    except LightWaveError as e:
        logger.debug("Command failed", code=e.code, error=e.message)
        print_error(e)
        raise typer.Exit(1)
