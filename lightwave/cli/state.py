"""
CLI State.

Immutable settings resolved once by the root Typer callback and stored in
`ctx.obj` for commands to read.
"""

from dataclasses import dataclass

from lightwave.cli.client import DEFAULT_TIMEOUT, LightWaveClient
from lightwave.core.config_schema import DEFAULT_BASE_URL


@dataclass(frozen=True)
class CLIState:
    """
    CLI-wide configuration.

    Attributes:
        api_url: Normalized server base URL (e.g., "http://localhost:8000/api").
        timeout: Request timeout in seconds.
        output: "json" for the raw colored body, "text" for human-readable views.
    """

    api_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    output: str = "json"

    @property
    def text_mode(self) -> bool:
        return self.output == "text"

    def create_client(self) -> LightWaveClient:
        return LightWaveClient(base_url=self.api_url, timeout=self.timeout)
