"""
API Schemas.

Request bodies sent to the LightWave server and the response shapes the
text output mode renders. Response models accept unknown fields so a newer
server does not break an older client.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ResponseBase(BaseModel):
    """Lenient base for server responses."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


# =============================================================================
# Requests
# =============================================================================


class EffectStartRequest(BaseModel):
    """Body of POST /effects/{name}/start."""

    params: dict[str, Any] = Field(default_factory=dict)


class ColorRequest(BaseModel):
    """Body of POST /leds/color. The server detects the color format."""

    color: str


class BrightnessRequest(BaseModel):
    """Body of POST /leds/brightness."""

    brightness: float


# =============================================================================
# Responses
# =============================================================================


class ErrorResponse(_ResponseBase):
    """Error body returned with non-2xx statuses."""

    detail: Any


class EffectInfo(_ResponseBase):
    name: str
    description: str = ""


class EffectsListResponse(_ResponseBase):
    effects: list[EffectInfo]


class EffectParameter(_ResponseBase):
    name: str
    param_type: str = Field(alias="type")
    description: str = ""
    default: Any = None
    min_value: Any = None
    max_value: Any = None
    options: list[str] | None = None


class EffectDetailedInfo(_ResponseBase):
    name: str
    description: str = ""
    parameters: list[EffectParameter] = Field(default_factory=list)


class EffectStatusResponse(_ResponseBase):
    running: bool
    name: str | None = None
    description: str | None = None
    parameters: dict[str, Any] | None = None
    start_time: str | None = None
    runtime: float | None = None
