"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every failure the CLI reports to the user is one of these.
"""


class LightWaveError(Exception):
    """Base exception for all client errors."""

    prefix = "Error"

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class RequestError(LightWaveError):
    """Raised when the server cannot be reached or the request times out."""

    prefix = "Request failed"

    def __init__(self, message: str = "Could not reach server") -> None:
        super().__init__(message, code="NET_REQUEST_FAILED")


class ApiResponseError(LightWaveError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(message, code="API_RESPONSE_ERROR")

    def __str__(self) -> str:
        return f"API error ({self.status_code}): {self.message}"


class DeserializationError(LightWaveError):
    """Raised when a response body is not the JSON we expected."""

    prefix = "Failed to parse response"

    def __init__(self, message: str = "Invalid JSON") -> None:
        super().__init__(message, code="API_INVALID_RESPONSE")


class ValidationError(LightWaveError):
    """Raised when user input is rejected before a request is sent."""

    prefix = "Client error"

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ConfigurationError(LightWaveError):
    """Raised when the configuration file is missing or invalid."""

    prefix = "Configuration error"

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
