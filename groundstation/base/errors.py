from typing import Optional


class CliError(Exception):
    """Base class for every error surfaced to the operator."""


class ConfigurationError(CliError):
    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class InputError(CliError):
    """Input collection was aborted or produced an unusable value."""


class ParseError(InputError):
    def __init__(self, field: str, value: str, reason: str = ""):
        self.field = field
        self.value = value
        message = f"Invalid {field} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class HttpError(CliError):
    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None, body: str = ""):
        self.status = status
        self.url = url
        self.body = body
        if status is not None:
            message = f"{message} (status {status})"
        super().__init__(f"HTTP request failed: {message}")
