import os
from dataclasses import dataclass
from typing import Mapping, Optional


class Config:
    default_api_base_url: str = "http://localhost:3000"
    default_api_timeout_seconds: int = 30
    jobs_route: str = "/jobs"


@dataclass(frozen=True)
class ApiClientConfig:
    """Connection settings for the ground station API, read once at startup."""

    base_url: str = Config.default_api_base_url
    timeout_seconds: int = Config.default_api_timeout_seconds

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ApiClientConfig":
        if environ is None:
            environ = os.environ
        base_url = environ.get("API_BASE_URL") or Config.default_api_base_url
        timeout_seconds = parse_timeout(environ.get("API_TIMEOUT_SECONDS"))
        return cls(base_url=base_url.rstrip("/"), timeout_seconds=timeout_seconds)

    @property
    def jobs_url(self) -> str:
        return f"{self.base_url}{Config.jobs_route}"


def parse_timeout(value: Optional[str]) -> int:
    """Parse a timeout in whole seconds, falling back to the default on anything but a positive integer."""
    if value is None:
        return Config.default_api_timeout_seconds
    try:
        timeout = int(value.strip())
    except ValueError:
        return Config.default_api_timeout_seconds
    if timeout < 1:
        return Config.default_api_timeout_seconds
    return timeout
