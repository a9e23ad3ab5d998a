from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, TypedDict

from groundstation.base.errors import HttpError


class TlePayload(TypedDict):
    tle0: str
    tle1: str
    tle2: str


class JobRequestPayload(TypedDict):
    start: datetime
    end: datetime
    tle: TlePayload
    rx_frequency: float
    tx_frequency: float


@dataclass(frozen=True)
class OrbitalElementSet:
    tle0: str
    tle1: str
    tle2: str

    def to_dict(self) -> TlePayload:
        return {"tle0": self.tle0, "tle1": self.tle1, "tle2": self.tle2}


@dataclass(frozen=True)
class TimeWindow:
    # start may fall after end, ordering is left to the API
    start: datetime
    end: datetime


@dataclass(frozen=True)
class FrequencyPair:
    rx_frequency: float
    tx_frequency: float


@dataclass
class CollectedFields:
    """Values gathered from the operator, before packaging into a JobRequest."""

    start: datetime
    end: datetime
    tle: OrbitalElementSet
    rx_frequency: float
    tx_frequency: float


@dataclass(frozen=True)
class JobRequest:
    window: TimeWindow
    tle: OrbitalElementSet
    frequencies: FrequencyPair

    def to_dict(self) -> JobRequestPayload:
        return {
            "start": self.window.start,
            "end": self.window.end,
            "tle": self.tle.to_dict(),
            "rx_frequency": self.frequencies.rx_frequency,
            "tx_frequency": self.frequencies.tx_frequency,
        }


@dataclass(frozen=True)
class ApiResponse:
    status: str
    message: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "ApiResponse":
        if not isinstance(data, dict):
            raise HttpError(f"Expected a JSON object in response, got {type(data).__name__}")
        status = data.get("status")
        if not isinstance(status, str):
            raise HttpError("Response is missing a string 'status' field")
        message = data.get("message")
        if message is not None and not isinstance(message, str):
            raise HttpError("Response 'message' field is not a string")
        return cls(status=status, message=message)
