"""
Interactive job form:
1) Prompts the operator for the time window, TLE and RX/TX frequencies
2) Parses each answer into typed values, stopping at the first bad one
3) Packages the collected values into a JobRequest for submission
"""

import logging
from datetime import datetime
from typing import Callable

from groundstation.base.errors import InputError, ParseError
from groundstation.base.job import CollectedFields, FrequencyPair, JobRequest, OrbitalElementSet, TimeWindow
from groundstation.common.utils import parse_frequency, parse_user_datetime
from groundstation.operators.jobs.config import JobFormConfig, PromptField

logger = logging.getLogger(__name__)

# prompt(label, placeholder) -> raw answer
Prompt = Callable[[str, str], str]


def console_prompt(label: str, placeholder: str) -> str:
    return input(f"{label} (e.g. {placeholder}) ")


class JobFormCollector:
    def __init__(self, prompt: Prompt = console_prompt, config: JobFormConfig = None, verbose: bool = True):
        if config is None:
            config = JobFormConfig()
        self.prompt = prompt
        self.config = config
        self.verbose = verbose

    def ask(self, field: PromptField) -> str:
        try:
            return self.prompt(field.label, field.placeholder)
        except (EOFError, KeyboardInterrupt) as e:
            raise InputError(f"Prompt '{field.label}' was aborted") from e

    def collect_datetime(self, date_field: PromptField, time_field: PromptField) -> datetime:
        date_str = self.ask(date_field)
        time_str = self.ask(time_field)
        return parse_user_datetime(date_str, time_str)

    def collect_text(self, field: PromptField, name: str) -> str:
        value = self.ask(field).strip()
        if not value:
            raise ParseError(name, value, "must not be empty")
        return value

    def collect_tle(self) -> OrbitalElementSet:
        """Collect the satellite name and both TLE lines. The lines are trimmed, never checked for format."""
        return OrbitalElementSet(
            tle0=self.collect_text(self.config.sat_name, "satellite name"),
            tle1=self.collect_text(self.config.tle_line1, "TLE line 1"),
            tle2=self.collect_text(self.config.tle_line2, "TLE line 2"),
        )

    def collect_frequency(self, field: PromptField, name: str) -> float:
        return parse_frequency(self.ask(field), name)

    def collect(self) -> CollectedFields:
        if self.verbose:
            print(f"{self.config.intro}\n")

        start = self.collect_datetime(self.config.start_date, self.config.start_time)
        end = self.collect_datetime(self.config.end_date, self.config.end_time)
        tle = self.collect_tle()
        rx_frequency = self.collect_frequency(self.config.rx_frequency, "RX frequency")
        tx_frequency = self.collect_frequency(self.config.tx_frequency, "TX frequency")

        logger.debug(f"Collected job fields for {tle.tle0}: {start.isoformat()} to {end.isoformat()}")
        return CollectedFields(
            start=start,
            end=end,
            tle=tle,
            rx_frequency=rx_frequency,
            tx_frequency=tx_frequency,
        )


def assemble_job_request(fields: CollectedFields) -> JobRequest:
    return JobRequest(
        window=TimeWindow(start=fields.start, end=fields.end),
        tle=fields.tle,
        frequencies=FrequencyPair(rx_frequency=fields.rx_frequency, tx_frequency=fields.tx_frequency),
    )
