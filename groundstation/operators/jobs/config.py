from dataclasses import dataclass

from groundstation.base.config import Config


@dataclass(frozen=True)
class PromptField:
    label: str
    placeholder: str


class JobFormConfig(Config):
    name = "JobForm"
    intro = "Creating a new tracking job..."

    start_date = PromptField(label="Start date:", placeholder="2025-10-02")
    start_time = PromptField(label="Start time:", placeholder="12:00")
    end_date = PromptField(label="End date:", placeholder="2025-10-02")
    end_time = PromptField(label="End time:", placeholder="12:15")

    sat_name = PromptField(label="Satellite name:", placeholder="ISS (ZARYA)")
    tle_line1 = PromptField(
        label="TLE Line 1:",
        placeholder="1 25544U 98067A   25235.75642456  .00011222  00000+0  20339-3 0  9993",
    )
    tle_line2 = PromptField(
        label="TLE Line 2:",
        placeholder="2 25544  51.6355 332.1708 0003307 260.2831  99.7785 15.50129787525648",
    )

    rx_frequency = PromptField(label="RX frequency (Hz):", placeholder="145800000")
    tx_frequency = PromptField(label="TX frequency (Hz):", placeholder="437500000")
