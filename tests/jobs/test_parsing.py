import json
from datetime import datetime

import pytest
import pytz

from groundstation.base.errors import ParseError
from groundstation.common.utils import CustomJSONEncoder, parse_frequency, parse_user_datetime


@pytest.mark.parametrize(
    "date_str, time_str",
    [("2025-10-02", "12:00"), ("2024-02-29", "23:59"), ("1999-12-31", "00:00")],
)
def test_hh_mm_has_zero_seconds(date_str, time_str):
    dt = parse_user_datetime(date_str, time_str)
    assert dt.second == 0
    assert dt.tzinfo == pytz.UTC
    assert dt.strftime("%Y-%m-%d %H:%M") == f"{date_str} {time_str}"


@pytest.mark.parametrize(
    "date_str, time_str",
    [("2025-10-02", "12:00:30"), ("2030-01-01", "00:00:59"), ("2025-06-15", "18:45:07")],
)
def test_hh_mm_ss_matches_literal_fields(date_str, time_str):
    dt = parse_user_datetime(date_str, time_str)
    assert dt.strftime("%Y-%m-%d") == date_str
    assert dt.strftime("%H:%M:%S") == time_str


def test_single_colon_appends_seconds():
    assert parse_user_datetime("2025-10-02", "12:00") == parse_user_datetime("2025-10-02", "12:00:00")
    assert parse_user_datetime("2025-10-02", "12:00:30").second == 30


def test_interpreted_as_utc_wall_clock():
    dt = parse_user_datetime("2025-10-02", "12:15")
    assert dt == datetime(2025, 10, 2, 12, 15, tzinfo=pytz.UTC)
    assert dt.utcoffset().total_seconds() == 0


def test_surrounding_whitespace_is_ignored():
    assert parse_user_datetime(" 2025-10-02 ", "12:00\n") == datetime(2025, 10, 2, 12, 0, tzinfo=pytz.UTC)


@pytest.mark.parametrize("date_str", ["2025-13-40", "2025-02-30", "25-10-02", "2025/10/02", "2025-1-2", "", "２０２５-10-02"])
def test_malformed_date_raises(date_str):
    with pytest.raises(ParseError) as excinfo:
        parse_user_datetime(date_str, "12:00")
    assert excinfo.value.field == "date"


@pytest.mark.parametrize("time_str", ["25:99", "24:00", "12:60:00", "12", "12:00:00:00", "noon", "9:30", "\u0661\u0662:00"])
def test_malformed_time_raises(time_str):
    with pytest.raises(ParseError) as excinfo:
        parse_user_datetime("2025-10-02", time_str)
    assert excinfo.value.field == "time"
    assert "time" in str(excinfo.value)


def test_frequency_parses_integer_text():
    assert parse_frequency("145800000") == 145800000.0


@pytest.mark.parametrize("text, expected", [("437.5e6", 437500000.0), ("-1.5", -1.5), (" 0 ", 0.0), (".5", 0.5)])
def test_frequency_accepts_decimal_forms(text, expected):
    assert parse_frequency(text) == expected


@pytest.mark.parametrize("text", ["abc", "", "145 MHz", "nan", "inf", "1_000", "0x10", "\u0661\u0664\u0665", "１４５"])
def test_frequency_rejects_non_decimal(text):
    with pytest.raises(ParseError) as excinfo:
        parse_frequency(text, "RX frequency")
    assert excinfo.value.field == "RX frequency"


def test_encoder_writes_utc_z_suffix():
    dt = parse_user_datetime("2025-10-02", "12:00")
    assert json.dumps({"start": dt}, cls=CustomJSONEncoder) == '{"start": "2025-10-02T12:00:00Z"}'


def test_encoder_rejects_unknown_types():
    with pytest.raises(TypeError):
        json.dumps({"value": object()}, cls=CustomJSONEncoder)
