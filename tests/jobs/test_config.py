import pytest

from groundstation.base.config import ApiClientConfig


def test_defaults_when_env_missing():
    config = ApiClientConfig.from_env({})
    assert config.base_url == "http://localhost:3000"
    assert config.timeout_seconds == 30
    assert config.jobs_url == "http://localhost:3000/jobs"


def test_reads_env_values():
    config = ApiClientConfig.from_env({"API_BASE_URL": "https://gs.example.org", "API_TIMEOUT_SECONDS": "5"})
    assert config.base_url == "https://gs.example.org"
    assert config.timeout_seconds == 5


@pytest.mark.parametrize("value", ["abc", "", "2.5", "-10", "0"])
def test_bad_timeout_falls_back_to_default(value):
    config = ApiClientConfig.from_env({"API_TIMEOUT_SECONDS": value})
    assert config.timeout_seconds == 30


def test_trailing_slash_dropped_from_base_url():
    config = ApiClientConfig.from_env({"API_BASE_URL": "http://gs.local:8080/"})
    assert config.jobs_url == "http://gs.local:8080/jobs"


def test_reads_process_environment(monkeypatch):
    monkeypatch.delenv("API_BASE_URL", raising=False)
    monkeypatch.setenv("API_TIMEOUT_SECONDS", "12")
    config = ApiClientConfig.from_env()
    assert config.base_url == "http://localhost:3000"
    assert config.timeout_seconds == 12
