# tests/test_config.py
"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from scheduler_client.config import Settings
from scheduler_client.duration import parse_duration


@pytest.fixture
def clean_env(monkeypatch):
    """Remove scheduler settings from the environment."""
    for name in (
        "SCHEDULER_SERVICE_HOST",
        "SCHEDULER_SERVICE_PORT",
        "OWNING_SERVICE",
        "TRIGGER_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, clean_env):
        """Test defaults point at a local scheduler service."""
        config = Settings(_env_file=None)

        assert config.scheduler_service_host == "localhost"
        assert config.scheduler_service_port == 48085
        assert config.owning_service == ""
        assert config.trigger_timeout == "5s"
        assert config.scheduler_base_url == "http://localhost:48085"

    def test_reads_environment(self, clean_env):
        """Test values are read from environment variables."""
        clean_env.setenv("SCHEDULER_SERVICE_HOST", "edgex-support-scheduler")
        clean_env.setenv("SCHEDULER_SERVICE_PORT", "59861")
        clean_env.setenv("OWNING_SERVICE", "device-virtual")
        clean_env.setenv("TRIGGER_TIMEOUT", "750ms")

        config = Settings(_env_file=None)

        assert config.scheduler_service_host == "edgex-support-scheduler"
        assert config.scheduler_service_port == 59861
        assert config.owning_service == "device-virtual"
        assert parse_duration(config.trigger_timeout) == pytest.approx(0.75)

    def test_case_insensitive(self, clean_env):
        """Test environment names are matched case-insensitively."""
        clean_env.setenv("scheduler_service_host", "lowercase-host")

        assert Settings(_env_file=None).scheduler_service_host == "lowercase-host"

    def test_reads_env_file(self, clean_env, tmp_path):
        """Test values are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("SCHEDULER_SERVICE_PORT=1234\nUNRELATED=1\n")

        config = Settings(_env_file=env_file)

        assert config.scheduler_service_port == 1234

    @pytest.mark.parametrize("port", ["0", "70000", "http"])
    def test_invalid_port(self, clean_env, port):
        """Test out-of-range or non-numeric ports are rejected."""
        clean_env.setenv("SCHEDULER_SERVICE_PORT", port)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
