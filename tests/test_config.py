"""Tests for centralized configuration."""

import pytest
from pydantic import ValidationError
from boardlens.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("CRITICAL_THRESHOLD", "TURNING_POINT_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestSettings:
    def test_defaults(self):
        """An empty environment is valid."""
        s = Settings(_env_file=None)
        assert s.critical_threshold == 0.5
        assert s.turning_point_limit == 10
        assert s.log_level == "WARNING"

    def test_all_fields(self, monkeypatch):
        """All fields can be set explicitly."""
        monkeypatch.setenv("CRITICAL_THRESHOLD", "25")
        monkeypatch.setenv("TURNING_POINT_LIMIT", "5")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.critical_threshold == 25.0
        assert s.turning_point_limit == 5
        assert s.log_level == "debug"

    def test_turning_point_limit_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("TURNING_POINT_LIMIT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_threshold_must_be_numeric(self, monkeypatch):
        monkeypatch.setenv("CRITICAL_THRESHOLD", "high")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        """Values are read from a dotenv file when given."""
        env = tmp_path / ".env.boardlens"
        env.write_text("CRITICAL_THRESHOLD=3\n")
        s = Settings(_env_file=env)
        assert s.critical_threshold == 3.0
