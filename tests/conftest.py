"""Pytest configuration and fixtures.

Every test starts with unconfigured structlog, no initialized app config
and none of the application env vars set.
"""

import importlib

import pytest
import structlog

# moe_common.config re-exports a function named initialize_config, which
# shadows the submodule attribute, so fetch the modules by dotted path.
_initialize_config_module = importlib.import_module(
    "moe_common.config.initialize_config"
)
_structlog_config_module = importlib.import_module(
    "moe_common.config.structlog_config"
)

APP_ENV_VARS = (
    "API_KEY",
    "APP_TITLE",
    "APP_VERSION",
    "APP_URL",
    "ENVIRONMENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for name in APP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_logging_and_config():
    yield
    _structlog_config_module._state.reset()
    _initialize_config_module._state.reset()
    structlog.reset_defaults()


@pytest.fixture
def app_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """A complete, valid development environment."""
    monkeypatch.setenv("APP_TITLE", "Expert Ensemble")
    monkeypatch.setenv("APP_VERSION", "1.4.0")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    return monkeypatch


class RecordingLogger:
    """AppLogger test double that keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level: str, msg: str, fields: dict) -> None:
        self.records.append((level, msg, fields))

    def debug(self, msg: str, /, **kwargs) -> None:
        self._record("debug", msg, kwargs)

    def info(self, msg: str, /, **kwargs) -> None:
        self._record("info", msg, kwargs)

    def warning(self, msg: str, /, **kwargs) -> None:
        self._record("warning", msg, kwargs)

    def error(self, msg: str, /, **kwargs) -> None:
        self._record("error", msg, kwargs)

    def critical(self, msg: str, /, **kwargs) -> None:
        self._record("critical", msg, kwargs)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
