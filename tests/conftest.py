"""Shared pytest fixtures for the simple-log-parser test suite."""

import io

import pytest

VALID_LINE = '{"timestamp":1704067200,"level":"INFO","message":"Test message"}'
INVALID_LINE = '{"timestamp":"invalid","level":"INFO"}'
EXTRA_LINE = (
    '{"timestamp":1704067200,"level":"ERROR","message":"Failed",'
    '"user":"admin","ip":"192.168.1.1"}'
)


@pytest.fixture
def valid_line() -> str:
    return VALID_LINE


@pytest.fixture
def invalid_line() -> str:
    return INVALID_LINE


@pytest.fixture
def extra_line() -> str:
    return EXTRA_LINE


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def err() -> io.StringIO:
    return io.StringIO()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's LOG_PARSER_* variables out of every test."""
    for name in ("LOG_PARSER_CONFIG", "LOG_PARSER_SHOW_BANNER", "LOG_PARSER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
