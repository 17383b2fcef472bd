"""Shared fixtures for hyperserial tests."""

import logging

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

import hyperserial.settings.main as settings_main
from hyperserial.settings import _reload_settings

SETTINGS_ENV_VARS = (
    "HYPERSERIAL_LOG_LEVEL",
    "HYPERSERIAL_LOG_FORMAT",
    "HYPERSERIAL_TRACING_ENABLED",
)

# The global tracer provider can only be installed once per process.
_span_exporter = InMemorySpanExporter()
_tracer_provider = TracerProvider()
_tracer_provider.add_span_processor(SimpleSpanProcessor(_span_exporter))
trace.set_tracer_provider(_tracer_provider)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test against default settings read from a clean environment."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)  # no stray .env file
    _reload_settings()
    yield
    # drop the cached instance; reloading here would read the test's own env vars
    settings_main._settings = None


@pytest.fixture
def span_exporter():
    _span_exporter.clear()
    yield _span_exporter
    _span_exporter.clear()


@pytest.fixture
def restore_root_logger():
    """Undo the root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
