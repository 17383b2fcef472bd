import logging

from hyperserial.logging.filters import (
    ContextFilter,
    clear_definition_context,
    reset_definition_context,
    set_definition_context,
)


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="sample",
        args=(),
        exc_info=None,
    )


def test_context_filter_uses_definition_context():
    tokens = set_definition_context("UserSerializer", "item")
    try:
        record = _record()
        assert ContextFilter().filter(record)
        assert record.serializer == "UserSerializer"
        assert record.descriptor_kind == "item"
        assert record.sdk_name == "hyperserial"
    finally:
        reset_definition_context(tokens)


def test_context_filter_keeps_explicit_extras():
    tokens = set_definition_context("UserSerializer", "item")
    try:
        record = _record()
        record.serializer = "FromExtra"
        assert ContextFilter().filter(record)
        assert record.serializer == "FromExtra"
        assert record.descriptor_kind == "item"
    finally:
        reset_definition_context(tokens)


def test_reset_restores_outer_context():
    outer = set_definition_context("Outer", "item")
    inner = set_definition_context("Inner", "collection")
    reset_definition_context(inner)
    try:
        record = _record()
        ContextFilter().filter(record)
        assert record.serializer == "Outer"
        assert record.descriptor_kind == "item"
    finally:
        reset_definition_context(outer)


def test_context_filter_no_context_is_graceful():
    clear_definition_context()
    record = _record()
    assert ContextFilter().filter(record)
    assert not hasattr(record, "serializer")
    assert not hasattr(record, "descriptor_kind")
    assert hasattr(record, "sdk_version")
