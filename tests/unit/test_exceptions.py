"""Tests for the hyperserial exception hierarchy."""

import logging

import pytest

from hyperserial.common.exceptions import (
    ErrorCode,
    MissingBlockError,
    SerializerError,
    UndefinedDescriptorError,
    UnknownAttributeError,
    configuration_error,
    invalid_block_error,
    invalid_kind_error,
    missing_block_error,
    undefined_descriptor_error,
    unknown_attribute_error,
)


class TestSerializerError:
    """Base error behaviour."""

    def test_str_includes_code(self):
        error = SerializerError("bad config", error_code=ErrorCode.CONFIG_INVALID)

        assert str(error) == "[CONFIG_002] bad config"

    def test_str_includes_cause(self):
        error = SerializerError("bad config", cause=ValueError("nope"))

        assert str(error) == "[CONFIG_001] bad config (caused by: ValueError: nope)"

    def test_to_dict(self):
        error = configuration_error("bad format", config_key="log_format")

        assert error.to_dict() == {
            "type": "SerializerError",
            "message": "bad format",
            "error_code": "CONFIG_001",
            "error_name": "CONFIG_ERROR",
            "details": {"config_key": "log_format"},
        }

    @pytest.mark.parametrize(
        "code, expected",
        [
            (ErrorCode.UNKNOWN_ATTRIBUTE, UnknownAttributeError),
            (ErrorCode.MISSING_BLOCK, MissingBlockError),
            (ErrorCode.UNDEFINED_DESCRIPTOR, UndefinedDescriptorError),
            (ErrorCode.INVALID_KIND, SerializerError),
        ],
    )
    def test_from_error_code_picks_subclass(self, code, expected):
        error = SerializerError.from_error_code(code, "message")

        assert type(error) is expected
        assert error.error_code is code

    def test_construction_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger="hyperserial.common.exceptions")

        unknown_attribute_error("title", "ItemDescriptor", ("href",))

        record = next(r for r in caplog.records if r.getMessage() == "error.raised")
        assert record.levelno == logging.WARNING
        assert record.error_code == "DSL_001"
        assert record.error_type == "UnknownAttributeError"
        assert record.attribute == "title"


    def test_log_level_can_be_lowered(self, caplog):
        caplog.set_level(logging.DEBUG, logger="hyperserial.common.exceptions")

        unknown_attribute_error("title", "ItemDescriptor", log_level=logging.DEBUG)

        record = next(r for r in caplog.records if r.getMessage() == "error.raised")
        assert record.levelno == logging.DEBUG

class TestHelpers:
    """Helper factories build the right error and details."""

    def test_unknown_attribute_error(self):
        error = unknown_attribute_error("title", "ItemDescriptor", ("href", "rel"))

        assert isinstance(error, AttributeError)
        assert error.message == "'ItemDescriptor' has no attribute 'title'"
        assert error.details["known_attributes"] == "href, rel"

    def test_missing_block_error_without_block(self):
        error = missing_block_error("define_item")

        assert isinstance(error, TypeError)
        assert error.message == "define_item() requires a configuration block"
        assert "received" not in error.details

    def test_missing_block_error_with_non_callable(self):
        error = missing_block_error("define_item", 42)

        assert error.details["received"] == "int"
        assert "got int" in error.message

    def test_undefined_descriptor_error(self):
        error = undefined_descriptor_error("UserSerializer", "collection")

        assert isinstance(error, LookupError)
        assert error.details == {"serializer": "UserSerializer", "kind": "collection"}
        assert "define_collection()" in error.message

    def test_invalid_kind_error(self):
        error = invalid_kind_error("links", ("item", "collection"))

        assert error.error_code == ErrorCode.INVALID_KIND
        assert error.details["kind"] == "links"

    def test_invalid_block_error(self):
        async def configure():
            pass

        error = invalid_block_error("evaluate", configure, "not synchronous")

        assert type(error) is SerializerError
        assert error.error_code == ErrorCode.INVALID_BLOCK
        assert error.details["entry_point"] == "evaluate"
        assert error.details["block"].endswith("configure")
        assert error.message.endswith("not synchronous")

    def test_details_are_not_shared_between_errors(self):
        first = missing_block_error("define_item")
        second = missing_block_error("define_collection")

        assert first.details["entry_point"] == "define_item"
        assert second.details["entry_point"] == "define_collection"
