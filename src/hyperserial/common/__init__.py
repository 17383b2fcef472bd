"""Common exceptions for hyperserial.

Exception Design:
    Errors are categorised with ``ErrorCode`` values. All exceptions inherit
    from ``SerializerError``; the few that callers are expected to catch by
    type also inherit from the matching builtin (``AttributeError``,
    ``TypeError``, ``LookupError``) so ordinary Python idioms keep working.
"""

from hyperserial.common.exceptions import (
    SerializerError,
    ErrorCode,
    UnknownAttributeError,
    MissingBlockError,
    UndefinedDescriptorError,
    # Helper functions
    configuration_error,
    unknown_attribute_error,
    missing_block_error,
    undefined_descriptor_error,
    invalid_kind_error,
    invalid_block_error,
)

__all__ = [
    # Base Exception and Error Codes
    "SerializerError",
    "ErrorCode",
    "UnknownAttributeError",
    "MissingBlockError",
    "UndefinedDescriptorError",
    # Helper functions
    "configuration_error",
    "unknown_attribute_error",
    "missing_block_error",
    "undefined_descriptor_error",
    "invalid_kind_error",
    "invalid_block_error",
]
