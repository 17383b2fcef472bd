import logging
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for hyperserial operations.

    Codes categorise failures without requiring a dedicated exception class
    for every scenario. Each category has its own prefix.

    Attributes:
        CONFIG_*: Settings and environment errors
        DSL_*: Errors raised while declaring or reading descriptors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"

    # Declaration errors
    UNKNOWN_ATTRIBUTE = "DSL_001"
    MISSING_BLOCK = "DSL_002"
    UNDEFINED_DESCRIPTOR = "DSL_003"
    INVALID_KIND = "DSL_004"
    INVALID_BLOCK = "DSL_005"


class SerializerError(Exception):
    """Base exception for all hyperserial errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        log_level: int = logging.WARNING,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid a circular dependency with the logging package
        from hyperserial.logging import get_logger
        from hyperserial.observability.context import sanitize_extras

        get_logger(__name__).log(
            log_level,
            "error.raised",
            extra=sanitize_extras(
                {
                    "error_code": error_code.value,
                    "error_type": type(self).__name__,
                    "error_message": message,
                    **self.details,
                }
            ),
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {self.cause})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs: Any,
    ) -> "SerializerError":
        """Create the most specific exception for ``error_code``.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for SerializerError

        Returns:
            SerializerError instance (or the subclass registered for the code)
        """
        error_cls = _ERROR_CLASSES.get(error_code, cls)
        return error_cls(message=message, error_code=error_code, **kwargs)


class UnknownAttributeError(SerializerError, AttributeError):
    """A configuration block used a name the descriptor does not declare."""


class MissingBlockError(SerializerError, TypeError):
    """A builder entry point was called without a configuration block."""


class UndefinedDescriptorError(SerializerError, LookupError):
    """A descriptor was required before its builder entry point ever ran."""


_ERROR_CLASSES = {
    ErrorCode.UNKNOWN_ATTRIBUTE: UnknownAttributeError,
    ErrorCode.MISSING_BLOCK: MissingBlockError,
    ErrorCode.UNDEFINED_DESCRIPTOR: UndefinedDescriptorError,
}


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs: Any,
) -> SerializerError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Settings key that caused the error
        **kwargs: Additional error details

    Returns:
        SerializerError with CONFIG_ERROR code
    """
    details = kwargs.pop("details", {})
    if config_key:
        details["config_key"] = config_key

    return SerializerError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **kwargs,
    )


def unknown_attribute_error(
    name: str,
    descriptor_type: str,
    known: Optional[Any] = None,
    **kwargs: Any,
) -> UnknownAttributeError:
    """Create an unknown attribute error.

    Args:
        name: The attribute name that was looked up
        descriptor_type: Class name of the descriptor that rejected it
        known: Attribute names the descriptor does declare
        **kwargs: Additional error details

    Returns:
        UnknownAttributeError with UNKNOWN_ATTRIBUTE code
    """
    details = kwargs.pop("details", {})
    details["attribute"] = name
    details["descriptor"] = descriptor_type
    if known is not None:
        details["known_attributes"] = ", ".join(known)

    return UnknownAttributeError(
        message=f"'{descriptor_type}' has no attribute '{name}'",
        error_code=ErrorCode.UNKNOWN_ATTRIBUTE,
        details=details,
        **kwargs,
    )


def missing_block_error(
    entry_point: str,
    received: Any = None,
    **kwargs: Any,
) -> MissingBlockError:
    """Create a missing block error.

    Args:
        entry_point: Name of the builder entry point that was called
        received: What was passed instead of a callable block
        **kwargs: Additional error details

    Returns:
        MissingBlockError with MISSING_BLOCK code
    """
    details = kwargs.pop("details", {})
    details["entry_point"] = entry_point
    if received is None:
        message = f"{entry_point}() requires a configuration block"
    else:
        details["received"] = type(received).__name__
        message = (
            f"{entry_point}() requires a callable configuration block, "
            f"got {type(received).__name__}"
        )

    return MissingBlockError(
        message=message,
        error_code=ErrorCode.MISSING_BLOCK,
        details=details,
        **kwargs,
    )


def undefined_descriptor_error(
    serializer: str,
    kind: str,
    **kwargs: Any,
) -> UndefinedDescriptorError:
    """Create an undefined descriptor error.

    Args:
        serializer: Name of the serializer class that was queried
        kind: Descriptor kind that has not been defined

    Returns:
        UndefinedDescriptorError with UNDEFINED_DESCRIPTOR code
    """
    details = kwargs.pop("details", {})
    details["serializer"] = serializer
    details["kind"] = kind

    return UndefinedDescriptorError(
        message=f"{serializer} has no {kind} descriptor; call define_{kind}() first",
        error_code=ErrorCode.UNDEFINED_DESCRIPTOR,
        details=details,
        **kwargs,
    )


def invalid_kind_error(
    kind: Any,
    available: Any,
    **kwargs: Any,
) -> SerializerError:
    """Create an error for an unrecognised descriptor kind."""
    details = kwargs.pop("details", {})
    details["kind"] = str(kind)
    details["available_kinds"] = ", ".join(available)

    return SerializerError(
        message=f"Unknown descriptor kind '{kind}'. Available kinds: {details['available_kinds']}",
        error_code=ErrorCode.INVALID_KIND,
        details=details,
        **kwargs,
    )


def invalid_block_error(
    entry_point: str,
    block: Any,
    reason: str,
    **kwargs: Any,
) -> SerializerError:
    """Create an error for a callable that cannot run as a configuration block.

    Args:
        entry_point: Name of the function that received the block
        block: The rejected block
        reason: Why the block cannot be run
    """
    details = kwargs.pop("details", {})
    details["entry_point"] = entry_point
    details["block"] = getattr(block, "__qualname__", type(block).__name__)

    return SerializerError(
        message=f"{entry_point}() cannot run {details['block']}: {reason}",
        error_code=ErrorCode.INVALID_BLOCK,
        details=details,
        **kwargs,
    )
