"""Logging filters for context injection.

This module provides a filter that injects the serializer currently being
defined into log records, so events raised while a configuration block runs
can be correlated with the class and descriptor kind they belong to.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar, Token
from typing import Optional, Tuple

from hyperserial.__version__ import __version__

serializer_var: ContextVar[Optional[str]] = ContextVar("serializer", default=None)
descriptor_kind_var: ContextVar[Optional[str]] = ContextVar("descriptor_kind", default=None)

DefinitionTokens = Tuple[Token, Token]


class ContextFilter(logging.Filter):
    """Logging filter that adds definition context to log records.

    Attributes already present on the record (for example passed through
    ``extra=``) are left untouched.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        serializer = serializer_var.get()
        kind = descriptor_kind_var.get()
        if serializer is not None and not hasattr(record, "serializer"):
            setattr(record, "serializer", serializer)
        if kind is not None and not hasattr(record, "descriptor_kind"):
            setattr(record, "descriptor_kind", kind)
        setattr(record, "sdk_name", "hyperserial")
        setattr(record, "sdk_version", __version__)

        return True


def set_definition_context(serializer: str, kind: str) -> DefinitionTokens:
    """Set the definition context and return tokens to restore the previous one."""
    return serializer_var.set(serializer), descriptor_kind_var.set(kind)


def reset_definition_context(tokens: DefinitionTokens) -> None:
    """Restore the definition context captured by ``set_definition_context``."""
    serializer_token, kind_token = tokens
    descriptor_kind_var.reset(kind_token)
    serializer_var.reset(serializer_token)


def clear_definition_context() -> None:
    """Clear all definition context variables."""
    serializer_var.set(None)
    descriptor_kind_var.set(None)
