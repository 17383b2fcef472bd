"""Observability helpers shared by the definition machinery."""

from hyperserial.observability.context import definition_scope, sanitize_extras

__all__ = [
    "definition_scope",
    "sanitize_extras",
]
