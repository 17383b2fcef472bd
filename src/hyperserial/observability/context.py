"""Definition-time observability context."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from opentelemetry.trace import Status, StatusCode

from hyperserial.logging import get_logger
from hyperserial.logging.filters import reset_definition_context, set_definition_context
from hyperserial.settings import get_settings
from hyperserial.telemetry import get_tracer

SPAN_NAME = "hyperserial.define"


def _stringify(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def sanitize_extras(
    extra: Optional[Dict[str, Any]],
    *,
    prefix: Optional[str] = None,
) -> Dict[str, str]:
    """Sanitize arbitrary telemetry extras into a JSON-safe dict."""
    if not extra:
        return {}

    result: Dict[str, str] = {}
    for key, value in extra.items():
        sanitized = _stringify(value)
        if sanitized is None:
            continue
        field = f"{prefix}{key}" if prefix else str(key)
        result[field] = sanitized
    return result


@contextmanager
def definition_scope(serializer: str, kind: str) -> Iterator[None]:
    """Apply logging and tracing scope while a descriptor is being defined.

    Log records emitted inside the scope carry ``serializer`` and
    ``descriptor_kind``. When tracing is enabled the scope also opens a
    ``hyperserial.define`` span and marks it as failed if the block raises.
    The previous logging context is restored on exit.
    """
    tokens = set_definition_context(serializer, kind)
    try:
        if not get_settings().tracing_enabled:
            yield
            return

        tracer = get_tracer("hyperserial")
        with tracer.start_as_current_span(
            SPAN_NAME,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            span.set_attribute("hyperserial.serializer", serializer)
            span.set_attribute("hyperserial.kind", kind)
            try:
                yield
            except Exception as exc:
                span.record_exception(exc)
                span.set_status(Status(StatusCode.ERROR))
                get_logger(__name__).debug(
                    "definition.failed",
                    extra=sanitize_extras({"error_type": type(exc).__name__}),
                )
                raise
    finally:
        reset_definition_context(tokens)
