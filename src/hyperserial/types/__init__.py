"""Shared record types for hyperserial."""

from hyperserial.types.base import HyperBaseModel

__all__ = [
    "HyperBaseModel",
]
