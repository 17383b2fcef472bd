"""Serializer host class, class-body block decorators and descriptor storage."""

from .base import Serializer
from .decorators import DescriptorBlock, collection_block, descriptor_block, item_block
from .registry import DescriptorRegistry, SlotState

__all__ = [
    "Serializer",
    "DescriptorBlock",
    "descriptor_block",
    "item_block",
    "collection_block",
    "DescriptorRegistry",
    "SlotState",
]
