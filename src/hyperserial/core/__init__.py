"""Declaration primitives: memoizing attributes, descriptors and the block evaluator."""

from .attributes import AttributeSlot, attribute
from .descriptors import CollectionDescriptor, Descriptor, ItemDescriptor
from .evaluator import evaluate

__all__ = [
    "AttributeSlot",
    "attribute",
    "Descriptor",
    "ItemDescriptor",
    "CollectionDescriptor",
    "evaluate",
]
