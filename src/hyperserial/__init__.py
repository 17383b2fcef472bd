from hyperserial.__version__ import __version__
from hyperserial.serializer import (
    Serializer,
    SlotState,
    item_block,
    collection_block,
    descriptor_block,
)
from hyperserial.core import (
    AttributeSlot,
    attribute,
    Descriptor,
    ItemDescriptor,
    CollectionDescriptor,
    evaluate,
)

from hyperserial.common.exceptions import (
    SerializerError,
    ErrorCode,
    UnknownAttributeError,
    MissingBlockError,
    UndefinedDescriptorError,
)

from hyperserial.logging import setup_logging


__all__ = [
    "__version__",

    "Serializer",
    "SlotState",
    "item_block",
    "collection_block",
    "descriptor_block",

    "AttributeSlot",
    "attribute",
    "Descriptor",
    "ItemDescriptor",
    "CollectionDescriptor",
    "evaluate",

    # Exceptions (public API)
    "SerializerError",
    "ErrorCode",
    "UnknownAttributeError",
    "MissingBlockError",
    "UndefinedDescriptorError",

    "setup_logging",
]
