"""Class-scoped storage for defined descriptors."""

from enum import Enum
from typing import Optional, Tuple

from pydantic import ValidationError

from hyperserial.common.exceptions import ErrorCode, SerializerError, invalid_kind_error
from hyperserial.core.descriptors import CollectionDescriptor, Descriptor, ItemDescriptor
from hyperserial.types.base import HyperBaseModel


class SlotState(str, Enum):
    """Lifecycle of a registry slot. There is no transition back to EMPTY."""
    EMPTY = "empty"
    DEFINED = "defined"


class DescriptorRegistry(HyperBaseModel):
    """Holds at most one descriptor per kind for a single serializer class.

    Every field is one descriptor kind. Assignment is validated, so a slot only
    ever holds an instance of its kind's descriptor type, and the stored object
    is the one that was passed in, not a copy.

    Attributes:
        item: Descriptor defined with ``define_item``, or None
        collection: Descriptor defined with ``define_collection``, or None
    """
    item: Optional[ItemDescriptor] = None
    collection: Optional[CollectionDescriptor] = None

    @classmethod
    def kinds(cls) -> Tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def check_kind(cls, kind: str) -> str:
        if kind not in cls.kinds():
            raise invalid_kind_error(kind, cls.kinds())
        return kind

    def get(self, kind: str) -> Optional[Descriptor]:
        return getattr(self, self.check_kind(kind))

    def state(self, kind: str) -> SlotState:
        return SlotState.EMPTY if self.get(kind) is None else SlotState.DEFINED

    def store(self, kind: str, descriptor: Descriptor) -> None:
        """Replace the descriptor held for ``kind``.

        Raises:
            SerializerError: If ``kind`` is unknown, or ``descriptor`` is not an
                instance of the kind's descriptor type (CONFIG_INVALID)
        """
        self.check_kind(kind)
        if descriptor is None:
            raise SerializerError(
                f"Cannot store an empty {kind} descriptor",
                error_code=ErrorCode.CONFIG_INVALID,
                details={"kind": kind},
            )
        try:
            setattr(self, kind, descriptor)
        except ValidationError as exc:
            raise SerializerError(
                f"{type(descriptor).__name__} cannot be stored as the {kind} descriptor",
                error_code=ErrorCode.CONFIG_INVALID,
                details={"kind": kind, "descriptor": type(descriptor).__name__},
                cause=exc,
            ) from exc
