from typing import Any, Callable, ClassVar, Optional, Type

from hyperserial.common.exceptions import missing_block_error, undefined_descriptor_error
from hyperserial.core.descriptors import CollectionDescriptor, Descriptor, ItemDescriptor
from hyperserial.core.evaluator import evaluate
from hyperserial.logging import get_logger
from hyperserial.observability.context import definition_scope, sanitize_extras
from hyperserial.serializer.decorators import DescriptorBlock
from hyperserial.serializer.registry import DescriptorRegistry, SlotState

logger = get_logger(__name__)


class Serializer:
    """Base class for declaratively configured serializers.

    Each subclass owns one ``DescriptorRegistry`` holding at most one
    descriptor per kind. The registry is created fresh for every subclass, so
    definitions are never shared with (or inherited by) other classes. All
    instances of a class read the same descriptors.

    Descriptors are defined either with the class-level entry points::

        class UserSerializer(Serializer):
            pass

        UserSerializer.define_item(lambda: href("/users/{id}"))

    or with block decorators in the class body::

        class UserSerializer(Serializer):
            @item_block
            def _item():
                href("/users/{id}")

    and are read through the instance accessors::

        UserSerializer().item().href()  # ['/users/{id}']

    Attributes:
        item_descriptor_class: Descriptor type built by ``define_item``.
            Override with an ``ItemDescriptor`` subclass to declare more
            attributes.
        collection_descriptor_class: Descriptor type built by
            ``define_collection``. Override with a ``CollectionDescriptor``
            subclass to declare more attributes.
    """

    item_descriptor_class: ClassVar[Type[ItemDescriptor]] = ItemDescriptor
    collection_descriptor_class: ClassVar[Type[CollectionDescriptor]] = CollectionDescriptor

    _registry: ClassVar[DescriptorRegistry] = DescriptorRegistry()

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls._registry = DescriptorRegistry()

        blocks = [
            (name, value) for name, value in vars(cls).items()
            if isinstance(value, DescriptorBlock)
        ]
        for name, _ in blocks:
            delattr(cls, name)
        # definition order, so a later block for the same kind replaces an earlier one
        for _, marker in blocks:
            cls.define(marker.kind, marker.block)

    @classmethod
    def descriptor_class(cls, kind: str) -> Type[Descriptor]:
        """Return the descriptor type this class builds for ``kind``."""
        return getattr(cls, f"{DescriptorRegistry.check_kind(kind)}_descriptor_class")

    @classmethod
    def define(cls, kind: str, block: Optional[Callable[..., Any]] = None) -> None:
        """Build a descriptor of ``kind`` from ``block`` and store it on this class.

        A fresh descriptor is created and populated by the block, then replaces
        whatever descriptor of that kind the class held before. Nothing from the
        previous descriptor is carried over. If the block fails, the class keeps
        its previous descriptor.

        Args:
            kind: Descriptor kind ("item" or "collection")
            block: Configuration block, implicit or explicit receiver style

        Raises:
            MissingBlockError: If no callable block is given
            UnknownAttributeError: If the block uses an undeclared attribute
            SerializerError: If ``kind`` is not a known descriptor kind
        """
        descriptor_class = cls.descriptor_class(kind)
        if block is None or not callable(block):
            raise missing_block_error(f"define_{kind}", block)

        with definition_scope(cls.__qualname__, kind):
            descriptor = evaluate(descriptor_class(), block)
            replaced = cls._registry.state(kind) is SlotState.DEFINED
            cls._registry.store(kind, descriptor)

        logger.info(
            "serializer.descriptor_defined",
            extra=sanitize_extras(
                {
                    "serializer": cls.__qualname__,
                    "descriptor_kind": kind,
                    "descriptor": descriptor_class.__name__,
                    "replaced": replaced,
                }
            ),
        )

    @classmethod
    def define_item(cls, block: Optional[Callable[..., Any]] = None) -> None:
        """Define the item descriptor from ``block``. See ``define``."""
        cls.define("item", block)

    @classmethod
    def define_collection(cls, block: Optional[Callable[..., Any]] = None) -> None:
        """Define the collection descriptor from ``block``. See ``define``."""
        cls.define("collection", block)

    @classmethod
    def descriptor(cls, kind: str) -> Optional[Descriptor]:
        return cls._registry.get(kind)

    @classmethod
    def descriptor_state(cls, kind: str) -> SlotState:
        return cls._registry.state(kind)

    @classmethod
    def require_descriptor(cls, kind: str) -> Descriptor:
        """Return the descriptor of ``kind``, failing loudly if it was never defined.

        Raises:
            UndefinedDescriptorError: If ``define_<kind>`` has not run for this class
        """
        descriptor = cls.descriptor(kind)
        if descriptor is None:
            raise undefined_descriptor_error(cls.__qualname__, kind)
        return descriptor

    def item(self) -> Optional[ItemDescriptor]:
        return type(self).descriptor("item")

    def collection(self) -> Optional[CollectionDescriptor]:
        return type(self).descriptor("collection")
