"""Decorators for declaring descriptors inside a serializer class body.

The decorated function is the configuration block. It is not kept as a
method: ``Serializer.__init_subclass__`` runs it through ``define`` and
removes it from the class namespace.
"""

from typing import Any, Callable

from hyperserial.common.exceptions import missing_block_error


class DescriptorBlock:
    """A configuration block waiting to be applied to its serializer class."""

    __slots__ = ("kind", "block")

    def __init__(self, kind: str, block: Callable[..., Any]):
        self.kind = kind
        self.block = block

    def __repr__(self) -> str:
        name = getattr(self.block, "__qualname__", repr(self.block))
        return f"<DescriptorBlock {self.kind}: {name}>"


def descriptor_block(kind: str) -> Callable[[Callable[..., Any]], DescriptorBlock]:
    """Mark a function in a serializer class body as the block for ``kind``.

    Args:
        kind: Descriptor kind the block defines ("item" or "collection")

    Returns:
        Decorator wrapping the function in a DescriptorBlock

    Raises:
        MissingBlockError: If the decorator is applied to a non-callable

    Example:
        >>> class UserSerializer(Serializer):
        ...     @descriptor_block("item")
        ...     def _item():
        ...         href("/users/{id}")
    """
    def decorator(func: Callable[..., Any]) -> DescriptorBlock:
        if not callable(func):
            raise missing_block_error(f"{kind}_block", func)
        return DescriptorBlock(kind, func)

    return decorator


item_block = descriptor_block("item")
item_block.__doc__ = "Mark a class-body function as the serializer's item block."

collection_block = descriptor_block("collection")
collection_block.__doc__ = "Mark a class-body function as the serializer's collection block."
