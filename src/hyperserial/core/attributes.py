"""Memoizing attribute primitives.

An ``AttributeSlot`` holds the value of one descriptor attribute. Calling the
slot is both the setter and the getter: the first call fixes the value, every
later call returns it unchanged. ``attribute`` declares a slot on a
``Descriptor`` class.
"""

from typing import Any, List, Optional, Sequence, Tuple

from hyperserial.logging import get_logger
from hyperserial.observability.context import sanitize_extras

logger = get_logger(__name__)


class AttributeSlot:
    """First-write-wins value holder for a single descriptor attribute.

    The value is ``None`` until the slot is first called. The first call stores
    its positional arguments as a list (an empty list when called without
    arguments). Every later call returns a fresh list of those values, whatever
    arguments it passes, so callers cannot alter the fixed value.

    Example:
        >>> href = AttributeSlot("href")
        >>> href("/users/1")
        ['/users/1']
        >>> href("/users/2")
        ['/users/1']
    """

    __slots__ = ("name", "value")

    def __init__(self, name: str):
        self.name = name
        self.value: Optional[Tuple[Any, ...]] = None

    @property
    def is_set(self) -> bool:
        return self.value is not None

    def set_if_unset(self, values: Sequence[Any]) -> bool:
        """Store ``values`` unless the slot already holds a value.

        Returns:
            True if the values were stored, False if they were ignored
        """
        if self.is_set:
            return False
        self.value = tuple(values)
        return True

    def get(self) -> Optional[List[Any]]:
        """Return a copy of the fixed values, or None if the slot is unset."""
        if self.value is None:
            return None
        return list(self.value)

    def __call__(self, *values: Any) -> List[Any]:
        if not self.set_if_unset(values) and values:
            logger.debug(
                "attribute.write_ignored",
                extra=sanitize_extras({"attribute": self.name, "ignored_values": list(values)}),
            )
        return self.get()

    def __repr__(self) -> str:
        if not self.is_set:
            return f"<AttributeSlot {self.name} unset>"
        return f"<AttributeSlot {self.name}={self.get()!r}>"


class attribute:
    """Declare a memoizing attribute on a ``Descriptor`` class.

    Reading the attribute from a descriptor instance returns that instance's
    ``AttributeSlot``, so ``descriptor.href("x")`` sets and ``descriptor.href()``
    reads. The slot itself cannot be reassigned.

    Example:
        >>> class LinkDescriptor(Descriptor):
        ...     href = attribute()
        ...     rel = attribute()
    """

    def __init__(self, doc: Optional[str] = None):
        self.name: Optional[str] = None
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional[Any], objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self  # Accessing via class
        return obj.slot(self.name)

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"'{self.name}' is a memoizing attribute; call {self.name}(...) instead of assigning"
        )
