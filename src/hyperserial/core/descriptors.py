"""Descriptor variants.

A descriptor is a small object holding one ``AttributeSlot`` per declared
``attribute``. The set of names is fixed by the class, so each variant is a
distinct type even when two variants declare the same attributes today.
"""

import inspect
import logging
from typing import ClassVar, Dict, Tuple

from hyperserial.common.exceptions import unknown_attribute_error
from hyperserial.core.attributes import AttributeSlot, attribute


class Descriptor:
    """Base class for objects exposing named memoizing attributes.

    Subclasses declare attributes with ``attribute()``; declarations are
    inherited and collected in definition order when the subclass is created.
    Looking up any other public name raises ``UnknownAttributeError``.
    """

    kind: ClassVar[str] = ""
    _attribute_names: ClassVar[Tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        names = []
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if isinstance(value, attribute) and name not in names:
                    names.append(name)
        # a subclass may shadow an inherited attribute with something else
        cls._attribute_names = tuple(
            name for name in names
            if isinstance(inspect.getattr_static(cls, name), attribute)
        )

    def __init__(self) -> None:
        self._slots: Dict[str, AttributeSlot] = {
            name: AttributeSlot(name) for name in self.attribute_names()
        }

    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        return cls._attribute_names

    def slot(self, name: str) -> AttributeSlot:
        """Return the slot backing ``name``.

        Raises:
            UnknownAttributeError: If this variant does not declare ``name``
        """
        try:
            return self._slots[name]
        except KeyError:
            raise unknown_attribute_error(
                name, type(self).__name__, self.attribute_names()
            ) from None

    def is_set(self, name: str) -> bool:
        return self.slot(name).is_set

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        # hasattr() and getattr(obj, name, default) land here routinely
        raise unknown_attribute_error(
            name, type(self).__name__, self.attribute_names(), log_level=logging.DEBUG
        )

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={slot.get()!r}" for name, slot in self._slots.items() if slot.is_set
        )
        return f"{type(self).__name__}({fields})"


class ItemDescriptor(Descriptor):
    """Describes a single resource."""

    kind = "item"

    href = attribute("Link to the resource")


class CollectionDescriptor(Descriptor):
    """Describes a collection of resources."""

    kind = "collection"

    href = attribute("Link to the collection")
