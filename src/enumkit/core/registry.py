"""Process-wide registry of enum instances, keyed by enum class.

Every concrete :class:`~enumkit.core.base.RichEnum` subclass owns one
:class:`EnumSlot` holding:

- its instances in construction (declaration) order,
- a value index,
- a name index.

Slots are keyed by the class object itself, so two unrelated subclasses can
never see each other's constants even when their raw values or names collide.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from .base import RichEnum


@dataclass(slots=True)
class EnumSlot:
    """
    Registry record of one concrete enum class.

    Attributes:
        instances (list[RichEnum]): Every constructed instance, in order.
            Duplicated values/names stay here even when shadowed in an index.
        by_value (dict[Hashable, RichEnum]): Value index, last write wins.
        by_name (dict[str, RichEnum]): Name index, last write wins.
    """

    instances: list[RichEnum[Any]]
    by_value: dict[Hashable, RichEnum[Any]]
    by_name: dict[str, RichEnum[Any]]

    @classmethod
    def new(cls) -> "EnumSlot":
        return cls(instances=[], by_value={}, by_name={})

    def add(self, instance: RichEnum[Any]) -> None:
        """
        Append ``instance`` and point both indexes at it.

        An existing entry under the same value or name is overwritten; the
        shadowed instance remains in :attr:`instances`.
        """
        self.instances.append(instance)

        if (cls_prev := self.by_value.get(instance.value)) is not None:
            logger.warning(
                f"Duplicate enum value {instance.value!r} in {type(instance).__name__}: "
                f"{cls_prev.name!r} is shadowed by {instance.name!r}."
            )
        self.by_value[instance.value] = instance

        if (cls_prev := self.by_name.get(instance.name)) is not None:
            logger.warning(
                f"Duplicate enum name {instance.name!r} in {type(instance).__name__}."
            )
        self.by_name[instance.name] = instance


class EnumRegistry:
    """Table of :class:`EnumSlot` objects keyed by enum class identity.

    Registration runs under one lock so that append order and last-write-wins
    hold even when enum classes are defined from several threads. Reads are
    lock-free; a slot is only queried after its class body has finished.
    """

    def __init__(self) -> None:
        self._slots: dict[type, EnumSlot] = {}
        self._lock = threading.Lock()

    def register(self, enum_cls: type, instance: RichEnum[Any]) -> None:
        """
        Record ``instance`` under the slot of ``enum_cls``.

        Args:
            enum_cls (type): Concrete class that constructed ``instance``.
            instance (RichEnum): The freshly built constant.
        """
        with self._lock:
            cls_slot = self._slots.get(enum_cls)
            if cls_slot is None:
                cls_slot = EnumSlot.new()
                self._slots[enum_cls] = cls_slot
                logger.debug(
                    f"Created enum slot: {enum_cls.__module__}.{enum_cls.__qualname__}"
                )
            cls_slot.add(instance)

    def select_slot(self, enum_cls: type) -> EnumSlot | None:
        """Return the slot of ``enum_cls``, or ``None`` if it never registered."""
        return self._slots.get(enum_cls)

    def contains_class(self, enum_cls: type) -> bool:
        return enum_cls in self._slots

    def list_classes(self) -> list[type]:
        # dict keeps first-registration order
        return list(self._slots.keys())


REGISTRY_ENUM = EnumRegistry()
