"""Rich enum base class.

Subclasses declare singleton constants carrying a primitive ``value``, a
display ``name`` and an optional ``description`` payload. Each construction
registers the instance in :data:`~enumkit.core.registry.REGISTRY_ENUM` under
the concrete subclass, and the class-level queries only ever consult that
subclass's slot.

Example:
    >>> class HttpStatus(RichEnum[int]):
    ...     OK = member(200, "OK", "Request succeeded")
    ...     NOT_FOUND = member(404, "NOT_FOUND")
    >>> HttpStatus.from_value(404) is HttpStatus.NOT_FOUND
    True
    >>> HttpStatus.OK.to_string(), str(HttpStatus.OK)
    ('OK', '200')
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from loguru import logger

from .registry import REGISTRY_ENUM, EnumSlot

EnumValueType = int | str

V = TypeVar("V", bound=EnumValueType)
T = TypeVar("T")

_RE_DECIMAL_KEY = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class SpecMember:
    """Placeholder for a constant declared in a :class:`RichEnum` body.

    Attributes:
        value: Canonical primitive value.
        name: Display name; ``None`` means "use the attribute name".
        description: Opaque payload stored verbatim.
    """

    value: EnumValueType
    name: str | None = None
    description: Any = None


def member(value: EnumValueType, name: str | None = None, description: Any = None) -> Any:
    """Declare a constant inside a :class:`RichEnum` subclass body.

    The placeholder is replaced by a real instance once the class is created.
    """
    return SpecMember(value=value, name=name, description=description)


def _validate_member_args(value: Any, name: Any) -> None:
    if value is None:
        raise ValueError("Enum `value` must not be None.")
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(
            f"Enum `value` must be int or str, got {type(value).__name__}: {value!r}"
        )
    if not isinstance(name, str) or not name:
        raise ValueError(f"Enum `name` must be a non-empty string, got {name!r}")


class RichEnum(Generic[V]):
    """
    Base class for valued, named singleton constants.

    Two declaration styles are supported and may be mixed:

    - ``OK = member(200, "OK")`` in the class body;
    - ``HttpStatus.OK = HttpStatus(200, "OK")`` after the class body.

    Instances are immutable and compare by identity.

    Conversions:
        - :meth:`to_string` gives the display name.
        - :meth:`value_of` gives the canonical value.
        - ``str(x)`` / f-strings / ``format(x)`` give the string form of the
          value, *not* the name.
    """

    __slots__ = ("_value", "_name", "_description")

    _value: V
    _name: str
    _description: Any

    def __init__(self, value: V, name: str, description: Any = None) -> None:
        if type(self) is RichEnum:
            raise TypeError("RichEnum is abstract; subclass it to declare constants.")
        _validate_member_args(value, name)

        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_description", description)
        REGISTRY_ENUM.register(type(self), self)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # class __dict__ preserves declaration order
        for c_attr, v in list(vars(cls).items()):
            if isinstance(v, SpecMember):
                setattr(
                    cls,
                    c_attr,
                    cls(v.value, c_attr if v.name is None else v.name, v.description),
                )

    @property
    def value(self) -> V:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> Any:
        return self._description

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} constants are immutable ({key!r}).")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{type(self).__name__} constants are immutable ({key!r}).")

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    def to_string(self) -> str:
        """Display form: the declared name."""
        return self._name

    def value_of(self) -> V:
        """Primitive form: the canonical value."""
        return self._value

    def __str__(self) -> str:
        # implicit coercion yields the value; use to_string() for the name
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"

    @classmethod
    def _select_slot(cls) -> EnumSlot | None:
        return REGISTRY_ENUM.select_slot(cls)

    @classmethod
    def values(cls) -> list[Self]:
        """Return all constants of this class in declaration order."""
        if (cls_slot := cls._select_slot()) is None:
            return []
        return list(cls_slot.instances)  # type: ignore[arg-type]

    @classmethod
    def from_value(cls, value: Any) -> Self | None:
        """
        Look up a constant by its canonical value.

        Args:
            value: Value to look up. ``None`` and unhashable inputs are misses.

        Returns:
            Self | None: The matching constant, or ``None`` when absent. If
            several constants share ``value`` the last declared one wins.
        """
        if value is None or (cls_slot := cls._select_slot()) is None:
            return None
        try:
            cls_found = cls_slot.by_value.get(value)
        except TypeError:
            # unhashable input, e.g. a tuple holding a list
            return None
        if cls_found is None:
            logger.debug(f"No {cls.__name__} value {value!r} found")
        return cls_found  # type: ignore[return-value]

    @classmethod
    def from_name(cls, name: str | None) -> Self | None:
        """
        Look up a constant by its exact, case-sensitive name.

        Args:
            name: Name to look up. ``None`` and ``""`` are misses.

        Returns:
            Self | None: The matching constant, or ``None`` when absent.
        """
        if not name or not isinstance(name, str):
            return None
        cls_slot = cls._select_slot()
        cls_found = cls_slot.by_name.get(name) if cls_slot is not None else None
        if cls_found is None:
            logger.debug(f"No {cls.__name__} name {name!r} found")
        return cls_found  # type: ignore[return-value]

    @classmethod
    def from_key(cls, key: str | int) -> Self | None:
        """
        Resolve a raw key that may denote either a value or a name.

        A key whose text is entirely decimal digits is a value key: it is
        tried as ``int`` first, then as the digit string (for str-valued
        enums). Any other key is a name key. Misses return ``None`` silently.
        """
        if (cls_slot := cls._select_slot()) is None:
            return None
        try:
            c_key = str(key)
        except ValueError:
            # int beyond the interpreter's int/str conversion digit limit
            return None
        if _RE_DECIMAL_KEY.fullmatch(c_key):
            l_cands: list[int | str] = []
            try:
                l_cands.append(int(c_key))
            except ValueError:
                pass  # digit string too long for int(); only the text form can match
            l_cands.append(c_key)
            for _cand in l_cands:
                if (cls_found := cls_slot.by_value.get(_cand)) is not None:
                    return cls_found  # type: ignore[return-value]
            return None
        if not c_key:
            return None
        return cls_slot.by_name.get(c_key)  # type: ignore[return-value]

    @classmethod
    def set_of(cls, *items: Self) -> set[Self]:
        """Build a set of constants; duplicates collapse by identity."""
        return set(items)

    @classmethod
    def enum_map(cls, raw: Mapping[str | int, T]) -> dict[Self, T]:
        """
        Re-key raw data by constants of this class.

        Keys are resolved with :meth:`from_key`. Unresolvable keys are dropped
        without error; when two keys resolve to the same constant, the later
        one wins.

        Args:
            raw: Mapping keyed by values (digit keys) or names.

        Returns:
            dict[Self, T]: Mapping from constant to the raw payload.

        Examples:
            >>> class Priority(RichEnum[int]):
            ...     LOW = member(1)
            ...     HIGH = member(3)
            >>> Priority.enum_map({1: "a", "HIGH": "b", 9: "c"}) == {
            ...     Priority.LOW: "a", Priority.HIGH: "b"}
            True
        """
        dict_out: dict[Self, T] = {}
        for _key, _payload in raw.items():
            if (cls_found := cls.from_key(_key)) is not None:
                dict_out[cls_found] = _payload
        return dict_out
