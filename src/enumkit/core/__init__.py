from .base import EnumValueType, RichEnum, SpecMember, member
from .registry import REGISTRY_ENUM, EnumRegistry, EnumSlot

__all__ = [
    "EnumValueType",
    "RichEnum",
    "SpecMember",
    "member",
    "REGISTRY_ENUM",
    "EnumRegistry",
    "EnumSlot",
]
