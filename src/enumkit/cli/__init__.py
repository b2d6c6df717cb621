from .actions import EnumAction, EnumArgType

__all__ = ["EnumAction", "EnumArgType"]
