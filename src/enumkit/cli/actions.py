import argparse
from collections.abc import Sequence
from functools import partial
from typing import Any

from ..core.base import RichEnum


def _format_choices(enum_cls: type[RichEnum[Any]]) -> str:
    return ", ".join(f"{_i.name} ({_i.value!r})" for _i in enum_cls.values())


class EnumArgType:
    """argparse ``type=`` converter from a CLI token to an enum constant.

    Tokens made only of decimal digits resolve by value, anything else by
    name, exactly like :meth:`RichEnum.enum_map` keys.

    Typical usage:
        ``parser.add_argument("--status", type=EnumArgType(HttpStatus))``
    """

    def __init__(self, enum_cls: type[RichEnum[Any]]) -> None:
        self.enum_cls = enum_cls

    def __call__(self, token: str) -> RichEnum[Any]:
        if (cls_found := self.enum_cls.from_key(token)) is None:
            raise argparse.ArgumentTypeError(
                f"invalid {self.enum_cls.__name__} choice: {token!r} "
                f"(choose from {_format_choices(self.enum_cls)})"
            )
        return cls_found

    def __repr__(self) -> str:
        # argparse shows repr(type) in some error paths
        return f"{self.__class__.__name__}({self.enum_cls.__name__})"


class EnumAction(argparse.Action):
    """Resolve and store enum constants for argparse options.

    Accepts names or values on the command line, also normalizes string
    defaults into constants during parser construction, and works with
    ``nargs`` (stores a list).

    Typical usage:
        ``parser.add_argument("--status", action=EnumAction.of(HttpStatus))``
        ``parser.add_argument("--codes", action=EnumAction.of(HttpStatus), nargs="+")``
    """

    def __init__(
        self,
        option_strings: list[str],
        dest: str,
        *,
        enum_cls: type[RichEnum[Any]],
        **kwargs: Any,
    ) -> None:
        """Construct an EnumAction.

        Args:
            option_strings: Option strings received from argparse.
            dest: Namespace attribute name.
            enum_cls: Concrete enum class whose constants are accepted.
            **kwargs: Forwarded to ``argparse.Action``.

        Raises:
            argparse.ArgumentError: If the default does not resolve.
        """
        if kwargs.get("metavar") is None:
            kwargs["metavar"] = "{" + ",".join(_i.name for _i in enum_cls.values()) + "}"
        super().__init__(option_strings, dest, **kwargs)

        self.enum_cls = enum_cls
        self._type = EnumArgType(enum_cls)

        if self.default is not None and self.default is not argparse.SUPPRESS:
            if isinstance(self.default, (list, tuple)):
                self.default = [self._resolve(_v) for _v in self.default]
            else:
                self.default = self._resolve(self.default)

    @classmethod
    def of(cls, enum_cls: type[RichEnum[Any]]) -> "partial[EnumAction]":
        return partial(cls, enum_cls=enum_cls)

    def _resolve(self, token: Any) -> RichEnum[Any]:
        if isinstance(token, self.enum_cls):
            return token
        try:
            return self._type(str(token))
        except argparse.ArgumentTypeError as e:
            raise argparse.ArgumentError(self, str(e)) from e

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: str | Sequence[Any] | None,
        option_string: str | None = None,
    ) -> None:
        if isinstance(values, (list, tuple)):
            setattr(namespace, self.dest, [self._resolve(_v) for _v in values])
        else:
            setattr(namespace, self.dest, self._resolve(values))
