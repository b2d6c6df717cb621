from __future__ import annotations

from typing import TYPE_CHECKING, Any

from enumkit._optional_deps import import_optional_attr

__all__ = ["SpecTableTheme", "render_enum_table", "print_enum_table"]

if TYPE_CHECKING:
    from .table import SpecTableTheme, print_enum_table, render_enum_table


def __getattr__(name: str) -> Any:
    if name in __all__:
        return import_optional_attr(
            module_name=".table",
            attr_name=name,
            package=__name__,
            feature="enumkit.cli.console",
            extras=("cli",),
            required_modules=("rich",),
        )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
