from __future__ import annotations

from typing import TYPE_CHECKING, Any

from enumkit._optional_deps import import_optional_attr

__all__ = ["to_frame"]

if TYPE_CHECKING:
    from .frame import to_frame


def __getattr__(name: str) -> Any:
    if name == "to_frame":
        return import_optional_attr(
            module_name=".frame",
            attr_name=name,
            package=__name__,
            feature="enumkit.io.polars",
            extras=("polars",),
            required_modules=("polars",),
        )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
