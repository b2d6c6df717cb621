from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError, version
from types import ModuleType
from typing import TYPE_CHECKING, Any

from .core import EnumValueType, RichEnum, SpecMember, member

__all__ = [
    "__version__",
    "EnumValueType",
    "RichEnum",
    "SpecMember",
    "member",
    "adapter",
    "cli_actions",
    "cli_console",
    "io_polars",
]

try:
    __version__ = version("enumkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

if TYPE_CHECKING:
    import enumkit.adapter as adapter
    import enumkit.cli.actions as cli_actions
    import enumkit.cli.console as cli_console
    import enumkit.io.polars as io_polars

_ALIAS_MODULES: dict[str, str] = {
    "adapter": "enumkit.adapter",
    "cli_actions": "enumkit.cli.actions",
    "cli_console": "enumkit.cli.console",
    "io_polars": "enumkit.io.polars",
}


def __getattr__(name: str) -> Any:
    module_name = _ALIAS_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_loaded: ModuleType = import_module(module_name)
    globals()[name] = module_loaded
    return module_loaded


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
