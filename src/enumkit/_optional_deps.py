from __future__ import annotations

from collections.abc import Sequence
from importlib import import_module
from types import ModuleType
from typing import Any


def _format_extra_names(extras: Sequence[str]) -> str:
    return ",".join(dict.fromkeys(extras))


def build_optional_dependency_error(
    *,
    feature: str,
    extras: Sequence[str],
    missing_module: str | None,
) -> ModuleNotFoundError:
    c_extras = _format_extra_names(extras)
    c_missing = (
        f"Missing optional dependency `{missing_module}`."
        if missing_module
        else "Missing optional dependency."
    )
    return ModuleNotFoundError(
        f"{feature} is unavailable. {c_missing} "
        f"Install extras with `pip install \"enumkit[{c_extras}]\"` "
        f"or sync in development with `pdm sync -G dev -G {c_extras}`."
    )


def _split_candidates(dotted: str) -> set[str]:
    l_parts = dotted.split(".")
    return {*l_parts, l_parts[0], l_parts[-1]}


def import_optional_module(
    *,
    module_name: str,
    package: str,
    feature: str,
    extras: Sequence[str],
    required_modules: Sequence[str],
) -> ModuleType:
    """Import a submodule that depends on an optional extra.

    Only a ``ModuleNotFoundError`` caused by one of ``required_modules`` is
    rewritten into an install hint; anything else is re-raised untouched.
    """
    try:
        return import_module(module_name, package=package)
    except ModuleNotFoundError as exc:
        set_missing = _split_candidates(exc.name or "")

        set_required: set[str] = set()
        for _item in required_modules:
            set_required |= _split_candidates(_item)

        if not required_modules or bool(set_missing & set_required):
            raise build_optional_dependency_error(
                feature=feature,
                extras=extras,
                missing_module=exc.name,
            ) from exc
        raise


def import_optional_attr(
    *,
    module_name: str,
    attr_name: str,
    package: str,
    feature: str,
    extras: Sequence[str],
    required_modules: Sequence[str],
) -> Any:
    module = import_optional_module(
        module_name=module_name,
        package=package,
        feature=feature,
        extras=extras,
        required_modules=required_modules,
    )
    return getattr(module, attr_name)
