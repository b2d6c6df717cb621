from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.style import Style
from rich.table import Table

from ...core.base import RichEnum


@dataclass(frozen=True, slots=True)
class SpecTableTheme:
    header: str = "#7C3AED"
    value: str = "#00FFFF"
    name: str = "#4ADE80"


def render_enum_table(
    enum_cls: type[RichEnum[Any]],
    *,
    title: str | None = None,
    theme: SpecTableTheme | None = None,
) -> Table:
    """Build a rich table of ``enum_cls`` constants in declaration order."""
    cls_theme = theme or SpecTableTheme()
    cls_table = Table(
        title=title if title is not None else enum_cls.__name__,
        header_style=Style(color=cls_theme.header, bold=True),
    )
    cls_table.add_column("value", style=Style(color=cls_theme.value), justify="right")
    cls_table.add_column("name", style=Style(color=cls_theme.name))
    cls_table.add_column("description")

    for _item in enum_cls.values():
        cls_table.add_row(
            repr(_item.value),
            _item.name,
            "" if _item.description is None else str(_item.description),
        )
    return cls_table


def print_enum_table(
    enum_cls: type[RichEnum[Any]],
    *,
    console: Console | None = None,
    title: str | None = None,
    theme: SpecTableTheme | None = None,
) -> None:
    (console or Console()).print(render_enum_table(enum_cls, title=title, theme=theme))
