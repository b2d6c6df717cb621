from typing import Any

import polars as pl

from ...core.base import RichEnum


def to_frame(enum_cls: type[RichEnum[Any]]) -> pl.DataFrame:
    """
    Export the constants of ``enum_cls`` as a polars DataFrame.

    Columns:
        - ``value``: Int64 or String; mixed int/str values are cast to String.
        - ``name`` / ``label``: String, ``label`` mirrors ``name``.
        - ``description``: Object, payloads kept verbatim.

    Rows follow declaration order. An enum without constants yields an empty
    frame with the same columns.
    """
    l_items = enum_cls.values()
    l_values: list[Any] = [_i.value for _i in l_items]

    set_types = {type(_v) for _v in l_values}
    if set_types == {int}:
        dtype_value: type[pl.DataType] = pl.Int64
    else:
        dtype_value = pl.String
        l_values = [str(_v) for _v in l_values]

    l_names = [_i.name for _i in l_items]
    return pl.DataFrame(
        [
            pl.Series("value", l_values, dtype=dtype_value),
            pl.Series("name", l_names, dtype=pl.String),
            pl.Series("label", l_names, dtype=pl.String),
            pl.Series("description", [_i.description for _i in l_items], dtype=pl.Object),
        ]
    )
