from typing import Any

from ..core.base import RichEnum
from .conf import DEFAULT_OPTION_FIELDS, SpecOptionFields


def to_options(
    enum_cls: type[RichEnum[Any]],
    *,
    fields: SpecOptionFields | None = None,
) -> list[dict[str, Any]]:
    """Shape the constants of ``enum_cls`` into UI option records.

    Each record carries the constant's own fields (``value``, ``name`` and,
    unless disabled, ``description``) plus the option-list aliases
    ``label`` (= name) and ``value`` (= value). Order follows
    :meth:`RichEnum.values`.

    Args:
        enum_cls: Concrete enum class.
        fields: Key names of the option contract. Defaults to
            :data:`DEFAULT_OPTION_FIELDS`.

    Returns:
        list[dict[str, Any]]: One record per constant, in declaration order.

    Raises:
        ValueError: If ``fields`` is invalid.
    """
    cls_fields = fields or DEFAULT_OPTION_FIELDS
    if errors := cls_fields.validate():
        raise ValueError(
            "Invalid option fields:\n" + "\n".join(f"- {_err}" for _err in errors)
        )

    l_records: list[dict[str, Any]] = []
    for _item in enum_cls.values():
        dict_rec: dict[str, Any] = {"value": _item.value, "name": _item.name}
        if cls_fields.if_include_description:
            dict_rec["description"] = _item.description
        dict_rec[cls_fields.key_label] = _item.name
        dict_rec[cls_fields.key_value] = _item.value
        l_records.append(dict_rec)
    return l_records
