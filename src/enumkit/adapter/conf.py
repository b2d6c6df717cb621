# Key names used when shaping enum constants into UI option records.

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpecOptionFields:
    """Record keys of the UI option-list contract.

    Attributes:
        key_label: Key that receives the constant's name.
        key_value: Key that receives the constant's value.
        if_include_description: Whether to copy ``description`` into records.
    """

    key_label: str = "label"
    key_value: str = "value"
    if_include_description: bool = True

    def validate(self) -> tuple[str, ...]:
        errors: list[str] = []
        for c_name, c_key in (("key_label", self.key_label), ("key_value", self.key_value)):
            if not c_key.strip():
                errors.append(f"`{c_name}` must not be empty.")
        if self.key_label in ("name", "description"):
            errors.append(f"`key_label` must not shadow a constant field: {self.key_label!r}.")
        return tuple(errors)


DEFAULT_OPTION_FIELDS = SpecOptionFields()
