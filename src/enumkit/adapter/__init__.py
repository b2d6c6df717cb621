from .conf import DEFAULT_OPTION_FIELDS, SpecOptionFields
from .options import to_options

__all__ = ["DEFAULT_OPTION_FIELDS", "SpecOptionFields", "to_options"]
