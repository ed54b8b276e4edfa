"""Error field validation rules"""

from .require_error_fields import (
    RequireErrorFieldsRule,
    missing_error_message,
    missing_error_type_message,
    require_error_fields_rule,
)

__all__ = [
    "RequireErrorFieldsRule",
    "missing_error_message",
    "missing_error_type_message",
    "require_error_fields_rule",
]
