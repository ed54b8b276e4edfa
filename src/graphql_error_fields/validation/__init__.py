"""Validation of error field selections

The :mod:`graphql_error_fields.validation` package provides the rule that requires
queries to select error fields, and a variant of graphql-core's ``validate`` that
applies it together with the rules defined by the GraphQL specification.
"""

from .rules import (
    RequireErrorFieldsRule,
    missing_error_message,
    missing_error_type_message,
    require_error_fields_rule,
)
from .validate import error_fields_rules, validate_error_fields

__all__ = [
    "RequireErrorFieldsRule",
    "error_fields_rules",
    "missing_error_message",
    "missing_error_type_message",
    "require_error_fields_rule",
    "validate_error_fields",
]
