"""GraphQL-core Error Fields

Validation for GraphQL-core that requires queries to select the structured errors
which can be returned by the fields they select.

Object types are marked as error types with the ``@error`` directive in the schema
language, or with an ``"error"`` entry in their extensions. If a selected field returns
an object type with fields of such error types (directly, in a list, or as members of a
union), these error fields must be selected as well. If a selection on a union with
error types discriminates by type using inline fragments, each of the error types must
get its own inline fragment.

The package is organized in the following sub-packages:

  - ``graphql_error_fields.type``: Classification of error types.
  - ``graphql_error_fields.validation``: The validation rule and a validate function.
  - ``graphql_error_fields.utilities``: Building schemas with error types.
"""

from .version import version, version_info

from .type import (
    ERROR_TYPE_EXTENSION,
    ErrorTypePredicate,
    GraphQLErrorDirective,
    assert_error_type,
    error_type_predicate,
    get_error_types,
    is_error_type,
)

from .validation import (
    RequireErrorFieldsRule,
    error_fields_rules,
    missing_error_message,
    missing_error_type_message,
    require_error_fields_rule,
    validate_error_fields,
)

from .utilities import build_error_schema, error_directive_sdl

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "ERROR_TYPE_EXTENSION",
    "ErrorTypePredicate",
    "GraphQLErrorDirective",
    "assert_error_type",
    "error_type_predicate",
    "get_error_types",
    "is_error_type",
    "RequireErrorFieldsRule",
    "error_fields_rules",
    "missing_error_message",
    "missing_error_type_message",
    "require_error_fields_rule",
    "validate_error_fields",
    "build_error_schema",
    "error_directive_sdl",
]
