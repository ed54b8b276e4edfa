"""Error type classification

The :mod:`graphql_error_fields.type` package is responsible for deciding which object
types of a GraphQL schema are error types.
"""

from .error_types import (
    ERROR_TYPE_EXTENSION,
    ErrorTypePredicate,
    GraphQLErrorDirective,
    assert_error_type,
    error_type_predicate,
    get_error_types,
    is_error_type,
)

__all__ = [
    "ERROR_TYPE_EXTENSION",
    "ErrorTypePredicate",
    "GraphQLErrorDirective",
    "assert_error_type",
    "error_type_predicate",
    "get_error_types",
    "is_error_type",
]
