from logging import getLogger
from typing import Any, Callable, Collection, FrozenSet

from graphql.language import DirectiveLocation
from graphql.pyutils import inspect
from graphql.type import (
    GraphQLDirective,
    GraphQLObjectType,
    GraphQLSchema,
    is_introspection_type,
    is_object_type,
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

logger = getLogger(__name__)

ErrorTypePredicate = Callable[[Any], bool]

ERROR_TYPE_EXTENSION = "error"
"""Key in the extensions of an object type that marks it as an error type"""

GraphQLErrorDirective = GraphQLDirective(
    name="error",
    locations=[DirectiveLocation.OBJECT],
    description="Marks an object type as carrying structured, expected errors"
    " that must always be selected by queries which can return it.",
)
"""Schema language marker for error types"""


def _has_error_directive(type_: GraphQLObjectType) -> bool:
    nodes = [type_.ast_node, *(type_.extension_ast_nodes or ())]
    return any(
        directive.name.value == GraphQLErrorDirective.name
        for node in nodes
        if node
        for directive in node.directives or ()
    )


def is_error_type(type_: Any) -> bool:
    """Check whether the given type is an error type.

    An error type is an object type that has been marked with the ``@error`` directive
    in the schema language, either in its definition or in one of its extensions, or
    that has a truthy ``"error"`` entry in its extensions when defined in code.
    """
    if not is_object_type(type_):
        return False
    extensions = type_.extensions
    if extensions and extensions.get(ERROR_TYPE_EXTENSION):
        return True
    return _has_error_directive(type_)


def assert_error_type(type_: Any) -> GraphQLObjectType:
    if not is_error_type(type_):
        raise TypeError(f"Expected {inspect(type_)} to be a GraphQL error type.")
    return type_


def get_error_types(
    schema: GraphQLSchema, is_error_type: ErrorTypePredicate = is_error_type
) -> FrozenSet[str]:
    """Get the names of all error types in the given schema.

    The result can be passed to :func:`error_type_predicate` in order to classify
    types by looking them up instead of inspecting them again for every field.
    """
    error_types = frozenset(
        name
        for name, type_ in schema.type_map.items()
        if not is_introspection_type(type_) and is_error_type(type_)
    )
    logger.debug(
        "Found %d error types in schema: %s.",
        len(error_types),
        ", ".join(sorted(error_types)) or "none",
    )
    return error_types


def error_type_predicate(error_types: Collection[str]) -> ErrorTypePredicate:
    """Create a predicate that classifies types by the given error type names."""
    if isinstance(error_types, str) or not isinstance(error_types, Collection):
        raise TypeError(
            f"Error types must be a collection of type names: {inspect(error_types)}."
        )
    names = frozenset(error_types)

    def is_error_type(type_: Any) -> bool:
        return is_object_type(type_) and type_.name in names

    return is_error_type
