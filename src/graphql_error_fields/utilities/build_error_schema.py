from typing import Union

from graphql.language import DirectiveDefinitionNode, DocumentNode, Source, parse
from graphql.type import GraphQLSchema
from graphql.utilities import build_ast_schema, concat_ast

from ..type import GraphQLErrorDirective

__all__ = ["build_error_schema", "error_directive_sdl"]


error_directive_sdl = f"directive @{GraphQLErrorDirective.name} on OBJECT"
"""The definition of the error directive in the schema language"""


def defines_error_directive(document_ast: DocumentNode) -> bool:
    return any(
        isinstance(definition, DirectiveDefinitionNode)
        and definition.name.value == GraphQLErrorDirective.name
        for definition in document_ast.definitions
    )


def build_error_schema(
    source: Union[str, Source],
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    no_location: bool = False,
) -> GraphQLSchema:
    """Build a GraphQLSchema directly from a source document with error types.

    Works like ``build_schema`` of graphql-core, but error types can be marked with the
    ``@error`` directive without declaring that directive in the source document.
    """
    document_ast = parse(source, no_location=no_location)
    if not defines_error_directive(document_ast):
        document_ast = concat_ast(
            [document_ast, parse(error_directive_sdl, no_location=True)]
        )
    return build_ast_schema(
        document_ast, assume_valid=assume_valid, assume_valid_sdl=assume_valid_sdl
    )
