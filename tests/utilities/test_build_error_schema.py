from pytest import raises

from graphql.utilities import build_schema, print_schema

from graphql_error_fields import (
    GraphQLErrorDirective,
    build_error_schema,
    error_directive_sdl,
    is_error_type,
)


def describe_build_error_schema():
    def defines_error_directive_in_schema_language():
        assert error_directive_sdl == "directive @error on OBJECT"

    def adds_error_directive_if_not_declared():
        schema = build_error_schema(
            """
            type UserError @error {
              code: String
            }

            type Query {
              userErrors: [UserError]
            }
            """
        )
        directive = schema.get_directive(GraphQLErrorDirective.name)
        assert directive is not None
        assert directive.name == "error"
        assert is_error_type(schema.get_type("UserError")) is True
        assert is_error_type(schema.query_type) is False

    def keeps_declared_error_directive():
        schema = build_error_schema(
            '''
            """Error types"""
            directive @error on OBJECT

            type UserError @error {
              code: String
            }

            type Query {
              userErrors: [UserError]
            }
            '''
        )
        directive = schema.get_directive("error")
        assert directive.description == "Error types"
        assert is_error_type(schema.get_type("UserError")) is True
        assert print_schema(schema).count("directive @error") == 1

    def adds_error_directive_to_schema_without_error_types():
        schema = build_error_schema(
            """
            type Query {
              name: String
            }
            """
        )
        assert schema.get_directive("error") is not None

    def builds_error_types_without_locations():
        schema = build_error_schema(
            """
            type UserError @error {
              code: String
            }

            type Query {
              userErrors: [UserError]
            }
            """,
            no_location=True,
        )
        user_error = schema.get_type("UserError")
        assert user_error.ast_node.loc is None
        assert is_error_type(user_error) is True

    def cannot_build_error_types_with_plain_schema_builder():
        with raises(TypeError) as exc_info:
            build_schema(
                """
                type UserError @error {
                  code: String
                }

                type Query {
                  userErrors: [UserError]
                }
                """
            )
        assert "Unknown directive" in str(exc_info.value)
        assert "@error" in str(exc_info.value)
