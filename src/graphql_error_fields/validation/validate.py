from typing import List, Optional, Sequence, Tuple, Type

from graphql.error import GraphQLError
from graphql.language import DocumentNode
from graphql.type import GraphQLSchema
from graphql.validation import ASTValidationRule, specified_rules, validate

from ..type import ErrorTypePredicate, error_type_predicate, get_error_types
from .rules import RequireErrorFieldsRule, require_error_fields_rule

__all__ = ["error_fields_rules", "validate_error_fields"]


error_fields_rules: Tuple[Type[ASTValidationRule], ...] = (
    *specified_rules,
    RequireErrorFieldsRule,
)
"""The rules defined by the GraphQL specification plus the error fields rule"""


def validate_error_fields(
    schema: GraphQLSchema,
    document_ast: DocumentNode,
    rules: Optional[Sequence[Type[ASTValidationRule]]] = None,
    is_error_type: Optional[ErrorTypePredicate] = None,
    max_errors: Optional[int] = None,
) -> List[GraphQLError]:
    """Validate a document and require that it selects all error fields.

    This runs the validation of graphql-core with the given rules, or the rules defined
    by the GraphQL specification if no rules are given, and always adds the rule that
    requires error fields and error types in unions to be selected.

    If no ``is_error_type`` predicate is given, the error types are looked up once in
    the schema, and the rule classifies types by the resulting names. Variants of the
    error fields rule among the given rules are replaced by this rule, so that each
    missing error field or error type is reported only once.
    """
    if rules is None:
        rules = specified_rules
    elif not isinstance(rules, (list, tuple)):
        raise TypeError("Rules must be passed as a list/tuple.")
    if is_error_type is None:
        is_error_type = error_type_predicate(get_error_types(schema))
    rules = [
        rule
        for rule in rules
        if not (isinstance(rule, type) and issubclass(rule, RequireErrorFieldsRule))
    ]
    rules.append(require_error_fields_rule(is_error_type))
    return validate(schema, document_ast, rules, max_errors=max_errors)
