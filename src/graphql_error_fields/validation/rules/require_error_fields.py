from typing import Any, Dict, List, Type

from graphql.error import GraphQLError
from graphql.language import (
    FieldNode,
    InlineFragmentNode,
    Node,
    SelectionSetNode,
)
from graphql.pyutils import inspect
from graphql.type import (
    GraphQLField,
    GraphQLOutputType,
    get_named_type,
    is_interface_type,
    is_object_type,
    is_union_type,
)
from graphql.validation import ValidationRule

from ...type import ErrorTypePredicate, is_error_type

__all__ = [
    "RequireErrorFieldsRule",
    "missing_error_message",
    "missing_error_type_message",
    "require_error_fields_rule",
]


def missing_error_message(field_name: str) -> str:
    return f'Error field "{field_name}" is required to be selected'


def missing_error_type_message(type_name: str) -> str:
    return f'Error type "{type_name}" is required to be selected in union'


class RequireErrorFieldsRule(ValidationRule):
    """Require error fields

    A GraphQL document is only valid if every selected field of an object type with
    error fields also selects these error fields, and if every selection on a union
    with error types that discriminates by type also has a fragment for each of the
    error types.

    Note: This rule is optional and is not part of the Validation section of the GraphQL
    Specification. Which types are error types is decided by ``is_error_type``, see
    :func:`require_error_fields_rule` for using a different classification.
    """

    is_error_type: ErrorTypePredicate = staticmethod(is_error_type)

    def is_error_bearing(self, type_: GraphQLOutputType) -> bool:
        """Check whether values of the given type can contain error types."""
        named_type = get_named_type(type_)
        if is_union_type(named_type):
            return any(self.is_error_type(member) for member in named_type.types)
        return self.is_error_type(named_type)

    def get_error_fields(self, field_def: GraphQLField) -> List[str]:
        """Get the names of the error fields of the type the given field returns."""
        named_type = get_named_type(field_def.type)
        fields: Dict[str, GraphQLField] = (
            named_type.fields
            if is_object_type(named_type) or is_interface_type(named_type)
            else {}
        )
        return [
            name for name, field in fields.items() if self.is_error_bearing(field.type)
        ]

    # Validate on leave to allow for deeper errors to appear first.
    def leave_field(self, node: FieldNode, *_args: Any) -> None:
        field_def = self.context.get_field_def()
        if not field_def:
            return
        selection_set = node.selection_set
        if not selection_set:
            return
        error_fields = self.get_error_fields(field_def)
        if not error_fields:
            return
        selected = {
            selection.name.value
            for selection in selection_set.selections
            if isinstance(selection, FieldNode)
        }
        for field_name in error_fields:
            if field_name not in selected:
                self.report_error(GraphQLError(missing_error_message(field_name), node))

    def leave_selection_set(
        self,
        node: SelectionSetNode,
        _key: Any,
        parent: Any,
        _path: Any,
        _ancestors: List[Node],
    ) -> None:
        # selection sets of nested inline fragments are covered by the field's own
        if not isinstance(parent, FieldNode):
            return
        field_def = self.context.get_field_def()
        if not field_def:
            return
        union_type = get_named_type(field_def.type)
        if not is_union_type(union_type):
            return
        fragment_types = {
            selection.type_condition.name.value
            for selection in node.selections
            if isinstance(selection, InlineFragmentNode) and selection.type_condition
        }
        if not fragment_types:
            return
        for member_type in union_type.types:
            if (
                self.is_error_type(member_type)
                and member_type.name not in fragment_types
            ):
                self.report_error(
                    GraphQLError(missing_error_type_message(member_type.name), node)
                )


def require_error_fields_rule(
    is_error_type: ErrorTypePredicate,
) -> Type[RequireErrorFieldsRule]:
    """Get a variant of the rule that uses the given error type classification."""
    if not callable(is_error_type):
        raise TypeError(
            f"The error type predicate must be callable: {inspect(is_error_type)}."
        )
    return type(
        RequireErrorFieldsRule.__name__,
        (RequireErrorFieldsRule,),
        {"is_error_type": staticmethod(is_error_type)},
    )
