"""Projection of operation selection sets onto the schema.

Walks a selection set together with the schema's field graph and builds
the nested result namespace that mirrors exactly what was selected.
"""

from graphql import (
    FieldNode,
    FragmentSpreadNode,
    GraphQLInterfaceType,
    GraphQLObjectType,
    InlineFragmentNode,
    SelectionSetNode,
)

from .errors import UnsupportedConstructError
from .imports import merge_import_types
from .ir import IROperationField, IRPreparedField, IRSelectionType, IRTypeDefinition
from .navigator import get_in
from .type_definitions import get_io_type_definition

TYPENAME_FIELD = "__typename"


def get_field_nodes(selection_set: SelectionSetNode) -> list[FieldNode]:
    """Return the field selections of a selection set.

    Raises:
        UnsupportedConstructError: on fragment spreads and inline fragments
    """
    nodes = []
    for selection in selection_set.selections:
        if isinstance(selection, FieldNode):
            nodes.append(selection)
        elif isinstance(selection, FragmentSpreadNode):
            raise UnsupportedConstructError("fragment spread", selection.name.value)
        elif isinstance(selection, InlineFragmentNode):
            condition = selection.type_condition
            raise UnsupportedConstructError(
                "inline fragment", condition.name.value if condition else None
            )
        else:
            raise UnsupportedConstructError(type(selection).__name__)
    return nodes


def get_result_name(node: FieldNode) -> str:
    """Key the field appears under in the result: its alias or its name."""
    return node.alias.value if node.alias else node.name.value


def selection_set_to_object_fields(
    selection_set: SelectionSetNode,
    nsp_name: str,
) -> tuple[IRPreparedField, ...]:
    """Build flat fields pointing at ``<nsp_name>.<field>`` for each selection."""
    return tuple(
        IRPreparedField(name=name, type=f"{nsp_name}.{name}")
        for name in map(get_result_name, get_field_nodes(selection_set))
    )


def selection_set_to_namespace_fields(
    selection_set: SelectionSetNode,
    root_type: GraphQLObjectType | GraphQLInterfaceType,
    path: str = "",
) -> tuple[IROperationField, ...]:
    """Convert a selection set to operation namespace fields.

    Args:
        selection_set: Selections at the current nesting level
        root_type: Root type the whole path is resolved against
        path: Dotted path of the enclosing field, empty at the root
    """
    return tuple(
        field_node_to_namespace_field(node, root_type, path)
        for node in get_field_nodes(selection_set)
    )


def field_node_to_namespace_field(
    node: FieldNode,
    root_type: GraphQLObjectType | GraphQLInterfaceType,
    prev_path: str,
) -> IROperationField:
    """Convert a selected field to a leaf or composite namespace field."""
    field_name = node.name.value
    result_name = get_result_name(node)

    if field_name == TYPENAME_FIELD:
        return IROperationField(
            name=result_name,
            type=IRTypeDefinition(definition="string"),
        )

    path = f"{prev_path}.{field_name}" if prev_path else field_name
    output_type = get_in(root_type, path).type

    if node.selection_set is None:
        type_definition = get_io_type_definition(output_type)
        return IROperationField(
            name=result_name,
            type=type_definition,
            import_types=type_definition.import_types,
        )

    children = selection_set_to_namespace_fields(node.selection_set, root_type, path)
    return IROperationField(
        name=result_name,
        type=IRSelectionType(
            name=result_name,
            fields=selection_set_to_object_fields(node.selection_set, result_name),
            output_type=output_type,
        ),
        fields=children,
        import_types=merge_import_types(*(child.import_types for child in children)),
    )


def get_import_types(fields: tuple[IROperationField, ...]) -> tuple[str, ...]:
    """Merge the transitive import types of several namespace fields."""
    return merge_import_types(*(f.import_types for f in fields))
