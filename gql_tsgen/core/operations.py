"""Assembly of compiled operations from operation definition nodes."""

import logging

from graphql import (
    GraphQLObjectType,
    GraphQLSchema,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    VariableDefinitionNode,
)

from .errors import MissingRootTypeError, UnsupportedConstructError
from .imports import merge_import_types
from .ir import IROperation, IROperationNamespace, IRPreparedField, IRPreparedObject
from .naming import get_compiled_operation_name, get_compiled_operation_namespace_name
from .selection import (
    get_import_types,
    selection_set_to_namespace_fields,
    selection_set_to_object_fields,
)
from .type_definitions import get_type_node_definition

logger = logging.getLogger(__name__)


def get_operation_root_node(
    schema: GraphQLSchema,
    operation: OperationType,
) -> GraphQLObjectType:
    """Return the root type configured for an operation kind.

    Raises:
        MissingRootTypeError: if the schema defines no such root
    """
    if operation == OperationType.QUERY:
        root = schema.query_type
    elif operation == OperationType.MUTATION:
        root = schema.mutation_type
    else:
        root = schema.subscription_type

    if root is None:
        raise MissingRootTypeError(operation.value)
    return root


def parse_operation_variable_definitions(
    nodes: tuple[VariableDefinitionNode, ...],
) -> IRPreparedObject:
    """Parse operation variables into an ``Arguments`` record."""
    fields = []
    import_types: tuple[str, ...] = ()

    for node in nodes:
        type_definition = get_type_node_definition(node.type)
        fields.append(
            IRPreparedField(
                name=node.variable.name.value,
                type=type_definition.definition,
            )
        )
        import_types = merge_import_types(import_types, type_definition.import_types)

    return IRPreparedObject(
        name="Arguments",
        fields=tuple(fields),
        import_types=import_types,
    )


def selection_set_to_root_namespace(
    selection_set: SelectionSetNode,
    compiled_name: str,
    args: IRPreparedObject,
    root_type: GraphQLObjectType,
) -> IROperationNamespace:
    """Build the nested namespace of an operation."""
    fields = selection_set_to_namespace_fields(selection_set, root_type)
    return IROperationNamespace(
        name=compiled_name,
        fields=fields,
        args=args,
        import_types=get_import_types(fields),
    )


def parse_operation_definition_node(
    node: OperationDefinitionNode,
    schema: GraphQLSchema,
    operations_string: str,
) -> IROperation:
    """Compile one operation definition.

    Args:
        node: The parsed operation
        schema: Schema the operation is written against
        operations_string: Source text the node was parsed from

    Raises:
        UnsupportedConstructError: for anonymous operations and fragments
        MissingRootTypeError: if the operation kind has no root type
        PathNotFoundError: if a selected field does not exist
    """
    if node.name is None:
        raise UnsupportedConstructError("anonymous operation")

    name = node.name.value
    operation = node.operation.value
    logger.debug(f"Processing {operation}: {name}")

    operation_name = get_compiled_operation_name(name, operation)
    namespace_name = get_compiled_operation_namespace_name(name, operation)
    root_type = get_operation_root_node(schema, node.operation)

    selection = IRPreparedObject(
        name=operation_name,
        fields=selection_set_to_object_fields(node.selection_set, namespace_name),
    )
    args = parse_operation_variable_definitions(node.variable_definitions or ())
    namespace = selection_set_to_root_namespace(
        node.selection_set, namespace_name, args, root_type
    )

    return IROperation(
        name=operation_name,
        operation_type=operation,
        signature=operations_string[node.loc.start:node.loc.end],
        selection=selection,
        namespace=namespace,
        import_types=merge_import_types(args.import_types, namespace.import_types),
    )
