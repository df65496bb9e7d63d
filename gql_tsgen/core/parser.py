"""Named-type extraction using graphql-core.

Turns each named type of a built ``GraphQLSchema`` into an IR record.
Types the schema system synthesizes itself (built-in scalars and
introspection types) have no definition node and are skipped.
"""

import logging
from enum import Enum
from typing import Callable

from graphql import (
    EnumTypeDefinitionNode,
    GraphQLArgument,
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    UnionTypeDefinitionNode,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
)

from .imports import merge_import_types
from .ir import (
    IREntity,
    IREnum,
    IREnumValue,
    IRNamedType,
    IRNamespace,
    IRNamespaceField,
    IRPreparedField,
    IRPreparedObject,
    IRScalar,
    IRUnion,
)
from .naming import to_camel_case
from .scalars import transpile_type_name
from .type_definitions import get_io_type_definition

logger = logging.getLogger(__name__)


class DisplayType(str, Enum):
    """Order in which type declarations are emitted."""
    AS_IS = "as-is"  # Source order
    DEFAULT = "default"  # Grouped by kind


# Emission weight of each definition kind when grouping by kind
DEFINITION_WEIGHTS: dict[type, int] = {
    ScalarTypeDefinitionNode: 0,
    EnumTypeDefinitionNode: 1,
    InterfaceTypeDefinitionNode: 2,
    InputObjectTypeDefinitionNode: 3,
    UnionTypeDefinitionNode: 4,
    ObjectTypeDefinitionNode: 5,
}


def get_sort_key(display: DisplayType) -> Callable[[GraphQLNamedType], tuple[int, int]]:
    """Return a sort key for named types depending on the display type.

    Types without a definition node go first. The rest are ordered by
    source position (``as-is``) or by definition kind (``default``).
    """
    def sort_key(type_: GraphQLNamedType) -> tuple[int, int]:
        node = type_.ast_node
        if node is None:
            return (0, 0)
        if display == DisplayType.AS_IS:
            return (1, node.loc.start if node.loc else 0)
        return (1, DEFINITION_WEIGHTS.get(type(node), len(DEFINITION_WEIGHTS)))

    return sort_key


def parse_named_type(type_: GraphQLNamedType) -> IRNamedType | None:
    """Parse any named type. Skips GraphQL internal types like Boolean or __Schema.

    Returns:
        The IR record, or None when the type has no definition node
    """
    if type_.ast_node is None:
        return None
    if is_scalar_type(type_):
        return parse_scalar_type(type_)
    if is_union_type(type_):
        return parse_union_type(type_)
    if is_enum_type(type_):
        return parse_enum_type(type_)
    if is_object_type(type_) or is_interface_type(type_):
        return parse_object_or_interface_type(type_)
    if is_input_object_type(type_):
        return parse_input_object_type(type_)
    raise TypeError(f"Unexpected named type: {type_!r}")


def parse_enum_type(type_: GraphQLEnumType) -> IREnum:
    logger.debug(f"Processing enum: {type_.name}")
    return IREnum(
        name=type_.name,
        description=type_.description,
        values=tuple(
            IREnumValue(name=name, description=value.description)
            for name, value in type_.values.items()
        ),
    )


def parse_arguments(args: dict[str, GraphQLArgument]) -> IRPreparedObject:
    """Build the ``Arguments`` record of a field."""
    fields = []
    import_types: tuple[str, ...] = ()

    for name, arg in args.items():
        type_definition = get_io_type_definition(arg.type)
        fields.append(
            IRPreparedField(
                name=name,
                type=type_definition.definition,
                description=arg.description,
            )
        )
        import_types = merge_import_types(import_types, type_definition.import_types)

    return IRPreparedObject(
        name="Arguments",
        fields=tuple(fields),
        import_types=import_types,
    )


def parse_object_or_interface_type(
    type_: GraphQLObjectType | GraphQLInterfaceType,
) -> IREntity:
    """Parse an object or interface type into a flat list and a namespace."""
    logger.debug(f"Processing object: {type_.name}")
    return _parse_entity(type_, with_arguments=True)


def parse_input_object_type(type_: GraphQLInputObjectType) -> IREntity:
    """Parse an input object type. Its fields never take arguments."""
    logger.debug(f"Processing input: {type_.name}")
    return _parse_entity(type_, with_arguments=False)


def _parse_entity(
    type_: GraphQLObjectType | GraphQLInterfaceType | GraphQLInputObjectType,
    with_arguments: bool,
) -> IREntity:
    formatted_name = to_camel_case(type_.name)
    flat_fields = []
    namespace_fields = []
    import_types: tuple[str, ...] = ()

    for field_name, field in type_.fields.items():
        # The flat declaration points into the namespace
        flat_fields.append(
            IRPreparedField(
                name=field_name,
                type=f"{formatted_name}.{field_name}",
                description=field.description,
            )
        )

        args = parse_arguments(field.args) if with_arguments else None
        type_definition = get_io_type_definition(field.type)
        import_types = merge_import_types(
            import_types,
            type_definition.import_types,
            args.import_types if args else (),
        )

        namespace_fields.append(
            IRNamespaceField(
                name=field_name,
                type=type_definition.definition,
                description=field.description,
                args=args,
            )
        )

    return IREntity(
        fields=IRPreparedObject(name=formatted_name, fields=tuple(flat_fields)),
        namespace=IRNamespace(
            name=formatted_name,
            fields=tuple(namespace_fields),
            description=type_.description,
        ),
        import_types=import_types,
    )


def parse_scalar_type(type_: GraphQLScalarType) -> IRScalar:
    return IRScalar(name=type_.name, description=type_.description)


def parse_union_type(type_: GraphQLUnionType) -> IRUnion:
    return IRUnion(
        name=type_.name,
        description=type_.description,
        types=tuple(transpile_type_name(t.name) for t in type_.types),
    )
