"""Resolution of GraphQL type references into TypeScript type expressions.

A type reference is a chain of NonNull/List wrapper layers ending at a
named type. Two entry points walk that chain: one over raw AST type nodes
(operation variables) and one over schema type objects (fields and
arguments). Both produce identical results for equivalent references.

Nullability composes outside-in after list wrapping:

    String          -> string | null
    [String]        -> (string | null)[] | null
    [PostedPost!]!  -> PostedPost[]
"""

from graphql import (
    GraphQLInputType,
    GraphQLOutputType,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    TypeNode,
    is_list_type,
    is_named_type,
    is_non_null_type,
)

from .imports import merge_import_types
from .ir import IRTypeDefinition
from .scalars import transpile_type_name

NULL_SUFFIX = " | null"


def make_nullable(definition: str) -> str:
    """Make a type expression nullable."""
    return f"{definition}{NULL_SUFFIX}"


def make_list(definition: str) -> str:
    """Make an array of a type expression, parenthesizing unions."""
    if " | " in definition:
        return f"({definition})[]"
    return f"{definition}[]"


def _named_definition(name: str) -> IRTypeDefinition:
    return IRTypeDefinition(
        definition=transpile_type_name(name),
        import_types=merge_import_types([name]),
    )


def get_type_node_definition(node: TypeNode, nullable: bool = True) -> IRTypeDefinition:
    """Recursively resolve an AST type node, getting deeper into the wrappers.

    Args:
        node: The type node, e.g. the type of a variable definition
        nullable: Whether the current layer may be null

    Returns:
        The rendered definition and the custom types it references
    """
    if isinstance(node, NonNullTypeNode):
        return get_type_node_definition(node.type, nullable=False)

    if isinstance(node, ListTypeNode):
        inner = get_type_node_definition(node.type, nullable=True)
        definition = make_list(inner.definition)
        import_types = inner.import_types
    elif isinstance(node, NamedTypeNode):
        named = _named_definition(node.name.value)
        definition = named.definition
        import_types = named.import_types
    else:
        raise TypeError(f"Unexpected type node: {node!r}")

    if nullable:
        definition = make_nullable(definition)

    return IRTypeDefinition(definition=definition, import_types=import_types)


def get_io_type_definition(
    type_: GraphQLOutputType | GraphQLInputType,
    nullable: bool = True,
) -> IRTypeDefinition:
    """Recursively resolve a schema type, getting deeper into the wrappers.

    Args:
        type_: A field, argument or input field type from the schema
        nullable: Whether the current layer may be null

    Returns:
        The rendered definition and the custom types it references
    """
    if is_non_null_type(type_):
        return get_io_type_definition(type_.of_type, nullable=False)

    if is_list_type(type_):
        inner = get_io_type_definition(type_.of_type, nullable=True)
        definition = make_list(inner.definition)
        import_types = inner.import_types
    elif is_named_type(type_):
        named = _named_definition(type_.name)
        definition = named.definition
        import_types = named.import_types
    else:
        raise TypeError(f"Unexpected schema type: {type_!r}")

    if nullable:
        definition = make_nullable(definition)

    return IRTypeDefinition(definition=definition, import_types=import_types)


def get_output_type_definition_with_wrappers(
    type_: GraphQLOutputType,
    definition: str,
    nullable: bool = True,
) -> str:
    """Apply the list and non-null wrappers of ``type_`` to a ready definition.

    Used for selected fields whose element type is a synthetic selection
    type rather than the named schema type.
    """
    if is_non_null_type(type_):
        return get_output_type_definition_with_wrappers(
            type_.of_type, definition, nullable=False
        )

    if is_list_type(type_):
        definition = make_list(
            get_output_type_definition_with_wrappers(type_.of_type, definition)
        )

    return make_nullable(definition) if nullable else definition
