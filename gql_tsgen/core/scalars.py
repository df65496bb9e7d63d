"""Built-in GraphQL scalar handling.

Maps the five scalars every GraphQL schema ships with to the TypeScript
primitives they compile to. These are "library scalars": they never need
an import. Every other named type, including scalars declared by the
schema itself, is user-defined and always has to be imported by whoever
references it.

Example usage:
    from gql_tsgen.core.scalars import is_gql_scalar_type, transpile_type_name

    transpile_type_name("Int")       # "number"
    transpile_type_name("DateTime")  # "DateTime"
    is_gql_scalar_type("DateTime")   # False
"""

# Which GraphQL scalar converts to which TypeScript type
GQL_SCALAR_TYPES_MAP: dict[str, str] = {
    "Boolean": "boolean",
    "Float": "number",
    "String": "string",
    "Int": "number",
    "ID": "any",
}

GQL_SCALAR_TYPES = frozenset(GQL_SCALAR_TYPES_MAP)


def is_gql_scalar_type(name: str) -> bool:
    """Check if a type name is one of the built-in GraphQL scalars."""
    return name in GQL_SCALAR_TYPES


def transpile_type_name(name: str) -> str:
    """Convert a GraphQL type name to a TypeScript type name.

    Built-in scalars become their primitive; custom names are kept as is.
    """
    return GQL_SCALAR_TYPES_MAP.get(name, name)
