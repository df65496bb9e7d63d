"""Field-path navigation over the schema's field graph."""

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLOutputType,
    is_interface_type,
    is_object_type,
    is_wrapping_type,
)

from .errors import PathNotFoundError


def get_first_non_wrapping_type(type_: GraphQLOutputType) -> GraphQLNamedType:
    """Strip List/NonNull layers down to the named type."""
    while is_wrapping_type(type_):
        type_ = type_.of_type
    return type_


def get_in(
    root_type: GraphQLObjectType | GraphQLInterfaceType,
    path: str,
) -> GraphQLField:
    """Get the field a dotted path points at, starting from ``root_type``.

    Wrapper layers are stripped before descending into a field's type,
    but the returned field keeps its declared, still wrapped type.

    Raises:
        PathNotFoundError: if any segment cannot be found by literal descent
    """
    first, *rest = path.split(".")
    field = root_type.fields.get(first)
    if field is None:
        raise PathNotFoundError(path)

    for partial in rest:
        # Lists and non-nulls do not matter while descending
        type_ = get_first_non_wrapping_type(field.type)
        if not is_object_type(type_) and not is_interface_type(type_):
            raise PathNotFoundError(path)

        field = type_.fields.get(partial)
        if field is None:
            raise PathNotFoundError(path)

    return field
