"""Aggregation of the custom types a declaration has to import.

Every resolver returns its own import list; callers merge child lists into
theirs with ``merge_import_types`` instead of sharing a mutable collection.
"""

from typing import Iterable

from .scalars import is_gql_scalar_type


def merge_import_types(*groups: Iterable[str]) -> tuple[str, ...]:
    """Merge import lists, keeping first-seen order.

    Duplicates and built-in scalar names are dropped.
    """
    merged: list[str] = []
    seen: set[str] = set()
    for group in groups:
        for name in group:
            if name in seen or is_gql_scalar_type(name):
                continue
            seen.add(name)
            merged.append(name)
    return tuple(merged)


def format_import_types(types: Iterable[str], schema_name: str) -> str:
    """Format one import statement for the given custom types.

    Args:
        types: Ordered custom type names
        schema_name: File name (without extension) the types live in

    Returns:
        The import statement followed by a blank line, or an empty string
        when nothing has to be imported
    """
    names = list(types)
    if not names:
        return ""
    return f"import {{ {', '.join(names)} }} from './{schema_name}';\n\n"
