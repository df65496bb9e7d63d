"""Naming helpers for compiled declarations."""

import re

_SEPARATOR_RE = re.compile(r"[^\da-z].?", re.IGNORECASE)


def to_camel_case(text: str) -> str:
    """Convert text to upper camel case.

    Any non-alphanumeric character is dropped and the character after it
    is upper-cased: ``post_author`` -> ``PostAuthor``, ``query`` -> ``Query``.
    """
    cleared = _SEPARATOR_RE.sub(lambda m: m.group(0)[1:].upper(), text)
    return cleared[:1].upper() + cleared[1:]


def get_compiled_operation_name(name: str, operation: str) -> str:
    """Name of the flat exported operation type, e.g. ``postsQuery``."""
    return name + to_camel_case(operation)


def get_compiled_operation_namespace_name(name: str, operation: str) -> str:
    """Name of the nested operation namespace, e.g. ``PostsQuery``."""
    return to_camel_case(name) + to_camel_case(operation)
