"""Core modules for GraphQL to TypeScript compilation."""

from .compiler import Compiler
from .errors import (
    CompilationError,
    MissingRootTypeError,
    PathNotFoundError,
    UnsupportedConstructError,
)
from .generator import CodeGenerator
from .imports import format_import_types, merge_import_types
from .ir import (
    IRCompilation,
    IREntity,
    IREnum,
    IREnumValue,
    IRNamespace,
    IRNamespaceField,
    IROperation,
    IROperationField,
    IROperationNamespace,
    IRPreparedField,
    IRPreparedObject,
    IRScalar,
    IRSelectionType,
    IRTypeDefinition,
    IRUnion,
)
from .navigator import get_first_non_wrapping_type, get_in
from .operations import parse_operation_definition_node
from .parser import DisplayType, get_sort_key, parse_named_type
from .scalars import is_gql_scalar_type, transpile_type_name
from .selection import selection_set_to_namespace_fields
from .type_definitions import get_io_type_definition, get_type_node_definition

__all__ = [
    # Compiler
    "Compiler",
    "DisplayType",
    # Errors
    "CompilationError",
    "MissingRootTypeError",
    "PathNotFoundError",
    "UnsupportedConstructError",
    # Generator
    "CodeGenerator",
    # Imports
    "format_import_types",
    "merge_import_types",
    # IR types
    "IRCompilation",
    "IREntity",
    "IREnum",
    "IREnumValue",
    "IRNamespace",
    "IRNamespaceField",
    "IROperation",
    "IROperationField",
    "IROperationNamespace",
    "IRPreparedField",
    "IRPreparedObject",
    "IRScalar",
    "IRSelectionType",
    "IRTypeDefinition",
    "IRUnion",
    # Scalars
    "is_gql_scalar_type",
    "transpile_type_name",
    # Type resolution
    "get_io_type_definition",
    "get_type_node_definition",
    # Extraction
    "get_sort_key",
    "parse_named_type",
    # Navigation and projection
    "get_first_non_wrapping_type",
    "get_in",
    "selection_set_to_namespace_fields",
    "parse_operation_definition_node",
]
