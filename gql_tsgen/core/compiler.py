"""Compiler facade tying schema extraction and operation assembly together."""

import logging

from graphql import (
    FragmentDefinitionNode,
    GraphQLSchema,
    Lexer,
    OperationDefinitionNode,
    Source,
    TokenKind,
    build_schema,
    parse,
)

from .errors import UnsupportedConstructError
from .imports import merge_import_types
from .ir import IRCompilation, IRNamedType, IROperation
from .operations import parse_operation_definition_node
from .parser import DisplayType, get_sort_key, parse_named_type

logger = logging.getLogger(__name__)


def is_blank_document(document: str | None) -> bool:
    """Check if a document holds nothing but whitespace and comments."""
    if not document:
        return True
    # The lexer skips comments and insignificant whitespace
    return Lexer(Source(document)).advance().kind == TokenKind.EOF


class Compiler:
    """Compiles a GraphQL schema and operation documents into IR.

    Example:
        compiler = Compiler(sdl, display=DisplayType.AS_IS)
        result = compiler.compile(operations_text)
        for operation in result.operations:
            print(operation.name, operation.import_types)
    """

    def __init__(
        self,
        schema: str | GraphQLSchema,
        display: DisplayType = DisplayType.DEFAULT,
    ):
        """Initialize the compiler.

        Args:
            schema: Schema SDL text or an already built schema
            display: Order in which type declarations are emitted
        """
        if isinstance(schema, GraphQLSchema):
            self.schema = schema
        else:
            self.schema = build_schema(schema)
        self.display = DisplayType(display)

    def compile_types(self) -> tuple[IRNamedType, ...]:
        """Extract every user-defined named type in emission order."""
        named_types = sorted(
            self.schema.type_map.values(), key=get_sort_key(self.display)
        )
        records = []
        for named_type in named_types:
            record = parse_named_type(named_type)
            if record is not None:
                records.append(record)
        logger.debug(f"Extracted {len(records)} named types")
        return tuple(records)

    def compile_operations(self, document: str) -> tuple[IROperation, ...]:
        """Compile every operation of a document.

        Raises:
            UnsupportedConstructError: on fragment or type system definitions
        """
        ast = parse(document)
        operations = []
        for definition in ast.definitions:
            if isinstance(definition, OperationDefinitionNode):
                operations.append(
                    parse_operation_definition_node(definition, self.schema, document)
                )
            elif isinstance(definition, FragmentDefinitionNode):
                raise UnsupportedConstructError(
                    "fragment definition", definition.name.value
                )
            else:
                raise UnsupportedConstructError(type(definition).__name__)
        logger.debug(f"Compiled {len(operations)} operations")
        return tuple(operations)

    def compile(self, document: str | None = None) -> IRCompilation:
        """Compile the schema types and, if given, the operations document."""
        types = self.compile_types()
        operations = ()
        if not is_blank_document(document):
            operations = self.compile_operations(document)
        return IRCompilation(
            types=types,
            operations=operations,
            operation_import_types=merge_import_types(
                *(op.import_types for op in operations)
            ),
        )
