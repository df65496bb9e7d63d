"""Intermediate Representation (IR) for compiled GraphQL schemas and operations.

This module defines dataclasses describing what the TypeScript emitter
renders: named schema types split into a flat field list and a field
namespace, and operations projected onto exactly the fields they select.
Records are built once per compilation and never modified afterwards.
"""

from dataclasses import dataclass
from typing import Union

from graphql import GraphQLOutputType


@dataclass(frozen=True)
class IRTypeDefinition:
    """A rendered TypeScript type expression plus the custom types it references."""
    definition: str
    import_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class IRPreparedField:
    """A field of a flat declaration.

    ``type`` is either a dotted path into a namespace (``PostAuthor.name``)
    or an already rendered type expression (operation arguments).
    """
    name: str
    type: str
    description: str | None = None


@dataclass(frozen=True)
class IRPreparedObject:
    """A flat object declaration, e.g. an entity or an ``Arguments`` record."""
    name: str
    fields: tuple[IRPreparedField, ...] = ()
    import_types: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IRNamespaceField:
    """A field inside an entity namespace carrying its real type."""
    name: str
    type: str
    description: str | None = None
    # None for input object fields, which take no arguments
    args: IRPreparedObject | None = None


@dataclass(frozen=True)
class IRNamespace:
    """Namespace holding the real types of an entity's fields."""
    name: str
    fields: tuple[IRNamespaceField, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IREntity:
    """Represents a GraphQL object, interface or input object type."""
    fields: IRPreparedObject
    namespace: IRNamespace
    import_types: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.namespace.name

    @property
    def description(self) -> str | None:
        return self.namespace.description


@dataclass(frozen=True)
class IREnumValue:
    """Represents a single value in a GraphQL enum."""
    name: str
    description: str | None = None


@dataclass(frozen=True)
class IREnum:
    """Represents a GraphQL enum type."""
    name: str
    values: tuple[IREnumValue, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IRUnion:
    """Represents a GraphQL union type."""
    name: str
    types: tuple[str, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IRScalar:
    """Represents a custom GraphQL scalar type."""
    name: str
    description: str | None = None


IRNamedType = Union[IREntity, IREnum, IRUnion, IRScalar]


@dataclass(frozen=True)
class IRSelectionType:
    """Synthetic type of a selected field that has its own selection set."""
    name: str
    fields: tuple[IRPreparedField, ...]
    # Still wrapped in List/NonNull layers, so the emitter can apply them
    output_type: GraphQLOutputType


@dataclass(frozen=True)
class IROperationField:
    """A field of an operation namespace.

    Leaf fields hold an ``IRTypeDefinition`` and no children. Composite
    fields hold an ``IRSelectionType`` and the projected children.
    """
    name: str
    type: IRTypeDefinition | IRSelectionType
    fields: tuple["IROperationField", ...] = ()
    # Transitive imports of this field and all of its children
    import_types: tuple[str, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.type, IRTypeDefinition)


@dataclass(frozen=True)
class IROperationNamespace:
    """Nested result namespace of an operation."""
    name: str
    fields: tuple[IROperationField, ...]
    args: IRPreparedObject
    import_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class IROperation:
    """Represents a compiled GraphQL query, mutation or subscription."""
    name: str
    operation_type: str  # 'query', 'mutation' or 'subscription'
    signature: str  # Verbatim operation source text
    selection: IRPreparedObject
    namespace: IROperationNamespace
    import_types: tuple[str, ...] = ()


@dataclass(frozen=True)
class IRCompilation:
    """Complete result of compiling one schema and its operation documents."""
    types: tuple[IRNamedType, ...] = ()
    operations: tuple[IROperation, ...] = ()
    # Custom types referenced by all operations together
    operation_import_types: tuple[str, ...] = ()

    @property
    def entities(self) -> list[IREntity]:
        return [t for t in self.types if isinstance(t, IREntity)]

    @property
    def enums(self) -> list[IREnum]:
        return [t for t in self.types if isinstance(t, IREnum)]

    @property
    def unions(self) -> list[IRUnion]:
        return [t for t in self.types if isinstance(t, IRUnion)]

    @property
    def scalars(self) -> list[IRScalar]:
        return [t for t in self.types if isinstance(t, IRScalar)]
