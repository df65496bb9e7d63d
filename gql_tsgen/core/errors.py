"""Exceptions raised while compiling a schema or its operations."""


class CompilationError(Exception):
    """Base class for errors raised by the compiler core."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PathNotFoundError(CompilationError):
    """A dotted field path does not exist at the expected nesting level."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unable to find path {path}")


class MissingRootTypeError(CompilationError):
    """The schema has no root type for the requested operation kind."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Schema does not define a root type for {operation} operations")


class UnsupportedConstructError(CompilationError):
    """A document uses a construct the compiler cannot project.

    Fragment spreads, inline fragments, fragment definitions and anonymous
    operations end up here instead of being silently dropped.
    """

    def __init__(self, kind: str, name: str | None = None):
        self.kind = kind
        self.name = name
        if name:
            message = f"Unsupported construct: {kind} '{name}'"
        else:
            message = f"Unsupported construct: {kind}"
        super().__init__(message)
