"""GraphQL to TypeScript compiler."""

__version__ = "0.1.0"
