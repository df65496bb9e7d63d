#!/usr/bin/env python3
"""Demonstration of compiling a GraphQL schema and operations to TypeScript.

This script shows how to:
1. Compile an inline schema into IR
2. Project an operation onto the schema
3. Render the TypeScript declarations

Note: Nothing is written to disk - the generated code is printed.
"""

from gql_tsgen.core import CodeGenerator, Compiler, DisplayType

SCHEMA = '''
scalar DateTime

enum PostStatus {
  DRAFT
  PUBLISHED
}

type PostAuthor {
  name: String!
  bannedAt: DateTime
}

type PostedPost {
  id: ID!
  title: String!
  status: PostStatus!
  author: PostAuthor!
}

input PostsInput {
  authorName: String
}

type Query {
  posts(input: PostsInput): [PostedPost!]!
}
'''

OPERATIONS = '''
query posts($input: PostsInput) {
  posts(input: $input) {
    title
    status
    author { name bannedAt }
  }
}
'''


def main():
    print("=== GraphQL to TypeScript Demo ===\n")

    print("1. Compiling schema and operations...")
    compiler = Compiler(SCHEMA, display=DisplayType.AS_IS)
    result = compiler.compile(OPERATIONS)

    print(f"   {len(result.entities)} entities, {len(result.enums)} enums, "
          f"{len(result.scalars)} scalars")
    print(f"   {len(result.operations)} operations")

    print("\n2. Operation details")
    for operation in result.operations:
        print(f"   Operation: {operation.name} ({operation.operation_type})")
        print(f"   Namespace: {operation.namespace.name}")
        print(f"   Imports: {', '.join(operation.import_types)}")
        print("   Arguments:")
        for arg in operation.namespace.args.fields:
            print(f"     - {arg.name}: {arg.type}")

    print("\n3. Rendering TypeScript...")
    gen = CodeGenerator(result, output_dir="generated")

    print("\n   === schema.ts ===")
    print(gen.render_schema())

    print("   === operations.ts ===")
    print(gen.render_operations())

    print("=== Demo Complete ===")
    print("\nTo write the files instead, run:")
    print("""
    gql-tsgen compile --schema "schema/*.graphql" --operations "src/**/*.graphql" --output ./generated
    """)


if __name__ == "__main__":
    main()
