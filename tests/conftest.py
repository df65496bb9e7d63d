"""Shared fixtures: a small blog schema built from SDL."""

import pytest
from graphql import build_schema, parse

BLOG_SDL = '''
scalar DateTime

"""Publication state of a post"""
enum PostStatus {
  DRAFT
  """Visible to everyone"""
  PUBLISHED
}

interface Node {
  id: ID!
}

type PostAuthor {
  name: String!
  registeredAt: DateTime!
  bannedAt: DateTime
}

type Comment implements Node {
  id: ID!
  text: String!
  author: PostAuthor
}

"""A post visible on the site"""
type PostedPost implements Node {
  id: ID!
  title: String!
  author: PostAuthor!
  tags: [String]
  status: PostStatus!
  comments(first: Int, after: String): [Comment!]!
}

type ModeratedPost implements Node {
  id: ID!
  reason: String
}

union AnyPost = ModeratedPost | PostedPost

input PostsInput {
  authorName: String
  statuses: [PostStatus!]
  since: DateTime
}

type Query {
  posts(input: PostsInput): [PostedPost!]!
  post(id: ID!): AnyPost
  node(id: ID!): Node
}

type Mutation {
  publish(id: ID!, at: DateTime): PostedPost
}
'''


@pytest.fixture
def blog_sdl():
    return BLOG_SDL


@pytest.fixture
def blog_schema():
    return build_schema(BLOG_SDL)


@pytest.fixture
def selection_of():
    """Return the top-level selection set of a single-operation document."""
    def _selection_of(document: str):
        return parse(document).definitions[0].selection_set
    return _selection_of
