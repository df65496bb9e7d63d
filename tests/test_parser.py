"""Tests for named-type extraction and declaration ordering."""

import pytest
from graphql import build_schema

from gql_tsgen.core.ir import IREntity, IREnum, IREnumValue, IRScalar, IRUnion
from gql_tsgen.core.parser import (
    DisplayType,
    get_sort_key,
    parse_input_object_type,
    parse_named_type,
    parse_object_or_interface_type,
)


# =============================================================================
# Tests: dispatch
# =============================================================================


class TestParseNamedType:
    """Tests for parse_named_type dispatch."""

    @pytest.mark.parametrize("name", ["String", "Int", "ID", "Boolean", "__Schema", "__Type"])
    def test_skips_types_without_definition(self, blog_schema, name):
        assert parse_named_type(blog_schema.type_map[name]) is None

    def test_scalar(self, blog_schema):
        assert parse_named_type(blog_schema.get_type("DateTime")) == IRScalar(name="DateTime")

    def test_enum(self, blog_schema):
        assert isinstance(parse_named_type(blog_schema.get_type("PostStatus")), IREnum)

    def test_union(self, blog_schema):
        assert isinstance(parse_named_type(blog_schema.get_type("AnyPost")), IRUnion)

    @pytest.mark.parametrize("name", ["PostAuthor", "Node", "PostsInput", "Query"])
    def test_entities(self, blog_schema, name):
        assert isinstance(parse_named_type(blog_schema.get_type(name)), IREntity)


# =============================================================================
# Tests: per category
# =============================================================================


class TestParseEnumType:
    """Tests for enum extraction."""

    def test_values_in_declared_order(self, blog_schema):
        result = parse_named_type(blog_schema.get_type("PostStatus"))
        assert result.name == "PostStatus"
        assert result.description == "Publication state of a post"
        assert result.values == (
            IREnumValue(name="DRAFT"),
            IREnumValue(name="PUBLISHED", description="Visible to everyone"),
        )


class TestParseUnionType:
    """Tests for union extraction."""

    def test_members_unchanged(self, blog_schema):
        result = parse_named_type(blog_schema.get_type("AnyPost"))
        assert result == IRUnion(name="AnyPost", types=("ModeratedPost", "PostedPost"))


class TestParseObjectType:
    """Tests for object and interface extraction."""

    def test_post_author(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("PostAuthor"))

        assert [f.name for f in result.fields.fields] == ["name", "registeredAt", "bannedAt"]
        assert [f.type for f in result.fields.fields] == [
            "PostAuthor.name",
            "PostAuthor.registeredAt",
            "PostAuthor.bannedAt",
        ]

        types = {f.name: f.type for f in result.namespace.fields}
        assert types == {
            "name": "string",
            "registeredAt": "DateTime",
            "bannedAt": "DateTime | null",
        }
        assert result.import_types == ("DateTime",)

    def test_description(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("PostedPost"))
        assert result.description == "A post visible on the site"
        assert result.name == "PostedPost"

    def test_field_arguments(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("PostedPost"))
        comments = next(f for f in result.namespace.fields if f.name == "comments")

        assert comments.type == "Comment[]"
        assert comments.args.name == "Arguments"
        assert [(f.name, f.type) for f in comments.args.fields] == [
            ("first", "number | null"),
            ("after", "string | null"),
        ]

    def test_fields_without_arguments_get_empty_record(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("PostAuthor"))
        assert all(f.args is not None and f.args.fields == () for f in result.namespace.fields)

    def test_imports_in_first_seen_order(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("PostedPost"))
        assert result.import_types == ("PostAuthor", "PostStatus", "Comment")

    def test_argument_imports_are_collected(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.query_type)
        assert result.import_types == ("PostedPost", "PostsInput", "AnyPost", "Node")

    def test_interface(self, blog_schema):
        result = parse_object_or_interface_type(blog_schema.get_type("Node"))
        assert [(f.name, f.type) for f in result.namespace.fields] == [("id", "any")]
        assert result.import_types == ()

    def test_formatted_name(self):
        schema = build_schema("type post_author { name: String } type Query { a: post_author }")
        result = parse_named_type(schema.get_type("post_author"))
        assert result.name == "PostAuthor"
        assert result.fields.fields[0].type == "PostAuthor.name"


class TestParseInputObjectType:
    """Tests for input object extraction."""

    def test_fields_have_no_arguments(self, blog_schema):
        result = parse_input_object_type(blog_schema.get_type("PostsInput"))
        assert all(f.args is None for f in result.namespace.fields)

    def test_types_and_imports(self, blog_schema):
        result = parse_input_object_type(blog_schema.get_type("PostsInput"))
        assert [(f.name, f.type) for f in result.namespace.fields] == [
            ("authorName", "string | null"),
            ("statuses", "PostStatus[] | null"),
            ("since", "DateTime | null"),
        ]
        assert result.import_types == ("PostStatus", "DateTime")


class TestFlatAndNamespaceConsistency:
    """Flat fields and namespace fields always list the same names in order."""

    def test_all_entities(self, blog_schema):
        for named_type in blog_schema.type_map.values():
            result = parse_named_type(named_type)
            if isinstance(result, IREntity):
                flat = [f.name for f in result.fields.fields]
                nested = [f.name for f in result.namespace.fields]
                assert flat == nested, named_type.name


# =============================================================================
# Tests: ordering
# =============================================================================


class TestSortKey:
    """Tests for declaration ordering."""

    SOURCE_ORDER = [
        "DateTime", "PostStatus", "Node", "PostAuthor", "Comment", "PostedPost",
        "ModeratedPost", "AnyPost", "PostsInput", "Query", "Mutation",
    ]

    def _sorted_names(self, schema, display):
        ordered = sorted(schema.type_map.values(), key=get_sort_key(display))
        return [t.name for t in ordered if t.ast_node is not None]

    def test_as_is_follows_source(self, blog_schema):
        assert self._sorted_names(blog_schema, DisplayType.AS_IS) == self.SOURCE_ORDER

    def test_default_groups_by_kind(self, blog_schema):
        names = self._sorted_names(blog_schema, DisplayType.DEFAULT)
        assert names[:5] == ["DateTime", "PostStatus", "Node", "PostsInput", "AnyPost"]
        assert set(names[5:]) == {
            "PostAuthor", "Comment", "PostedPost", "ModeratedPost", "Query", "Mutation",
        }

    def test_types_without_definition_go_first(self, blog_schema):
        ordered = sorted(blog_schema.type_map.values(), key=get_sort_key(DisplayType.AS_IS))
        first_defined = next(i for i, t in enumerate(ordered) if t.ast_node is not None)
        assert all(t.ast_node is not None for t in ordered[first_defined:])
