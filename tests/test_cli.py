"""End-to-end tests for the gql-tsgen command line."""

import pytest
from click.testing import CliRunner

from gql_tsgen.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def project(tmp_path, blog_sdl):
    (tmp_path / "schema").mkdir()
    (tmp_path / "schema" / "blog.graphql").write_text(blog_sdl)
    (tmp_path / "queries").mkdir()
    (tmp_path / "queries" / "posts.graphql").write_text(
        "query posts($input: PostsInput) { posts(input: $input) { id status } }"
    )
    return tmp_path


def invoke(runner, project, *args):
    return runner.invoke(
        main,
        ["compile", "--base-path", str(project), "-o", str(project / "generated"), *args],
    )


class TestCompileCommand:
    """Tests for `gql-tsgen compile`."""

    def test_schema_and_operations(self, runner, project):
        result = invoke(runner, project, "-s", "schema/*.graphql", "-q", "queries/*.graphql")

        assert result.exit_code == 0, result.output
        assert "Done! Generated 2 file(s)" in result.output
        schema = (project / "generated" / "schema.ts").read_text()
        operations = (project / "generated" / "operations.ts").read_text()
        assert "export type DateTime = any;" in schema
        assert operations.startswith("import { PostsInput, PostStatus } from './schema';\n")
        assert "export const postsQuery = `" in operations

    def test_schema_only(self, runner, project):
        result = invoke(runner, project, "-s", "schema/blog.graphql")

        assert result.exit_code == 0, result.output
        assert "Generated 1 file(s)" in result.output
        assert not (project / "generated" / "operations.ts").exists()

    def test_comment_only_operations(self, runner, project):
        (project / "queries" / "posts.graphql").write_text("# queries moved elsewhere\n")
        result = invoke(runner, project, "-s", "schema/*.graphql", "-q", "queries/*.graphql")

        assert result.exit_code == 0, result.output
        assert "Generated 1 file(s)" in result.output

    def test_options(self, runner, project):
        result = invoke(
            runner, project,
            "-s", "schema/*.graphql",
            "-q", "queries/*.graphql",
            "--display", "as-is",
            "--schema-file-name", "types.ts",
            "--operations-file-name", "queries.ts",
            "--header", "// generated",
            "--verbose",
        )

        assert result.exit_code == 0, result.output
        assert "Entities: 8" in result.output
        types = (project / "generated" / "types.ts").read_text()
        queries = (project / "generated" / "queries.ts").read_text()
        assert types.startswith("// generated\n\nexport type DateTime = any;")
        assert "from './types';" in queries

    def test_unknown_field(self, runner, project):
        (project / "queries" / "broken.graphql").write_text("query broken { authors { id } }")
        result = invoke(runner, project, "-s", "schema/*.graphql", "-q", "queries/*.graphql")

        assert result.exit_code == 1
        assert "Unable to find path authors" in result.output

    def test_invalid_schema(self, runner, project):
        (project / "schema" / "broken.graphql").write_text("type Broken { a: Missing }")
        result = invoke(runner, project, "-s", "schema/*.graphql")

        assert result.exit_code == 1
        assert "Invalid schema" in result.output
        assert "Missing" in result.output

    def test_internal_type_error_is_not_reported_as_usage_error(
        self, runner, project, monkeypatch
    ):
        def broken_render(self):
            raise TypeError("broken template context")

        monkeypatch.setattr("gql_tsgen.cli.CodeGenerator.render_schema", broken_render)
        result = invoke(runner, project, "-s", "schema/*.graphql")

        assert isinstance(result.exception, TypeError)
        assert "Error: broken template context" not in result.output

    def test_missing_schema_files(self, runner, project):
        result = invoke(runner, project, "-s", "missing/*.graphql")

        assert result.exit_code == 1
        assert "No files match 'missing/*.graphql'" in result.output

    def test_invalid_file_name(self, runner, project):
        result = invoke(runner, project, "-s", "schema/*.graphql", "--schema-file-name", "schema.js")

        assert result.exit_code == 1
        assert "must end with .ts" in result.output

    def test_schema_option_required(self, runner, project):
        result = invoke(runner, project)
        assert result.exit_code == 2

    def test_unknown_display(self, runner, project):
        result = invoke(runner, project, "-s", "schema/*.graphql", "--display", "sorted")
        assert result.exit_code == 2


class TestVersion:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
