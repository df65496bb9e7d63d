"""Compile options shared by the CLI and programmatic callers."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .core.parser import DisplayType


class CompileOptions(BaseModel):
    """Options for one compilation run.

    Example:
        options = CompileOptions(
            schema=["schema/*.graphql"],
            operations=["src/**/*.graphql"],
            output_path=Path("generated"),
            base_path=Path("/work/app"),
        )
    """

    schema_sources: list[str] = Field(alias="schema")
    operations: list[str] = Field(default_factory=list)
    output_path: Path
    base_path: Path
    display: DisplayType = DisplayType.DEFAULT
    schema_file_name: str = "schema.ts"
    operations_file_name: str = "operations.ts"
    template_dir: Path | None = None
    header: str | None = None

    model_config = {"populate_by_name": True}

    @field_validator("schema_sources")
    @classmethod
    def validate_schema_sources(cls, sources: list[str]) -> list[str]:
        sources = [s for s in sources if s.strip()]
        if not sources:
            raise ValueError("At least one schema source is required")
        return sources

    @field_validator("schema_file_name", "operations_file_name")
    @classmethod
    def validate_file_name(cls, name: str) -> str:
        if not name.endswith(".ts") or name == ".ts":
            raise ValueError(f"Output file name must end with .ts: {name}")
        if Path(name).name != name:
            raise ValueError(f"Output file name must not contain directories: {name}")
        return name
