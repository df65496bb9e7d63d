"""TypeScript code generator for compiled GraphQL schemas.

Renders Jinja2 templates to produce TypeScript declarations from IR.

Supports custom templates via the template_dir parameter:
    generator = CodeGenerator(compilation, output_dir, template_dir="./my_templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .imports import format_import_types
from .ir import IRCompilation, IREntity, IREnum, IRSelectionType, IRUnion
from .type_definitions import get_output_type_definition_with_wrappers

logger = logging.getLogger(__name__)


def ts_description(text: str | None, indent: int = 0) -> str:
    """Format a description as a TSDoc block followed by a newline."""
    if not text:
        return ""
    spaces = " " * indent
    lines = [f"{spaces}/**"]
    for line in text.strip().splitlines():
        # Keep the block from being closed early
        line = line.replace("*/", "*\\/")
        lines.append(f"{spaces} * {line}".rstrip())
    lines.append(f"{spaces} */")
    return "\n".join(lines) + "\n"


def ts_template_literal(text: str) -> str:
    """Escape text for use inside a TypeScript template literal."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def selection_definition(selection_type: IRSelectionType) -> str:
    """Render a selection type as an object literal wrapped like its output type."""
    members = " ".join(f"{f.name}: {f.type};" for f in selection_type.fields)
    return get_output_type_definition_with_wrappers(
        selection_type.output_type, f"{{ {members} }}"
    )


class CodeGenerator:
    """Generates TypeScript declaration files from a compilation.

    Supports custom templates via the template_dir parameter.
    Templates in template_dir take precedence over built-in templates.

    Available templates to override:
        - schema.ts.j2: Named type declarations
        - operations.ts.j2: Operation documents and result types
        - _macros.ts.j2: Per-declaration macros shared by both

    Example:
        generator = CodeGenerator(
            compilation=result,
            output_dir="./generated",
            template_dir="./my_templates"
        )
    """

    def __init__(
        self,
        compilation: IRCompilation,
        output_dir: str,
        schema_file_name: str = "schema.ts",
        operations_file_name: str = "operations.ts",
        template_dir: Optional[str] = None,
        header: Optional[str] = None,
    ):
        """Initialize the code generator.

        Args:
            compilation: The compiled schema types and operations
            output_dir: Directory where generated code will be written
            schema_file_name: File receiving the named type declarations
            operations_file_name: File receiving the operation declarations
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
            header: Optional banner put at the top of every file
        """
        self.compilation = compilation
        self.output_dir = output_dir
        self.schema_file_name = schema_file_name
        self.operations_file_name = operations_file_name
        self.header = header

        # Build template loader - custom templates take precedence
        loaders = []
        if template_dir:
            template_path = Path(template_dir)
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_tsgen", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        # Register custom filters
        self.env.filters["ts_description"] = ts_description
        self.env.filters["ts_template_literal"] = ts_template_literal
        self.env.filters["selection_definition"] = selection_definition
        self.env.tests["ts_entity"] = lambda t: isinstance(t, IREntity)
        self.env.tests["ts_enum"] = lambda t: isinstance(t, IREnum)
        self.env.tests["ts_union"] = lambda t: isinstance(t, IRUnion)

    def render_schema(self) -> str:
        """Render the declarations of all named types."""
        return self._render(
            "schema.ts.j2",
            {"types": self.compilation.types, "header": self.header},
        )

    def render_operations(self) -> str:
        """Render the declarations of all operations."""
        schema_name = Path(self.schema_file_name).stem
        return self._render(
            "operations.ts.j2",
            {
                "operations": self.compilation.operations,
                "imports": format_import_types(
                    self.compilation.operation_import_types, schema_name
                ),
                "header": self.header,
            },
        )

    def generate(self) -> list[str]:
        """Generate all code files.

        Returns:
            Paths of the written files
        """
        os.makedirs(self.output_dir, exist_ok=True)
        written = [self._generate_file(self.schema_file_name, self.render_schema())]
        if self.compilation.operations:
            written.append(
                self._generate_file(self.operations_file_name, self.render_operations())
            )
        return written

    def _render(self, template_name: str, context: Dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(context)

    def _generate_file(self, output_path: str, content: str) -> str:
        """Write rendered content to a file below the output directory."""
        full_path = os.path.join(self.output_dir, output_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w") as f:
            f.write(content)
        logger.info(f"Writing data to '{full_path}'")
        return full_path
