"""Markdown documentation generation for example projects.

Produces the aggregated ``EXAMPLES_DOCS.md`` report, grouped by category, and
per-example ``README.md`` files built from contract annotations.
"""

from __future__ import annotations

from pathlib import Path

from fhevm_examples.scaffolder.templates import TemplateRenderer
from fhevm_examples.utils import console, print_error, print_success, write_text

from .models import ParsedExample
from .parser import find_contracts, infer_category, parse_contract_docs


class DocsGenerator:
    """Generates example documentation from ``@title``/``@description``/``@chapter:`` tags."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def collect_examples(self, examples_dir: str | Path) -> list[ParsedExample]:
        """Parse every contract of every immediate subdirectory.

        Subdirectories and contract files are visited in sorted order;
        directories without ``contracts/`` are ignored.
        """
        root = Path(examples_dir)
        examples: list[ParsedExample] = []
        for example_dir in sorted(p for p in root.iterdir() if p.is_dir()):
            for contract in find_contracts(example_dir / "contracts"):
                docs = parse_contract_docs(contract)
                examples.append(
                    ParsedExample(
                        name=example_dir.name,
                        path=str(contract),
                        title=docs.title,
                        description=docs.description,
                        category=infer_category(example_dir.name),
                        chapter=docs.chapter,
                        functions=docs.functions,
                    )
                )
        return examples

    def generate_example_docs(
        self, examples_dir: str | Path, output_file: str | Path
    ) -> Path | None:
        """Write the aggregated documentation for all examples.

        Returns the written path, or ``None`` when *examples_dir* does not
        exist (nothing is written in that case).
        """
        console.print("Generating documentation for examples...")

        root = Path(examples_dir)
        if not root.is_dir():
            console.print(f"No examples directory found at {root}")
            return None

        examples = self.collect_examples(root)
        output = write_text(output_file, self.render_examples(examples))
        print_success(f"Documentation generated: {output}")
        return output

    def generate_example_readme(self, example_dir: str | Path) -> Path | None:
        """Write ``README.md`` for one example unless it already has one.

        The first contract (sorted by name) under ``contracts/`` supplies the
        annotations.  If there is none an error is printed and ``None`` is
        returned without writing.
        """
        root = Path(example_dir)
        readme_path = root / "README.md"
        if readme_path.exists():
            return None

        contracts_dir = root / "contracts"
        contracts = find_contracts(contracts_dir)
        if not contracts:
            print_error(f"No Solidity files found in {contracts_dir}")
            return None

        contract = contracts[0]
        docs = parse_contract_docs(contract)
        self.renderer.render_to_file(
            "docs/README.md.j2",
            readme_path,
            {"docs": docs, "contract_file": contract.name},
        )
        print_success(f"README generated: {readme_path}")
        return readme_path

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_examples(self, examples: list[ParsedExample]) -> str:
        """Render the aggregated markdown for *examples*.

        Categories appear in order of first appearance; examples keep their
        input order within a category.
        """
        sections: list[str] = []
        sections.append("# FHEVM Examples Documentation")
        sections.append("")
        sections.append("Auto-generated documentation for FHEVM example projects.")
        sections.append("")

        grouped: dict[str, list[ParsedExample]] = {}
        for example in examples:
            grouped.setdefault(example.category, []).append(example)

        for category, members in grouped.items():
            sections.append(f"## {category[:1].upper()}{category[1:]} Examples")
            sections.append("")
            for example in members:
                sections.extend(self._render_example(example))

        return "\n".join(sections) + "\n"

    def _render_example(self, example: ParsedExample) -> list[str]:
        lines = [
            f"### {example.title}",
            "",
            f"**Location**: `examples/{example.name}/`",
            "",
            f"**Description**: {example.description}",
            "",
            f"**Chapter**: {example.chapter}",
            "",
            "#### Setup",
            "",
            "```bash",
            f"cd examples/{example.name}",
            "npm install",
            "npm run test",
            "```",
            "",
            "#### Files",
            "",
            "- `contracts/` - Smart contract source code",
            "- `test/` - Test suite",
            "- `README.md` - Example-specific documentation",
            "",
        ]
        if example.functions:
            lines.append("#### Functions")
            lines.append("")
            lines.extend(f"- `{name}()`" for name in example.functions)
            lines.append("")
        return lines
