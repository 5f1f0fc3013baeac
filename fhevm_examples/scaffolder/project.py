"""Single-example project generation.

Builds a fuller Hardhat project skeleton for one arbitrarily named example:
standard directories, base configuration copied from a template directory,
environment/ignore files, a README with next steps, and ``tsconfig.json``.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from fhevm_examples.config import DEFAULT_BASE_TEMPLATE_DIR
from fhevm_examples.errors import MissingTemplateError
from fhevm_examples.utils import (
    console,
    ensure_dir,
    print_step,
    print_success,
    print_warning,
    to_pascal,
    write_json,
)

from .templates import TemplateRenderer

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PROJECT_SUBDIRS: tuple[str, ...] = ("contracts", "test", "scripts", "artifacts")

# Files copied verbatim from the base-template directory, when present.
BASE_TEMPLATE_FILES: tuple[str, ...] = ("hardhat.config.ts", "package.json")

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "commonjs",
        "lib": ["ES2020"],
        "outDir": "./dist",
        "rootDir": "./",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
    },
    "include": ["scripts/**/*.ts", "test/**/*.ts"],
    "exclude": ["node_modules"],
}


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ExampleConfig(BaseModel):
    """Pydantic model describing the example project to generate.

    ``category`` is echoed into the README and is deliberately not checked
    against :data:`fhevm_examples.config.EXAMPLE_CATEGORIES`.
    """

    name: str = Field(..., min_length=1, description="Project directory name")
    category: str = Field(default="basic")
    description: str = Field(default="")
    contract_name: str = Field(default="", description="Main contract name (PascalCase)")
    test_file: str = Field(default="", description="Test file name under test/")

    @model_validator(mode="after")
    def _derive_defaults(self) -> "ExampleConfig":
        if not self.description:
            self.description = f"FHEVM example demonstrating {self.category} concepts"
        if not self.contract_name:
            self.contract_name = to_pascal(self.name)
        if not self.test_file:
            self.test_file = f"{self.contract_name}.test.ts"
        return self

    @classmethod
    def from_name(cls, name: str, category: str = "basic") -> "ExampleConfig":
        """Build the default configuration for *name* in *category*."""
        return cls(name=name, category=category)


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates a single FHEVM example project.

    Args:
        config: The example to generate.
        base_template_dir: Directory holding ``hardhat.config.ts`` and
            ``package.json``.  Defaults to the packaged base template.
        strict: When ``True`` a missing base-template file raises
            :class:`MissingTemplateError`; otherwise it is skipped with a
            warning.
        renderer: Optional renderer override.
    """

    def __init__(
        self,
        config: ExampleConfig,
        base_template_dir: str | Path | None = None,
        strict: bool = False,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.base_template_dir = Path(base_template_dir or DEFAULT_BASE_TEMPLATE_DIR)
        self.strict = strict
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, output_dir: str | Path) -> Path:
        """Generate the project under ``<output_dir>/<name>``.

        Returns:
            Path to the generated project root.

        Raises:
            MissingTemplateError: In strict mode, if a base-template file is
                missing.  Directories exist at that point; no files do.
        """
        console.print(f"Creating FHEVM example: [bold]{self.config.name}[/bold]")

        ensure_dir(output_dir)
        project_root = ensure_dir(Path(output_dir) / self.config.name)
        for sub in PROJECT_SUBDIRS:
            ensure_dir(project_root / sub)
        print_step(f"Created directories: {', '.join(PROJECT_SUBDIRS)}")

        self._copy_base_templates(project_root)

        context = {"config": self.config}
        self.renderer.render_to_file(
            "project/env.example.j2", project_root / ".env.example", context
        )
        self.renderer.render_to_file(
            "project/gitignore.j2", project_root / ".gitignore", context
        )
        self.renderer.render_to_file(
            "project/README.md.j2", project_root / "README.md", context
        )
        write_json(project_root / "tsconfig.json", TSCONFIG)
        print_step("Wrote .env.example, .gitignore, README.md, tsconfig.json")

        print_success(f"Project created at: {project_root}")
        console.print("\nNext steps:")
        console.print(f"1. cd {self.config.name}")
        console.print("2. npm install")
        console.print("3. npm run test")
        return project_root

    # -- Helpers -----------------------------------------------------------

    def _copy_base_templates(self, project_root: Path) -> list[Path]:
        """Copy the base configuration files that exist; report the rest."""
        present = [
            self.base_template_dir / name
            for name in BASE_TEMPLATE_FILES
            if (self.base_template_dir / name).is_file()
        ]
        missing = [
            self.base_template_dir / name
            for name in BASE_TEMPLATE_FILES
            if not (self.base_template_dir / name).is_file()
        ]
        if missing and self.strict:
            raise MissingTemplateError(missing)
        for path in missing:
            print_warning(f"Base template not found, skipping: {path}")

        copied: list[Path] = []
        for source in present:
            target = project_root / source.name
            shutil.copyfile(source, target)
            copied.append(target)
        if copied:
            print_step(f"Copied base template files: {', '.join(p.name for p in copied)}")
        return copied
