"""Category scaffolding: one directory of example projects per category.

Takes a ``Catalog`` and materialises, for a chosen category, a category
README plus one Hardhat project skeleton per configured example.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fhevm_examples.config import DEFAULT_CATALOG, Catalog, CategoryConfig
from fhevm_examples.errors import UnknownCategoryError
from fhevm_examples.utils import (
    console,
    ensure_dir,
    print_success,
    print_summary_table,
    write_json,
)

from .templates import TemplateRenderer

# ---------------------------------------------------------------------------
# Manifest defaults
# ---------------------------------------------------------------------------

EXAMPLE_SUBDIRS: tuple[str, ...] = ("contracts", "test", "scripts")

PACKAGE_SCRIPTS: dict[str, str] = {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "deploy": "hardhat run scripts/deploy.ts",
    "deploy:sepolia": "hardhat run scripts/deploy.ts --network sepolia",
}

PACKAGE_DEPENDENCIES: dict[str, str] = {
    "@fhevm/solidity": "^1.0.0",
    "ethers": "^6.8.0",
}

PACKAGE_DEV_DEPENDENCIES: dict[str, str] = {
    "@nomicfoundation/hardhat-toolbox": "^3.0.0",
    "hardhat": "^2.17.0",
    "typescript": "^5.2.0",
}


def package_name(example_name: str) -> str:
    """Return the npm package name for an example."""
    return f"fhevm-example-{example_name}"


def build_package_json(example_name: str, description: str) -> dict[str, Any]:
    """Build the ``package.json`` payload for one example project."""
    return {
        "name": package_name(example_name),
        "version": "1.0.0",
        "description": description,
        "scripts": dict(PACKAGE_SCRIPTS),
        "dependencies": dict(PACKAGE_DEPENDENCIES),
        "devDependencies": dict(PACKAGE_DEV_DEPENDENCIES),
    }


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class CategoryScaffolder:
    """Creates category directories populated with example projects.

    The catalog is injected so that callers (and tests) can scaffold from an
    alternate table.  Files are overwritten unconditionally on every run.
    """

    def __init__(
        self,
        catalog: Catalog = DEFAULT_CATALOG,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.catalog = catalog
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def list_categories(self) -> list[tuple[str, str]]:
        """Return ``(name, title)`` pairs in catalog order."""
        return [(c.name, c.title) for c in self.catalog.categories]

    def create_example_structure(
        self, example_dir: str | Path, name: str, description: str
    ) -> Path:
        """Create the skeleton for a single example project.

        Args:
            example_dir: Directory of the example (created if missing).
            name: Example identifier, e.g. ``"blind-auction"``.
            description: One-line description used in the manifest and README.

        Returns:
            The example directory.
        """
        root = Path(example_dir)
        for sub in EXAMPLE_SUBDIRS:
            ensure_dir(root / sub)

        context = {
            "name": name,
            "description": description,
        }

        write_json(root / "package.json", build_package_json(name, description))
        self.renderer.render_to_file("example/env.example.j2", root / ".env.example", context)
        self.renderer.render_to_file("example/README.md.j2", root / "README.md", context)
        self.renderer.render_to_file(
            "scripts/deploy.ts.j2", root / "scripts" / "deploy.ts", context
        )
        return root

    def create_category(self, category_name: str, output_dir: str | Path) -> Path:
        """Scaffold every example of *category_name* under *output_dir*.

        Raises:
            UnknownCategoryError: If the category is not in the catalog.  The
                lookup happens before anything is written.

        Returns:
            The category directory.
        """
        category = self.catalog.get(category_name)
        if category is None:
            raise UnknownCategoryError(category_name, self.catalog.names())

        console.print(f"Creating category: [bold]{category.title}[/bold]")

        category_dir = ensure_dir(Path(output_dir) / category.name)
        self.renderer.render_to_file(
            "category/README.md.j2",
            category_dir / "README.md",
            self._category_context(category),
        )

        for example in category.examples:
            self.create_example_structure(
                category_dir / example.name, example.name, example.description
            )

        print_success(f"Category created at: {category_dir}")
        print_success(f"Created {len(category.examples)} example projects")
        return category_dir

    def create_all_categories(self, output_dir: str | Path) -> list[Path]:
        """Scaffold every category in catalog order."""
        console.print("Creating all FHEVM example categories...")
        created = [
            self.create_category(name, output_dir) for name in self.catalog.names()
        ]
        console.print()
        print_summary_table(
            {c.name: f"{len(c.examples)} examples" for c in self.catalog.categories},
            title="Scaffolded categories",
        )
        print_success("All categories created successfully!")
        return created

    # -- Helpers -----------------------------------------------------------

    @staticmethod
    def _category_context(category: CategoryConfig) -> dict[str, Any]:
        return {"category": category}
