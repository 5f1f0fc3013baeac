"""Command-line entry points.

Three console scripts, each a one-shot synchronous run::

    fhevm-category                 # scaffold every category
    fhevm-category list            # list configured categories
    fhevm-category encryption      # scaffold one category

    fhevm-example my-vault advanced

    fhevm-docs examples            # regenerate EXAMPLES_DOCS.md
    fhevm-docs single basic-counter

Option defaults come from :meth:`GeneratorConfig.from_env`.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from fhevm_examples.config import DEFAULT_CATALOG, EXAMPLE_CATEGORIES, Catalog, GeneratorConfig
from fhevm_examples.docs import DocsGenerator
from fhevm_examples.errors import FHEVMExampleError
from fhevm_examples.scaffolder import CategoryScaffolder, ExampleConfig, ProjectGenerator
from fhevm_examples.utils import console, err_console, print_error


# ---------------------------------------------------------------------------
# fhevm-category
# ---------------------------------------------------------------------------


def category_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``fhevm-category``.

    Extra positional arguments after the category are ignored.
    """
    parser = argparse.ArgumentParser(
        prog="fhevm-category",
        description="Scaffold FHEVM example categories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fhevm-category\n"
            "  fhevm-category list\n"
            "  fhevm-category encryption -o ./examples\n"
        ),
    )
    parser.add_argument(
        "category",
        nargs="?",
        help="Category to scaffold, or 'list' (default: all categories)",
    )
    parser.add_argument("--output", "-o", default=None, help="Output root directory")
    parser.add_argument(
        "--catalog",
        default=None,
        help="YAML or JSON file with an alternate category table",
    )
    args, _ = parser.parse_known_args(argv)

    config = GeneratorConfig.from_env()
    output_dir = Path(args.output) if args.output else config.output_dir

    catalog = DEFAULT_CATALOG
    if args.catalog:
        try:
            catalog = Catalog.load(args.catalog)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print_error(f"Could not load catalog {args.catalog}: {exc}")
            sys.exit(1)

    scaffolder = CategoryScaffolder(catalog)

    if args.category is None:
        scaffolder.create_all_categories(output_dir)
    elif args.category == "list":
        console.print("Available categories:")
        for name, title in scaffolder.list_categories():
            console.print(f"  - {name}: {title}")
    else:
        try:
            scaffolder.create_category(args.category, output_dir)
        except FHEVMExampleError as exc:
            print_error(str(exc))
            sys.exit(1)


# ---------------------------------------------------------------------------
# fhevm-example
# ---------------------------------------------------------------------------


def example_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``fhevm-example``."""
    parser = argparse.ArgumentParser(
        prog="fhevm-example",
        description="Create a single FHEVM example project",
    )
    parser.add_argument("name", nargs="?", help="Example name")
    parser.add_argument(
        "category",
        nargs="?",
        default="basic",
        help=f"Category tag (default: basic; one of {', '.join(EXAMPLE_CATEGORIES)})",
    )
    parser.add_argument("--output", "-o", default=None, help="Output directory")
    parser.add_argument(
        "--base-template",
        default=None,
        help="Directory holding hardhat.config.ts and package.json",
    )
    parser.add_argument(
        "--strict-templates",
        action="store_true",
        help="Fail when a base-template file is missing instead of skipping it",
    )
    args = parser.parse_args(argv)

    if not args.name:
        err_console.print("Usage: fhevm-example <example-name> [category]", markup=False)
        err_console.print(f"Categories: {', '.join(EXAMPLE_CATEGORIES)}")
        sys.exit(1)

    config = GeneratorConfig.from_env()
    generator = ProjectGenerator(
        ExampleConfig.from_name(args.name, args.category or "basic"),
        base_template_dir=Path(args.base_template) if args.base_template else config.base_template_dir,
        strict=args.strict_templates or config.strict_templates,
    )
    try:
        generator.generate(Path(args.output) if args.output else config.output_dir)
    except FHEVMExampleError as exc:
        print_error(str(exc))
        sys.exit(1)


# ---------------------------------------------------------------------------
# fhevm-docs
# ---------------------------------------------------------------------------


def _print_docs_usage() -> None:
    console.print("Usage:")
    console.print("  fhevm-docs examples")
    console.print("  fhevm-docs single <example-name>")


def docs_main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``fhevm-docs``.

    Unrecognised modes print usage and exit with status 0.  Extra positional
    arguments are ignored.
    """
    parser = argparse.ArgumentParser(
        prog="fhevm-docs",
        description="Generate documentation from contract annotations",
    )
    parser.add_argument("mode", nargs="?", help="'examples' or 'single'")
    parser.add_argument("name", nargs="?", help="Example directory for 'single'")
    parser.add_argument("--examples-dir", default=None, help="Directory of example projects")
    parser.add_argument("--output-file", default=None, help="Aggregated markdown destination")
    args, _ = parser.parse_known_args(argv)

    config = GeneratorConfig.from_env()
    examples_dir = Path(args.examples_dir) if args.examples_dir else config.examples_dir
    generator = DocsGenerator()

    if args.mode == "examples":
        output_file = Path(args.output_file) if args.output_file else config.docs_file
        generator.generate_example_docs(examples_dir, output_file)
    elif args.mode == "single" and args.name:
        generator.generate_example_readme(examples_dir / args.name)
    else:
        _print_docs_usage()
