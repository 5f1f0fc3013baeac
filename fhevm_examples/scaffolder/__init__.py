"""FHEVM example scaffolder -- generates example project trees.

Two generators share one Jinja2 renderer:

* ``CategoryScaffolder`` expands a category from the catalog into a category
  README plus one Hardhat skeleton per example.
* ``ProjectGenerator`` builds a single, fuller example project.

Quick usage::

    from fhevm_examples.scaffolder import CategoryScaffolder, ExampleConfig, ProjectGenerator

    CategoryScaffolder().create_category("encryption", "./examples")
    ProjectGenerator(ExampleConfig.from_name("my-vault", "advanced")).generate("./examples")
"""

from fhevm_examples.scaffolder.category import CategoryScaffolder
from fhevm_examples.scaffolder.project import ExampleConfig, ProjectGenerator
from fhevm_examples.scaffolder.templates import TemplateRenderer

__all__ = [
    "CategoryScaffolder",
    "ExampleConfig",
    "ProjectGenerator",
    "TemplateRenderer",
]
