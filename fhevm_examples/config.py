"""FHEVM example toolkit configuration.

Typed configuration for the generators. The category table is an immutable
``Catalog`` that is handed to the scaffolders explicitly, so alternate tables
can be loaded from YAML/JSON or built inline in tests. Runtime paths live in
``GeneratorConfig``, which can be overridden from environment variables.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

_PACKAGE_DIR = Path(__file__).parent

DEFAULT_BASE_TEMPLATE_DIR = _PACKAGE_DIR / "scaffolder" / "base_template"


# ---------------------------------------------------------------------------
# Category catalog
# ---------------------------------------------------------------------------


class ExampleSpec(BaseModel):
    """One example project inside a category."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Directory/package identifier")
    description: str = Field(default="", description="One-line summary")


class CategoryConfig(BaseModel):
    """A named group of examples scaffolded together."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Category identifier, e.g. 'access-control'")
    title: str = Field(..., description="Human-readable title")
    description: str = Field(default="")
    examples: tuple[ExampleSpec, ...] = Field(default=())

    @model_validator(mode="after")
    def _unique_example_names(self) -> "CategoryConfig":
        seen: set[str] = set()
        for example in self.examples:
            if example.name in seen:
                raise ValueError(
                    f"Duplicate example '{example.name}' in category '{self.name}'"
                )
            seen.add(example.name)
        return self


class Catalog(BaseModel):
    """Ordered, immutable table of categories.

    :meth:`names` and ``categories`` follow definition order, which is also the
    order in which ``create_all_categories`` scaffolds them.
    """

    model_config = ConfigDict(frozen=True)

    categories: tuple[CategoryConfig, ...] = Field(default=())

    @model_validator(mode="after")
    def _unique_category_names(self) -> "Catalog":
        names = [c.name for c in self.categories]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate categories: {', '.join(duplicates)}")
        return self

    def names(self) -> list[str]:
        """Return category identifiers in definition order."""
        return [c.name for c in self.categories]

    def get(self, name: str) -> CategoryConfig | None:
        """Look up a category by identifier, or ``None`` if absent."""
        for category in self.categories:
            if category.name == name:
                return category
        return None

    @classmethod
    def load(cls, path: str | Path) -> "Catalog":
        """Load a catalog from a YAML (``.yaml``/``.yml``) or JSON file.

        The file holds either ``{"categories": [...]}`` or the bare list.
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        if file_path.suffix.lower() in (".yaml", ".yml"):
            data: Any = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
        if isinstance(data, list):
            data = {"categories": data}
        return cls.model_validate(data or {})


def _category(name: str, title: str, description: str, *examples: tuple[str, str]) -> CategoryConfig:
    return CategoryConfig(
        name=name,
        title=title,
        description=description,
        examples=tuple(ExampleSpec(name=n, description=d) for n, d in examples),
    )


DEFAULT_CATALOG = Catalog(
    categories=(
        _category(
            "basic",
            "Basic Examples",
            "Foundational FHEVM concepts and operations",
            ("counter", "Simple FHE counter contract"),
            ("arithmetic", "Arithmetic operations on encrypted values"),
            ("comparison", "Comparison operations on encrypted data"),
        ),
        _category(
            "encryption",
            "Encryption Examples",
            "Data encryption and decryption patterns",
            ("single-encrypt", "Encrypt single values"),
            ("multi-encrypt", "Encrypt multiple values"),
            ("user-decrypt", "User-initiated decryption"),
            ("public-decrypt", "Public decryption with verification"),
        ),
        _category(
            "access-control",
            "Access Control Examples",
            "Permission management and authorization patterns",
            ("role-based", "Role-based access control"),
            ("allow-transient", "Transient permission model"),
            ("input-proof", "Input proof verification"),
        ),
        _category(
            "advanced",
            "Advanced Examples",
            "Complex patterns and real-world applications",
            ("blind-auction", "Privacy-preserving auction system"),
            ("confidential-voting", "Secure voting mechanism"),
            ("privacy-pool", "Confidential fund pooling"),
        ),
    )
)

# Documented values for the single-example generator; not enforced.
EXAMPLE_CATEGORIES: tuple[str, ...] = ("basic", "encryption", "access-control", "advanced")


# ---------------------------------------------------------------------------
# Runtime paths
# ---------------------------------------------------------------------------


_TRUTHY = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Paths and switches shared by the command-line entry points."""

    output_dir: Path = Field(default=Path("./examples"))
    examples_dir: Path = Field(default=Path("./examples"))
    docs_file: Path = Field(default=Path("./EXAMPLES_DOCS.md"))
    base_template_dir: Path = Field(default=DEFAULT_BASE_TEMPLATE_DIR)
    strict_templates: bool = Field(
        default=False,
        description="Fail instead of warning when a base-template file is missing",
    )

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            FHEVM_OUTPUT_DIR, FHEVM_EXAMPLES_DIR, FHEVM_DOCS_FILE,
            FHEVM_BASE_TEMPLATE_DIR, FHEVM_STRICT_TEMPLATES.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FHEVM_OUTPUT_DIR"])
        if os.environ.get("FHEVM_EXAMPLES_DIR"):
            kwargs["examples_dir"] = Path(os.environ["FHEVM_EXAMPLES_DIR"])
        if os.environ.get("FHEVM_DOCS_FILE"):
            kwargs["docs_file"] = Path(os.environ["FHEVM_DOCS_FILE"])
        if os.environ.get("FHEVM_BASE_TEMPLATE_DIR"):
            kwargs["base_template_dir"] = Path(os.environ["FHEVM_BASE_TEMPLATE_DIR"])
        if os.environ.get("FHEVM_STRICT_TEMPLATES"):
            kwargs["strict_templates"] = (
                os.environ["FHEVM_STRICT_TEMPLATES"].strip().lower() in _TRUTHY
            )
        return cls(**kwargs)
