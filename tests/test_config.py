"""Unit tests for the catalog and generator configuration (fhevm_examples.config).

Tests cover:
- Built-in catalog contents and ordering
- Catalog / CategoryConfig invariants (unique names, immutability)
- Catalog.load from YAML and JSON
- GeneratorConfig defaults, from_env, save/load
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from fhevm_examples.config import (
    DEFAULT_BASE_TEMPLATE_DIR,
    DEFAULT_CATALOG,
    Catalog,
    CategoryConfig,
    ExampleSpec,
    GeneratorConfig,
)


# ---------------------------------------------------------------------------
# Built-in catalog
# ---------------------------------------------------------------------------


class TestDefaultCatalog:
    @pytest.mark.unit
    def test_category_order(self):
        assert DEFAULT_CATALOG.names() == ["basic", "encryption", "access-control", "advanced"]

    @pytest.mark.unit
    def test_example_counts(self):
        counts = {c.name: len(c.examples) for c in DEFAULT_CATALOG.categories}
        assert counts == {"basic": 3, "encryption": 4, "access-control": 3, "advanced": 3}

    @pytest.mark.unit
    def test_titles(self):
        assert DEFAULT_CATALOG.get("access-control").title == "Access Control Examples"
        assert DEFAULT_CATALOG.get("advanced").examples[0].name == "blind-auction"

    @pytest.mark.unit
    def test_get_unknown_returns_none(self):
        assert DEFAULT_CATALOG.get("nope") is None


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class TestCatalogInvariants:
    @pytest.mark.unit
    def test_duplicate_example_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate example"):
            CategoryConfig(
                name="dup",
                title="Dup",
                examples=(ExampleSpec(name="a"), ExampleSpec(name="a")),
            )

    @pytest.mark.unit
    def test_same_example_name_in_different_categories_allowed(self):
        catalog = Catalog(
            categories=(
                CategoryConfig(name="one", title="One", examples=(ExampleSpec(name="x"),)),
                CategoryConfig(name="two", title="Two", examples=(ExampleSpec(name="x"),)),
            )
        )
        assert catalog.names() == ["one", "two"]

    @pytest.mark.unit
    def test_duplicate_category_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate categories"):
            Catalog(
                categories=(
                    CategoryConfig(name="one", title="One"),
                    CategoryConfig(name="one", title="Again"),
                )
            )

    @pytest.mark.unit
    def test_empty_example_name_rejected(self):
        with pytest.raises(ValidationError):
            ExampleSpec(name="")

    @pytest.mark.unit
    def test_frozen(self, small_catalog):
        with pytest.raises(ValidationError):
            small_catalog.categories[0].title = "Changed"


# ---------------------------------------------------------------------------
# Catalog.load
# ---------------------------------------------------------------------------


class TestCatalogLoad:
    @pytest.mark.unit
    def test_load_yaml(self, tmp_path: Path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "categories:\n"
            "  - name: tokens\n"
            "    title: Token Examples\n"
            "    description: Confidential tokens\n"
            "    examples:\n"
            "      - name: erc7984\n"
            "        description: Confidential fungible token\n",
            encoding="utf-8",
        )
        catalog = Catalog.load(path)
        assert catalog.names() == ["tokens"]
        assert catalog.get("tokens").examples[0].name == "erc7984"

    @pytest.mark.unit
    def test_load_json_bare_list(self, tmp_path: Path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps([{"name": "a", "title": "A", "examples": [{"name": "one"}]}]),
            encoding="utf-8",
        )
        catalog = Catalog.load(path)
        assert catalog.get("a").examples[0].description == ""

    @pytest.mark.unit
    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / "catalog.yml"
        path.write_text("categories:\n  - title: Missing name\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            Catalog.load(path)


# ---------------------------------------------------------------------------
# GeneratorConfig
# ---------------------------------------------------------------------------


class TestGeneratorConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.output_dir == Path("./examples")
        assert config.examples_dir == Path("./examples")
        assert config.docs_file == Path("./EXAMPLES_DOCS.md")
        assert config.base_template_dir == DEFAULT_BASE_TEMPLATE_DIR
        assert config.strict_templates is False

    @pytest.mark.unit
    def test_packaged_base_template_exists(self):
        assert (DEFAULT_BASE_TEMPLATE_DIR / "hardhat.config.ts").is_file()
        assert (DEFAULT_BASE_TEMPLATE_DIR / "package.json").is_file()

    @pytest.mark.unit
    def test_from_env_without_vars(self):
        assert GeneratorConfig.from_env() == GeneratorConfig()

    @pytest.mark.unit
    def test_from_env_overrides(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("FHEVM_OUTPUT_DIR", str(tmp_path / "out"))
        monkeypatch.setenv("FHEVM_DOCS_FILE", str(tmp_path / "DOCS.md"))
        monkeypatch.setenv("FHEVM_STRICT_TEMPLATES", "yes")
        config = GeneratorConfig.from_env()
        assert config.output_dir == tmp_path / "out"
        assert config.docs_file == tmp_path / "DOCS.md"
        assert config.strict_templates is True

    @pytest.mark.unit
    def test_from_env_strict_false_values(self, monkeypatch):
        monkeypatch.setenv("FHEVM_STRICT_TEMPLATES", "0")
        assert GeneratorConfig.from_env().strict_templates is False

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = GeneratorConfig(output_dir=tmp_path / "o", strict_templates=True)
        saved = config.save(tmp_path / "nested" / "config.json")
        assert saved.exists()
        assert GeneratorConfig.load(saved) == config
