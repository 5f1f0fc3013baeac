"""Shared pytest fixtures for the FHEVM example toolkit test suite.

Provides reusable fixtures for:
- A small alternate catalog
- Annotated and bare contract sources
- A populated examples directory for the documentation generator
- Isolation from ``FHEVM_*`` environment variables
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from fhevm_examples.config import Catalog, CategoryConfig, ExampleSpec


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

_ENV_VARS = (
    "FHEVM_OUTPUT_DIR",
    "FHEVM_EXAMPLES_DIR",
    "FHEVM_DOCS_FILE",
    "FHEVM_BASE_TEMPLATE_DIR",
    "FHEVM_STRICT_TEMPLATES",
)


@pytest.fixture(autouse=True)
def _clean_fhevm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no developer environment leaks into ``GeneratorConfig.from_env``."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@pytest.fixture
def small_catalog() -> Catalog:
    """A two-category catalog used instead of the built-in table."""
    return Catalog(
        categories=(
            CategoryConfig(
                name="demo",
                title="Demo Examples",
                description="Demo things",
                examples=(
                    ExampleSpec(name="alpha", description="First"),
                    ExampleSpec(name="beta-gamma", description="Second"),
                ),
            ),
            CategoryConfig(
                name="solo",
                title="Solo Examples",
                description="Just one",
                examples=(ExampleSpec(name="only", description="The only one"),),
            ),
        )
    )


# ---------------------------------------------------------------------------
# Contract sources
# ---------------------------------------------------------------------------

ANNOTATED_CONTRACT = textwrap.dedent(
    """\
    // SPDX-License-Identifier: BSD-3-Clause-Clear
    pragma solidity ^0.8.24;

    import { FHE, euint32, externalEuint32 } from "@fhevm/solidity/lib/FHE.sol";

    /**
     * @title Encrypted Counter
     * @description A counter whose value stays encrypted
     * @chapter: basics
     */
    contract FHECounter {
        euint32 private _count;

        function getCount() external view returns (euint32) {
            return _count;
        }

        function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external {
            _count = FHE.add(_count, FHE.fromExternal(inputEuint32, inputProof));
        }
    }
    """
)

BARE_CONTRACT = textwrap.dedent(
    """\
    pragma solidity ^0.8.24;

    contract Plain {
    }
    """
)


@pytest.fixture
def annotated_contract() -> str:
    return ANNOTATED_CONTRACT


@pytest.fixture
def bare_contract() -> str:
    return BARE_CONTRACT


def _write_contract(example_dir: Path, filename: str, source: str) -> Path:
    contracts = example_dir / "contracts"
    contracts.mkdir(parents=True, exist_ok=True)
    path = contracts / filename
    path.write_text(source, encoding="utf-8")
    return path


@pytest.fixture
def examples_tree(tmp_path: Path) -> Path:
    """An examples directory covering the category-inference cases.

    Layout (sorted)::

        access-control-basic/contracts/AccessControl.sol  -> category "access"
        basic-arithmetic/contracts/Arithmetic.sol         -> no annotations
        basic-counter/contracts/Counter.sol               -> fully annotated
        counter/contracts/Plain.sol                       -> "uncategorized"
        notes/                                            -> no contracts/, skipped
        README.md                                         -> not a directory
    """
    root = tmp_path / "examples"
    root.mkdir()

    _write_contract(
        root / "access-control-basic",
        "AccessControl.sol",
        "/**\n * @title Access Control\n * @description Grants and revokes access\n"
        " * @chapter: access-control\n */\ncontract AccessControl {}\n",
    )
    _write_contract(root / "basic-arithmetic", "Arithmetic.sol", BARE_CONTRACT)
    _write_contract(root / "basic-counter", "Counter.sol", ANNOTATED_CONTRACT)
    _write_contract(root / "counter", "Plain.sol", BARE_CONTRACT)
    (root / "notes").mkdir()
    (root / "README.md").write_text("# Examples\n", encoding="utf-8")
    return root
