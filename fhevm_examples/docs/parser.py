"""Annotation parser for contract sources.

Extracts ``@title``, ``@description`` and ``@chapter:`` values from comment
blocks using pure regex -- the contracts are never compiled.  Each tag is
matched independently and only its first occurrence counts.
"""

from __future__ import annotations

import re
from pathlib import Path

from .models import DEFAULT_CATEGORY, DEFAULT_CHAPTER, Annotations, ContractDocs

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CONTRACT_SUFFIX = ".sol"

# ``\s+`` may cross a line break; the captured value never does.
_TITLE_PATTERN = re.compile(r"@title\s+([^\r\n]+)")
_DESCRIPTION_PATTERN = re.compile(r"@description\s+([^\r\n]+)")
_CHAPTER_PATTERN = re.compile(r"@chapter:\s*([A-Za-z0-9_]+)")
_FUNCTION_PATTERN = re.compile(r"\bfunction\s+([A-Za-z_$][A-Za-z0-9_$]*)\s*\(")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _first(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    return match.group(1) if match else None


def parse_annotations(text: str) -> Annotations:
    """Return the first ``@title``, ``@description`` and ``@chapter:`` values.

    Examples::

        parse_annotations("/** @title Counter */").title -> "Counter */"
        parse_annotations("// @chapter: basics").chapter -> "basics"
    """
    return Annotations(
        title=_first(_TITLE_PATTERN, text),
        description=_first(_DESCRIPTION_PATTERN, text),
        chapter=_first(_CHAPTER_PATTERN, text),
    )


def extract_functions(text: str) -> list[str]:
    """Return declared function names in source order, without duplicates."""
    names: list[str] = []
    for match in _FUNCTION_PATTERN.finditer(text):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def parse_contract_docs(file_path: str | Path) -> ContractDocs:
    """Read a contract file and resolve its annotations.

    Missing tags fall back to the file's base name (title), an empty string
    (description) and ``"general"`` (chapter).  Undecodable bytes are replaced
    rather than failing the whole run.
    """
    path = Path(file_path)
    text = path.read_text(encoding="utf-8", errors="replace")
    found = parse_annotations(text)
    return ContractDocs(
        title=found.title if found.title is not None else path.name,
        description=found.description if found.description is not None else "",
        chapter=found.chapter if found.chapter is not None else DEFAULT_CHAPTER,
        functions=extract_functions(text),
    )


def infer_category(dir_name: str) -> str:
    """Infer an example's category from its directory name.

    The category is the text before the first hyphen; names without a hyphen
    (or starting with one) are ``"uncategorized"``.

    Examples::

        infer_category("access-control-basic") -> "access"
        infer_category("counter") -> "uncategorized"
    """
    prefix, sep, _ = dir_name.partition("-")
    if not sep or not prefix:
        return DEFAULT_CATEGORY
    return prefix


def find_contracts(contracts_dir: Path) -> list[Path]:
    """Return the contract files directly inside *contracts_dir*, sorted."""
    if not contracts_dir.is_dir():
        return []
    return sorted(
        p for p in contracts_dir.iterdir()
        if p.is_file() and p.name.endswith(CONTRACT_SUFFIX)
    )
