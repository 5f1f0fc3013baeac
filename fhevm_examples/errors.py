"""Exceptions raised by the FHEVM example generators."""

from __future__ import annotations

from pathlib import Path


class FHEVMExampleError(Exception):
    """Base class for generator failures reported to the command line."""


class UnknownCategoryError(FHEVMExampleError):
    """Raised when a category name is not present in the catalog."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Unknown category: {name}\n"
            f"Available categories: {', '.join(self.available)}"
        )


class MissingTemplateError(FHEVMExampleError):
    """Raised in strict mode when a base-template file cannot be found."""

    def __init__(self, missing: list[Path]) -> None:
        self.missing = list(missing)
        names = ", ".join(str(p) for p in self.missing)
        super().__init__(f"Base template file(s) not found: {names}")
