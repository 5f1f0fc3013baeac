"""Pydantic v2 models for contract annotation parsing and example docs."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CHAPTER = "general"
DEFAULT_CATEGORY = "uncategorized"


class Annotations(BaseModel):
    """Raw annotation values found in a source file.

    Each field is ``None`` when its tag does not occur in the text.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    description: Optional[str] = None
    chapter: Optional[str] = None


class ContractDocs(BaseModel):
    """Annotations of one contract file with defaults applied."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="@title value, or the file base name")
    description: str = Field(default="", description="@description value")
    chapter: str = Field(default=DEFAULT_CHAPTER, description="@chapter: value")
    functions: list[str] = Field(
        default_factory=list, description="Declared function names in source order"
    )


class ParsedExample(BaseModel):
    """One contract of one example directory, ready for rendering."""

    name: str = Field(..., description="Example directory name")
    path: str = Field(..., description="Path of the contract file")
    title: str
    description: str = ""
    category: str = DEFAULT_CATEGORY
    chapter: str = DEFAULT_CHAPTER
    functions: list[str] = Field(default_factory=list)
