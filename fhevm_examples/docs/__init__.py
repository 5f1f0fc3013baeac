"""Documentation generation from contract annotations.

Exports the regex annotation parser, its Pydantic result models, and the
``DocsGenerator`` that writes aggregated and per-example markdown.
"""

from fhevm_examples.docs.generator import DocsGenerator
from fhevm_examples.docs.models import Annotations, ContractDocs, ParsedExample
from fhevm_examples.docs.parser import (
    infer_category,
    parse_annotations,
    parse_contract_docs,
)

__all__ = [
    "Annotations",
    "ContractDocs",
    "DocsGenerator",
    "ParsedExample",
    "infer_category",
    "parse_annotations",
    "parse_contract_docs",
]
