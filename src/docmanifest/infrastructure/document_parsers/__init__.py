"""Document parsers: split and validate metadata blocks."""

from docmanifest.infrastructure.document_parsers.base import ParsedDocument
from docmanifest.infrastructure.document_parsers.metadata_keys import FrontMatter
from docmanifest.infrastructure.document_parsers.registry import (
    parse_bytes,
    parse_document,
    serialize_document,
    supported_markers,
)

__all__ = [
    "FrontMatter",
    "ParsedDocument",
    "parse_bytes",
    "parse_document",
    "serialize_document",
    "supported_markers",
]
