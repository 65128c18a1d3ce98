"""Base types for metadata block parsing."""

from typing import Any, Protocol

from docmanifest.infrastructure.document_parsers.metadata_keys import FrontMatter


class ParsedDocument:
    """Result of parsing a document: validated front matter and body text."""

    __slots__ = ("front_matter", "body")

    def __init__(self, front_matter: FrontMatter, body: str) -> None:
        self.front_matter = front_matter
        self.body = body


class MetadataDecoder(Protocol):
    """Decoder turning the text of a metadata block into a mapping."""

    def __call__(self, block: str, first_line: int) -> dict[str, Any]:
        """Decode block text. first_line is the document line the block starts on.
        Raises MalformedBlock when the block is not a mapping."""
        ...
