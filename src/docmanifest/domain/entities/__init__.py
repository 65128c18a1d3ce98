"""Domain entities."""

from docmanifest.domain.entities.document import Document

__all__ = [
    "Document",
]
