"""Repository ports."""

from docmanifest.application.ports.repositories.document_store import DocumentStore
from docmanifest.application.ports.repositories.manifest_repository import (
    ManifestRepository,
)
from docmanifest.application.ports.repositories.tag_index import TagIndex

__all__ = [
    "DocumentStore",
    "ManifestRepository",
    "TagIndex",
]
