"""In-memory document store."""

from docmanifest.domain.entities import Document
from docmanifest.domain.exceptions import CollisionError


class InMemoryDocumentStore:
    """Documents keyed by slug. First write wins; stored documents are never mutated."""

    def __init__(self) -> None:
        self._by_slug: dict[str, Document] = {}

    def insert(self, document: Document) -> Document:
        """Store document. Raises CollisionError if its slug is taken."""
        existing = self._by_slug.get(document.slug)
        if existing is not None:
            raise CollisionError(document.slug, existing_path=existing.source_path)
        self._by_slug[document.slug] = document
        return document

    def remove(self, slug: str) -> None:
        self._by_slug.pop(slug, None)

    def get(self, slug: str) -> Document | None:
        return self._by_slug.get(slug)

    def all(self) -> list[Document]:
        """All documents, newest first, ties by slug."""
        return sorted(self._by_slug.values(), key=lambda d: d.sort_key)

    def __len__(self) -> int:
        return len(self._by_slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._by_slug
