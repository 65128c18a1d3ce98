"""Document store port."""

from typing import Protocol

from docmanifest.domain.entities import Document


class DocumentStore(Protocol):
    """Port for the authoritative set of documents of a build, keyed by slug."""

    def insert(self, document: Document) -> Document: ...

    def remove(self, slug: str) -> None: ...

    def get(self, slug: str) -> Document | None: ...

    def all(self) -> list[Document]: ...
