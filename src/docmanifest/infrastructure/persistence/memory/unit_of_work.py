"""In-memory Unit of Work for one build."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import MappingProxyType

from docmanifest.application.dto.manifest_dto import Manifest
from docmanifest.domain.entities import Document
from docmanifest.infrastructure.persistence.memory.document_store import (
    InMemoryDocumentStore,
)
from docmanifest.infrastructure.persistence.memory.tag_index import InMemoryTagIndex


class InMemoryBuildUnitOfWork:
    """Build Unit of Work - one store and one tag index kept consistent."""

    def __init__(self) -> None:
        self._documents: InMemoryDocumentStore | None = None
        self._tags: InMemoryTagIndex | None = None

    async def __aenter__(self) -> "InMemoryBuildUnitOfWork":
        self._documents = InMemoryDocumentStore()
        self._tags = InMemoryTagIndex()
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type:
            await self.rollback()

    @property
    def documents(self) -> InMemoryDocumentStore:
        return self._documents

    @property
    def tags(self) -> InMemoryTagIndex:
        return self._tags

    def insert(self, document: Document) -> Document:
        """Insert into the store, then index. A collision leaves both untouched."""
        stored = self._documents.insert(document)
        self._tags.add(stored)
        return stored

    def remove(self, slug: str) -> None:
        self._documents.remove(slug)
        self._tags.remove(slug)

    def snapshot(self) -> Manifest:
        """Immutable view of the current state."""
        return Manifest(
            documents=tuple(self._documents.all()),
            tags=MappingProxyType(self._tags.snapshot()),
        )

    async def rollback(self) -> None:
        """Discard everything built so far."""
        self._documents = InMemoryDocumentStore()
        self._tags = InMemoryTagIndex()


def create_uow_factory() -> object:
    """Create BuildUnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryBuildUnitOfWork]:
        uow = InMemoryBuildUnitOfWork()
        async with uow:
            yield uow

    return factory
