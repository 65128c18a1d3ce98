"""Build Unit of Work port - ownership boundary of one build."""

from collections.abc import AsyncIterator
from typing import Protocol

from docmanifest.application.dto.manifest_dto import Manifest
from docmanifest.application.ports.repositories.document_store import DocumentStore
from docmanifest.application.ports.repositories.tag_index import TagIndex
from docmanifest.domain.entities import Document


class BuildUnitOfWork(Protocol):
    """Unit of Work - owns the store and tag index while a build runs."""

    @property
    def documents(self) -> DocumentStore: ...

    @property
    def tags(self) -> TagIndex: ...

    def insert(self, document: Document) -> Document: ...

    def remove(self, slug: str) -> None: ...

    def snapshot(self) -> Manifest: ...


class BuildUnitOfWorkFactory(Protocol):
    """Factory for creating BuildUnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[BuildUnitOfWork]: ...
