"""In-memory store, tag index and build unit of work."""

from docmanifest.infrastructure.persistence.memory.document_store import (
    InMemoryDocumentStore,
)
from docmanifest.infrastructure.persistence.memory.tag_index import InMemoryTagIndex
from docmanifest.infrastructure.persistence.memory.unit_of_work import (
    InMemoryBuildUnitOfWork,
    create_uow_factory,
)

__all__ = [
    "InMemoryBuildUnitOfWork",
    "InMemoryDocumentStore",
    "InMemoryTagIndex",
    "create_uow_factory",
]
