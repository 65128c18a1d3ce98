"""Tag index port."""

from typing import Protocol

from docmanifest.domain.entities import Document


class TagIndex(Protocol):
    """Port for the tag -> ordered slugs secondary index."""

    def add(self, document: Document) -> None: ...

    def remove(self, slug: str) -> None: ...

    def query(self, tag: str) -> list[str]: ...

    def tags(self) -> list[str]: ...

    def snapshot(self) -> dict[str, tuple[str, ...]]: ...
