"""Document entity."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class Document:
    """Validated content document, immutable once created."""

    slug: str
    title: str
    published_at: datetime
    tags: tuple[str, ...]
    body: str
    content_fingerprint: str
    source_path: str
    draft: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def sort_key(self) -> tuple[float, str]:
        """Key ordering documents newest first, then by slug."""
        return (-self.published_at.timestamp(), self.slug)
