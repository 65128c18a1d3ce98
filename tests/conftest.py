"""Pytest fixtures for docmanifest tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest

from docmanifest.application.use_cases.build.build_manifest import BuildManifestUseCase
from docmanifest.domain.entities import Document
from docmanifest.infrastructure.document_parsers.loader import FrontMatterDocumentLoader
from docmanifest.infrastructure.persistence.memory import create_uow_factory
from docmanifest.infrastructure.slugging.path_slug_deriver import PathSlugDeriver
from docmanifest.infrastructure.source_tree.scanner import FilesystemScanner

ACTIX = """---
title: Exploring Actix
date: "2023-06-24T12:02:53Z"
tags: ["rust", "apis"]
---

Actix is a powerful actor framework.
"""

TYPESAFE = """---
title: Type-Safe APIs
date: "2023-06-14T12:03:00Z"
tags: ["typescript", "api development"]
---

End-to-end types.
"""


def make_document(
    slug: str,
    published_at: datetime | None = None,
    tags: tuple[str, ...] = (),
    **overrides,
) -> Document:
    """Document with sensible defaults for store and index tests."""
    fields = dict(
        slug=slug,
        title=slug.replace("-", " ").title(),
        published_at=published_at or datetime(2023, 1, 1, tzinfo=UTC),
        tags=tags,
        body="body",
        content_fingerprint="0" * 32,
        source_path=f"{slug}.md",
    )
    fields.update(overrides)
    return Document(**fields)


@pytest.fixture
def content_tree(tmp_path: Path) -> Callable[..., Path]:
    """Write {relative path: text} into a fresh content root and return the root."""
    root = tmp_path / "content"
    root.mkdir()

    def _write(files: dict[str, str | bytes] | None = None) -> Path:
        for relative, text in (files or {}).items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(text, bytes):
                path.write_bytes(text)
            else:
                path.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def build_use_case() -> BuildManifestUseCase:
    """Build use case wired with the real filesystem and parser adapters."""
    return BuildManifestUseCase(
        unit_of_work_factory=create_uow_factory(),
        scanner=FilesystemScanner(),
        loader=FrontMatterDocumentLoader(PathSlugDeriver()),
    )
