"""Build input, manifest and report DTOs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from docmanifest.domain.entities import Document
from docmanifest.domain.value_objects import ErrorKind


@dataclass(frozen=True)
class BuildInput:
    """Input for one build over a content tree."""

    root: Path
    previous: "Manifest | None" = None
    extensions: tuple[str, ...] = ("md", "markdown")
    max_workers: int | None = None
    include_drafts: bool = False

    def __post_init__(self) -> None:
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")


@dataclass(frozen=True)
class ReportEntry:
    """One file that failed to produce a stored document."""

    source_path: str
    error_kind: ErrorKind
    detail: str


@dataclass(frozen=True)
class ValidationReport:
    """Ordered per-document failures of a build."""

    entries: tuple[ReportEntry, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def by_kind(self, kind: ErrorKind) -> list[ReportEntry]:
        return [e for e in self.entries if e.error_kind == kind]


@dataclass(frozen=True)
class Manifest:
    """Read-only snapshot of the store and tag index after a build."""

    documents: tuple[Document, ...] = ()
    tags: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def by_source_path(self) -> dict[str, Document]:
        return {d.source_path: d for d in self.documents}

    def get(self, slug: str) -> Document | None:
        for doc in self.documents:
            if doc.slug == slug:
                return doc
        return None

    def query(self, tag: str) -> tuple[str, ...]:
        return self.tags.get(tag, ())


@dataclass(frozen=True)
class BuildStats:
    """Counters describing what a build did."""

    scanned: int = 0
    parsed: int = 0
    reused: int = 0
    failed: int = 0
    drafts_skipped: int = 0
    removed: tuple[str, ...] = ()


@dataclass(frozen=True)
class BuildResult:
    """Output of a build: manifest, report and statistics."""

    manifest: Manifest
    report: ValidationReport
    stats: BuildStats
