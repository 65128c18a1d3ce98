"""JSON file manifest repository."""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any

from docmanifest.application.dto.manifest_dto import (
    Manifest,
    ReportEntry,
    ValidationReport,
)
from docmanifest.domain.entities import Document
from docmanifest.domain.exceptions import ManifestError
from docmanifest.domain.value_objects import ContentFingerprint, ErrorKind

MANIFEST_VERSION = 1


def document_to_record(document: Document) -> dict[str, Any]:
    return {
        "slug": document.slug,
        "title": document.title,
        "publishedAt": document.published_at.isoformat(),
        "tags": list(document.tags),
        "body": document.body,
        "contentFingerprint": document.content_fingerprint,
        "sourcePath": document.source_path,
        "draft": document.draft,
        "extra": dict(document.extra),
    }


def document_from_record(record: dict[str, Any]) -> Document:
    published_at = datetime.fromisoformat(record["publishedAt"])
    if published_at.tzinfo is None:
        raise ValueError(f"publishedAt without offset: {record['publishedAt']}")
    return Document(
        slug=record["slug"],
        title=record["title"],
        published_at=published_at,
        tags=tuple(record.get("tags", ())),
        body=record["body"],
        content_fingerprint=ContentFingerprint(record["contentFingerprint"]).value,
        source_path=record["sourcePath"],
        draft=bool(record.get("draft", False)),
        extra=dict(record.get("extra", {})),
    )


def manifest_to_data(manifest: Manifest) -> dict[str, Any]:
    return {
        "version": MANIFEST_VERSION,
        "documents": [document_to_record(d) for d in manifest.documents],
        "tags": {tag: list(slugs) for tag, slugs in manifest.tags.items()},
    }


def manifest_from_data(data: dict[str, Any]) -> Manifest:
    if data.get("version") != MANIFEST_VERSION:
        raise ValueError(f"unsupported manifest version: {data.get('version')!r}")
    return Manifest(
        documents=tuple(document_from_record(r) for r in data["documents"]),
        tags=MappingProxyType({tag: tuple(slugs) for tag, slugs in data["tags"].items()}),
    )


def report_to_data(report: ValidationReport) -> dict[str, Any]:
    return {
        "version": MANIFEST_VERSION,
        "errors": [
            {
                "sourcePath": e.source_path,
                "errorKind": str(e.error_kind),
                "detail": e.detail,
            }
            for e in report.entries
        ],
    }


def report_from_data(data: dict[str, Any]) -> ValidationReport:
    return ValidationReport(
        entries=tuple(
            ReportEntry(
                source_path=e["sourcePath"],
                error_kind=ErrorKind(e["errorKind"]),
                detail=e["detail"],
            )
            for e in data["errors"]
        )
    )


def dumps(data: dict[str, Any]) -> str:
    """Canonical JSON: same data always gives the same text."""
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


class JsonManifestRepository:
    """Manifest and report stored as canonical JSON files."""

    def __init__(self, manifest_path: Path, report_path: Path | None = None) -> None:
        self._manifest_path = Path(manifest_path)
        self._report_path = Path(report_path) if report_path else None

    @property
    def manifest_path(self) -> Path:
        return self._manifest_path

    def load(self) -> Manifest | None:
        """Read manifest; None if the file does not exist. Raises ManifestError if unreadable."""
        if not self._manifest_path.exists():
            return None
        try:
            data = json.loads(self._manifest_path.read_text(encoding="utf-8"))
            return manifest_from_data(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise ManifestError(f"Cannot read manifest {self._manifest_path}: {exc}") from exc

    def save(self, manifest: Manifest) -> None:
        _write_atomic(self._manifest_path, dumps(manifest_to_data(manifest)))

    def load_report(self) -> ValidationReport | None:
        if not self._report_path or not self._report_path.exists():
            return None
        try:
            data = json.loads(self._report_path.read_text(encoding="utf-8"))
            return report_from_data(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise ManifestError(f"Cannot read report {self._report_path}: {exc}") from exc

    def save_report(self, report: ValidationReport) -> None:
        if not self._report_path:
            return
        _write_atomic(self._report_path, dumps(report_to_data(report)))


def _write_atomic(path: Path, text: str) -> None:
    """Write via a temp file in the same directory, then rename over path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
