"""JSON manifest and report files."""

from docmanifest.infrastructure.persistence.filesystem.manifest_repository import (
    JsonManifestRepository,
)

__all__ = ["JsonManifestRepository"]
