"""Manifest repository port."""

from typing import Protocol

from docmanifest.application.dto.manifest_dto import Manifest, ValidationReport


class ManifestRepository(Protocol):
    """Port for manifest and report persistence."""

    def load(self) -> Manifest | None: ...

    def save(self, manifest: Manifest) -> None: ...

    def save_report(self, report: ValidationReport) -> None: ...
