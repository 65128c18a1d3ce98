"""Application ports - interfaces for external adapters."""

from docmanifest.application.ports.build_unit_of_work import (
    BuildUnitOfWork,
    BuildUnitOfWorkFactory,
)
from docmanifest.application.ports.document_loader import DocumentLoader
from docmanifest.application.ports.slug_deriver import SlugDeriver
from docmanifest.application.ports.source_scanner import SourceFile, SourceScanner

__all__ = [
    "BuildUnitOfWork",
    "BuildUnitOfWorkFactory",
    "DocumentLoader",
    "SlugDeriver",
    "SourceFile",
    "SourceScanner",
]
