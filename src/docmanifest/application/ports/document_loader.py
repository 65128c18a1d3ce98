"""Document loader port - raw source file to validated document."""

from typing import Protocol

from docmanifest.application.ports.source_scanner import SourceFile
from docmanifest.domain.entities import Document


class DocumentLoader(Protocol):
    """Port for turning a source file into a Document.

    Must be a pure function of its input: it runs on worker threads.
    Raises MalformedBlock or ValidationError.
    """

    def load(self, source: SourceFile) -> Document: ...
