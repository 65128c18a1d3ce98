"""Source scanner port - enumerate and read document files."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Protocol


@dataclass(frozen=True)
class SourceFile:
    """Raw document file read from the content tree."""

    relative_path: PurePosixPath
    data: bytes
    fingerprint: str


class SourceScanner(Protocol):
    """Port for walking a content tree."""

    def scan(self, root: Path, extensions: tuple[str, ...]) -> list[PurePosixPath]: ...

    def read(self, root: Path, relative_path: PurePosixPath) -> SourceFile: ...
