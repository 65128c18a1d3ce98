"""Filesystem scanner for content trees."""

import logging
import os
from pathlib import Path, PurePosixPath

from docmanifest.application.ports.source_scanner import SourceFile
from docmanifest.domain.exceptions import SourceTreeError
from docmanifest.domain.value_objects import ContentFingerprint

logger = logging.getLogger(__name__)


class FilesystemScanner:
    """Walk a directory tree for document files, hidden entries skipped."""

    def scan(self, root: Path, extensions: tuple[str, ...]) -> list[PurePosixPath]:
        """
        Return document paths relative to root, sorted.
        Raises SourceTreeError if root is missing or cannot be listed.
        """
        if not root.exists():
            raise SourceTreeError(f"Content root not found: {root}")
        if not root.is_dir():
            raise SourceTreeError(f"Content root is not a directory: {root}")

        wanted = {e.lower().lstrip(".") for e in extensions}
        found: list[PurePosixPath] = []

        def _on_error(exc: OSError) -> None:
            raise SourceTreeError(f"Cannot read content tree at {exc.filename}: {exc.strerror}") from exc

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            for name in filenames:
                if name.startswith("."):
                    continue
                if Path(name).suffix.lstrip(".").lower() not in wanted:
                    continue
                relative = Path(dirpath, name).relative_to(root)
                found.append(PurePosixPath(relative.as_posix()))

        found.sort(key=lambda p: p.parts)
        logger.debug("Found %d document files under %s", len(found), root)
        return found

    def read(self, root: Path, relative_path: PurePosixPath) -> SourceFile:
        """Read one file and fingerprint its raw bytes."""
        try:
            data = (root / relative_path).read_bytes()
        except OSError as exc:
            raise SourceTreeError(f"Cannot read {relative_path}: {exc.strerror}") from exc
        return SourceFile(
            relative_path=relative_path,
            data=data,
            fingerprint=ContentFingerprint.of(data).value,
        )
