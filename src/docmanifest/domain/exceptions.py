"""Domain exceptions."""

from docmanifest.domain.value_objects import ErrorKind


class DocManifestError(Exception):
    """Base exception for docmanifest."""

    pass


class DocumentError(DocManifestError):
    """A single document could not be stored. Never fatal to a build."""

    kind: ErrorKind

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class MalformedBlock(DocumentError):
    """Metadata block is missing its markers or cannot be decoded as a mapping."""

    kind = ErrorKind.MALFORMED_BLOCK

    def __init__(self, detail: str, line: int | None = None) -> None:
        if line is not None:
            detail = f"line {line}: {detail}"
        super().__init__(detail)
        self.line = line


class ValidationError(DocumentError):
    """A required metadata field is missing or invalid."""

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(self, field: str, detail: str | None = None) -> None:
        super().__init__(f"{field}: {detail}" if detail else field)
        self.field = field


class CollisionError(DocumentError):
    """Another document already holds this slug."""

    kind = ErrorKind.COLLISION_ERROR

    def __init__(self, slug: str, existing_path: str | None = None) -> None:
        detail = f"slug '{slug}' already taken"
        if existing_path:
            detail += f" by {existing_path}"
        super().__init__(detail)
        self.slug = slug
        self.existing_path = existing_path


class SourceTreeError(DocManifestError):
    """Source tree cannot be read. Aborts the build before any indexing."""

    pass


class ManifestError(DocManifestError):
    """Manifest file cannot be read or decoded."""

    pass
