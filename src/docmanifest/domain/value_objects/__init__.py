"""Domain value objects."""

from docmanifest.domain.value_objects.content_fingerprint import ContentFingerprint
from docmanifest.domain.value_objects.error_kind import ErrorKind

__all__ = [
    "ContentFingerprint",
    "ErrorKind",
]
