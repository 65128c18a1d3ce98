"""Kind of per-document failure recorded in the validation report."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Per-document error taxonomy."""

    MALFORMED_BLOCK = "MalformedBlock"
    VALIDATION_ERROR = "ValidationError"
    COLLISION_ERROR = "CollisionError"
