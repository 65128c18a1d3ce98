"""Unit tests for domain exceptions."""

import pytest

from docmanifest.domain.exceptions import (
    CollisionError,
    DocManifestError,
    DocumentError,
    MalformedBlock,
    ManifestError,
    SourceTreeError,
    ValidationError,
)
from docmanifest.domain.value_objects import ErrorKind


def test_document_errors_inherit_document_error() -> None:
    """Per-document errors share the DocumentError base."""
    for cls in (MalformedBlock, ValidationError, CollisionError):
        assert issubclass(cls, DocumentError)
        assert issubclass(cls, DocManifestError)


def test_build_level_errors_are_not_document_errors() -> None:
    """Fatal errors sit outside the per-document taxonomy."""
    assert not issubclass(SourceTreeError, DocumentError)
    assert not issubclass(ManifestError, DocumentError)
    assert issubclass(SourceTreeError, DocManifestError)


def test_kinds() -> None:
    assert MalformedBlock("x").kind == ErrorKind.MALFORMED_BLOCK
    assert ValidationError("date").kind == ErrorKind.VALIDATION_ERROR
    assert CollisionError("a").kind == ErrorKind.COLLISION_ERROR


def test_malformed_block_line_in_detail() -> None:
    exc = MalformedBlock("invalid YAML", line=4)
    assert exc.line == 4
    assert exc.detail == "line 4: invalid YAML"


def test_validation_error_field() -> None:
    """ValidationError keeps the offending field name."""
    exc = ValidationError("date", "required field missing")
    assert exc.field == "date"
    assert exc.detail == "date: required field missing"
    assert ValidationError("title").detail == "title"


def test_collision_error_mentions_existing_path() -> None:
    exc = CollisionError("hello", existing_path="a/hello.md")
    assert exc.slug == "hello"
    assert "a/hello.md" in exc.detail


def test_raise_validation_error_catchable_as_docmanifest_error() -> None:
    with pytest.raises(DocManifestError, match="title"):
        raise ValidationError("title")
