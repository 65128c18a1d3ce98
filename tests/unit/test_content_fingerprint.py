"""Unit tests for ContentFingerprint value object."""

import hashlib

import pytest

from docmanifest.domain.value_objects import ContentFingerprint


def test_fingerprint_of_bytes() -> None:
    """ContentFingerprint.of hashes raw bytes with MD5."""
    fp = ContentFingerprint.of(b"hello")
    assert fp.value == hashlib.md5(b"hello").hexdigest()
    assert str(fp) == fp.value


def test_fingerprint_changes_with_content() -> None:
    assert ContentFingerprint.of(b"a") != ContentFingerprint.of(b"b")
    assert ContentFingerprint.of(b"a") == ContentFingerprint.of(b"a")


def test_fingerprint_invalid_value() -> None:
    """ContentFingerprint rejects anything but 32 lowercase hex chars."""
    with pytest.raises(ValueError, match="32 lowercase hex"):
        ContentFingerprint(value="short")
    with pytest.raises(ValueError, match="32 lowercase hex"):
        ContentFingerprint(value="A" * 32)
