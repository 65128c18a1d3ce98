"""Content fingerprint for change detection between builds."""

import hashlib
import re
from dataclasses import dataclass

_MD5_HEX = re.compile(r"^[0-9a-f]{32}$")


@dataclass(frozen=True)
class ContentFingerprint:
    """MD5 hex digest of a raw source document."""

    value: str

    def __post_init__(self) -> None:
        if not _MD5_HEX.match(self.value):
            raise ValueError("Fingerprint must be 32 lowercase hex characters")

    @classmethod
    def of(cls, data: bytes) -> "ContentFingerprint":
        return cls(hashlib.md5(data).hexdigest())

    def __str__(self) -> str:
        return self.value
