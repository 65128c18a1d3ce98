"""Slug deriver port - canonical identifiers from source paths."""

from pathlib import PurePath
from typing import Protocol


class SlugDeriver(Protocol):
    """Port for deriving a document slug from its path relative to the content root."""

    def derive(self, relative_path: PurePath) -> str: ...
