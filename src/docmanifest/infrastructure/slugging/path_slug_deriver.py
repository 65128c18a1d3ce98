"""Path-based slug deriver implementation."""

from pathlib import PurePath

from slugify import slugify

_INDEX_STEMS = frozenset({"index", "_index"})
_FALLBACK = "index"


class PathSlugDeriver:
    """Slug from the path relative to the content root.

    guides/Exploring Actix.md -> guides-exploring-actix
    guides/actix/index.md     -> guides-actix
    posts/日本語.md            -> posts-ri-ben-yu
    """

    def __init__(self, separator: str = "-") -> None:
        self._separator = separator

    def derive(self, relative_path: PurePath) -> str:
        """Lowercase ASCII slug, non-Latin scripts transliterated, never empty."""
        parts = list(relative_path.parent.parts)
        stem = relative_path.stem
        if stem.lower() not in _INDEX_STEMS or not parts:
            parts.append(stem)
        return slugify(" ".join(parts), separator=self._separator) or _FALLBACK
