"""In-memory tag index."""

import bisect

from docmanifest.domain.entities import Document


class InMemoryTagIndex:
    """Tag -> slugs ordered by publication time descending, then slug ascending.

    Each list holds (sort_key, slug) pairs.
    """

    def __init__(self) -> None:
        self._by_tag: dict[str, list[tuple[tuple[float, str], str]]] = {}
        self._tags_by_slug: dict[str, tuple[str, ...]] = {}

    def add(self, document: Document) -> None:
        """Index document under each of its tags."""
        self.remove(document.slug)
        entry = (document.sort_key, document.slug)
        for tag in document.tags:
            bisect.insort(self._by_tag.setdefault(tag, []), entry)
        self._tags_by_slug[document.slug] = document.tags

    def remove(self, slug: str) -> None:
        """Drop slug from every tag list; empty lists are pruned."""
        for tag in self._tags_by_slug.pop(slug, ()):
            entries = self._by_tag.get(tag, [])
            entries[:] = [e for e in entries if e[1] != slug]
            if not entries:
                self._by_tag.pop(tag, None)

    def query(self, tag: str) -> list[str]:
        """Ordered slugs for tag; unknown tag gives an empty list."""
        return [slug for _, slug in self._by_tag.get(tag, [])]

    def tags(self) -> list[str]:
        return sorted(self._by_tag)

    def snapshot(self) -> dict[str, tuple[str, ...]]:
        return {tag: tuple(self.query(tag)) for tag in self.tags()}
