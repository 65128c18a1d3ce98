"""List tags use case."""

from dataclasses import dataclass

from docmanifest.application.ports.repositories import ManifestRepository
from docmanifest.domain.exceptions import ManifestError


@dataclass(frozen=True)
class TagSummary:
    """A tag and how many documents carry it."""

    tag: str
    count: int


class ListTagsUseCase:
    """List the tags of an existing manifest, sorted by name."""

    def __init__(self, manifest_repository: ManifestRepository) -> None:
        self._manifests = manifest_repository

    async def execute(self) -> list[TagSummary]:
        manifest = self._manifests.load()
        if manifest is None:
            raise ManifestError("No manifest found. Run build first.")
        return [TagSummary(tag=tag, count=len(slugs)) for tag, slugs in sorted(manifest.tags.items())]
