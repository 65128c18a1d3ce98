"""Query tag use case."""

from docmanifest.application.ports.repositories import ManifestRepository
from docmanifest.domain.exceptions import ManifestError


class QueryTagUseCase:
    """Ordered slugs of the documents carrying a tag; empty for an unknown tag."""

    def __init__(self, manifest_repository: ManifestRepository) -> None:
        self._manifests = manifest_repository

    async def execute(self, tag: str) -> list[str]:
        manifest = self._manifests.load()
        if manifest is None:
            raise ManifestError("No manifest found. Run build first.")
        return list(manifest.query(tag))
