"""Front matter document loader: parse, validate and identify a source file."""

from docmanifest.application.ports import SlugDeriver, SourceFile
from docmanifest.domain.entities import Document
from docmanifest.infrastructure.document_parsers.metadata_keys import normalize_extra
from docmanifest.infrastructure.document_parsers.registry import parse_bytes


class FrontMatterDocumentLoader:
    """Builds Documents from files that start with a metadata block."""

    def __init__(self, slug_deriver: SlugDeriver) -> None:
        self._slug_deriver = slug_deriver

    def load(self, source: SourceFile) -> Document:
        parsed = parse_bytes(source.data)
        front_matter = parsed.front_matter
        extra = {k: normalize_extra(v) for k, v in (front_matter.model_extra or {}).items()}
        return Document(
            slug=self._slug_deriver.derive(source.relative_path),
            title=front_matter.title,
            published_at=front_matter.published_at,
            tags=front_matter.tags,
            body=parsed.body,
            content_fingerprint=source.fingerprint,
            source_path=source.relative_path.as_posix(),
            draft=front_matter.draft,
            extra=extra,
        )
