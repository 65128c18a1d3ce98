"""Registry: select the block decoder by opening marker and validate the result."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from docmanifest.domain.exceptions import MalformedBlock, ValidationError
from docmanifest.infrastructure.document_parsers.base import ParsedDocument
from docmanifest.infrastructure.document_parsers.front_matter import split_block
from docmanifest.infrastructure.document_parsers.metadata_keys import FrontMatter
from docmanifest.infrastructure.document_parsers.toml_decoder import decode_toml
from docmanifest.infrastructure.document_parsers.yaml_decoder import (
    decode_yaml,
    encode_yaml,
)

# opening marker -> decoder; the closing marker repeats the opening one
_DECODERS_BY_MARKER: dict[str, Callable[[str, int], dict[str, Any]]] = {
    "---": decode_yaml,
    "+++": decode_toml,
}

# block content starts on the line after the opening marker
_FIRST_BLOCK_LINE = 2


def get_decoder_for_marker(marker: str) -> Callable[[str, int], dict[str, Any]] | None:
    """Return decoder for given opening marker or None."""
    return _DECODERS_BY_MARKER.get(marker)


def supported_markers() -> list[str]:
    """Return list of recognized opening markers."""
    return sorted(_DECODERS_BY_MARKER.keys())


def _describe(error: dict[str, Any]) -> str:
    if error["type"] == "missing":
        return "required field missing"
    return str(error["msg"]).removeprefix("Value error, ")


def parse_document(text: str) -> ParsedDocument:
    """
    Split text into metadata block and body, decode and validate the block.
    Raises MalformedBlock or ValidationError; pure function of text.
    """
    marker, block, body = split_block(text, supported_markers())
    decoder = get_decoder_for_marker(marker)
    if decoder is None:
        raise MalformedBlock(f"no decoder for marker {marker!r}", line=1)
    raw = decoder(block, _FIRST_BLOCK_LINE)
    try:
        front_matter = FrontMatter.model_validate(raw)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "metadata"
        raise ValidationError(field, _describe(error)) from exc
    return ParsedDocument(front_matter=front_matter, body=body)


def parse_bytes(data: bytes) -> ParsedDocument:
    """Decode raw file bytes as UTF-8 and parse them."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedBlock(f"not valid UTF-8: {exc.reason}") from exc
    return parse_document(text)


def serialize_document(front_matter: FrontMatter, body: str) -> str:
    """Write front matter back out as a YAML metadata block followed by body."""
    data: dict[str, Any] = {
        "title": front_matter.title,
        "date": front_matter.published_at.isoformat(),
    }
    if front_matter.tags:
        data["tags"] = list(front_matter.tags)
    if front_matter.draft:
        data["draft"] = True
    data.update(front_matter.model_extra or {})
    return f"---\n{encode_yaml(data)}---\n\n{body}"
