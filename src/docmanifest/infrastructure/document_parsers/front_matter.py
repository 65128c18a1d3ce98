"""Locate the metadata block at the top of a document."""

from collections.abc import Iterable

from docmanifest.domain.exceptions import MalformedBlock

_BOM = "\ufeff"


def split_block(text: str, markers: Iterable[str]) -> tuple[str, str, str]:
    """
    Split text into (marker, block, body).

    The first line must be one of markers; the block runs until the next line
    holding the same marker. Body is what follows, leading whitespace trimmed.
    Raises MalformedBlock if either marker is missing.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    lines = text.splitlines(keepends=True)
    if not lines:
        raise MalformedBlock("document is empty, missing opening marker")

    marker = lines[0].rstrip()
    if marker not in set(markers):
        raise MalformedBlock("missing opening marker", line=1)

    for index in range(1, len(lines)):
        if lines[index].rstrip() == marker:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :]).lstrip()
            return marker, block, body
    raise MalformedBlock(f"missing closing marker '{marker}'")
