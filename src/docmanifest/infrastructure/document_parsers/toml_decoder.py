"""TOML metadata block decoder (+++ markers)."""

import re
import tomllib
from typing import Any

from docmanifest.domain.exceptions import MalformedBlock

_LINE_RE = re.compile(r"at line (\d+)")


def decode_toml(block: str, first_line: int) -> dict[str, Any]:
    """Decode a TOML block. Tags under [taxonomies] are used when no top-level tags exist."""
    try:
        data = tomllib.loads(block)
    except tomllib.TOMLDecodeError as exc:
        lineno = getattr(exc, "lineno", None)
        if lineno is None:
            match = _LINE_RE.search(str(exc))
            lineno = int(match.group(1)) if match else None
        line = first_line + lineno - 1 if lineno is not None else None
        raise MalformedBlock(f"invalid TOML: {exc}", line=line) from exc

    taxonomies = data.get("taxonomies")
    if "tags" not in data and isinstance(taxonomies, dict) and "tags" in taxonomies:
        data = {**data, "tags": taxonomies["tags"]}
    return data
