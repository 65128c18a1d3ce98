"""YAML metadata block decoder (--- markers)."""

from typing import Any

import yaml

from docmanifest.domain.exceptions import MalformedBlock

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _MetadataLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as plain strings.

    Date coercion happens in the FrontMatter model, so an impossible date
    such as 2023-02-30 surfaces as a field error instead of a constructor
    crash, and extra keys keep the text the author wrote.
    """


_MetadataLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def decode_yaml(block: str, first_line: int) -> dict[str, Any]:
    """Decode a YAML block with a safe loader. An empty block is an empty mapping."""
    try:
        data = yaml.load(block, Loader=_MetadataLoader)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = first_line + mark.line if mark is not None else None
        problem = getattr(exc, "problem", None) or str(exc)
        raise MalformedBlock(f"invalid YAML: {problem}", line=line) from exc
    except (ValueError, TypeError) as exc:
        raise MalformedBlock(f"invalid YAML value: {exc}", line=first_line) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedBlock(
            f"metadata block is a {type(data).__name__}, not a mapping",
            line=first_line,
        )
    return {str(k): v for k, v in data.items()}


def encode_yaml(data: dict[str, Any]) -> str:
    """Dump a mapping as a YAML block body, keys in insertion order."""
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
