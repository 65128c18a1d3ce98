"""argparse command line: build and list-tags."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from docmanifest import __version__
from docmanifest.application.dto.manifest_dto import BuildInput
from docmanifest.application.use_cases.build.build_manifest import BuildManifestUseCase
from docmanifest.application.use_cases.tags.list_tags import ListTagsUseCase
from docmanifest.application.use_cases.tags.query_tag import QueryTagUseCase
from docmanifest.config import Settings, get_settings
from docmanifest.domain.exceptions import DocManifestError, ManifestError
from docmanifest.infrastructure.document_parsers.loader import FrontMatterDocumentLoader
from docmanifest.infrastructure.persistence.filesystem import JsonManifestRepository
from docmanifest.infrastructure.persistence.memory import create_uow_factory
from docmanifest.infrastructure.slugging.path_slug_deriver import PathSlugDeriver
from docmanifest.infrastructure.source_tree.scanner import FilesystemScanner

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REPORT_NOT_EMPTY = 1
EXIT_FATAL = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docmanifest",
        description="Build a validated, indexed manifest from a tree of content documents",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default from settings)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Build manifest and validation report")
    build.add_argument("root", type=Path, nargs="?", default=None, help="Content root directory")
    build.add_argument("--manifest", type=Path, default=None, help="Manifest output path")
    build.add_argument("--report", type=Path, default=None, help="Report output path")
    build.add_argument("--workers", type=_positive_int, default=None, help="Parser pool size")
    build.add_argument("--strict", action="store_true", default=None, help="Exit 1 when any document failed")
    build.add_argument("--full", action="store_true", help="Ignore the existing manifest, reparse everything")
    build.add_argument("--include-drafts", action="store_true", default=None, help="Keep draft documents")

    tags = sub.add_parser("list-tags", help="List tags of an existing manifest")
    tags.add_argument("--manifest", type=Path, default=None, help="Manifest path")
    tags.add_argument("--tag", type=str, default=None, help="Print the ordered slugs of one tag")
    tags.add_argument("--json", action="store_true", help="Print JSON")
    return parser


def _pick(value, default):
    return default if value is None else value


async def _build(args: argparse.Namespace, settings: Settings) -> int:
    repository = JsonManifestRepository(
        manifest_path=_pick(args.manifest, settings.manifest_path),
        report_path=_pick(args.report, settings.report_path),
    )
    previous = None
    if not args.full:
        try:
            previous = repository.load()
        except ManifestError as exc:
            logger.warning("Ignoring previous manifest, doing a full build: %s", exc)

    use_case = BuildManifestUseCase(
        unit_of_work_factory=create_uow_factory(),
        scanner=FilesystemScanner(),
        loader=FrontMatterDocumentLoader(PathSlugDeriver()),
    )
    result = await use_case.execute(
        BuildInput(
            root=_pick(args.root, settings.content_root),
            previous=previous,
            extensions=tuple(settings.document_extensions),
            max_workers=_pick(args.workers, settings.max_workers),
            include_drafts=_pick(args.include_drafts, settings.include_drafts),
        )
    )
    repository.save(result.manifest)
    repository.save_report(result.report)

    print(
        f"{len(result.manifest.documents)} documents, {len(result.manifest.tags)} tags, "
        f"{len(result.report)} failed -> {repository.manifest_path}"
    )
    for entry in result.report.entries:
        print(f"  {entry.source_path}: {entry.error_kind} {entry.detail}", file=sys.stderr)

    if result.report and _pick(args.strict, settings.strict):
        return EXIT_REPORT_NOT_EMPTY
    return EXIT_OK


async def _list_tags(args: argparse.Namespace, settings: Settings) -> int:
    repository = JsonManifestRepository(manifest_path=_pick(args.manifest, settings.manifest_path))
    if args.tag is not None:
        slugs = await QueryTagUseCase(repository).execute(args.tag)
        if args.json:
            print(json.dumps({"tag": args.tag, "slugs": slugs}, ensure_ascii=False))
        else:
            for slug in slugs:
                print(slug)
        return EXIT_OK

    summaries = await ListTagsUseCase(repository).execute()
    if args.json:
        print(json.dumps({s.tag: s.count for s in summaries}, ensure_ascii=False, sort_keys=True))
    else:
        for summary in summaries:
            print(f"{summary.tag}\t{summary.count}")
    return EXIT_OK


_COMMANDS = {
    "build": _build,
    "list-tags": _list_tags,
}


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Parse argv, run the command, return the process exit code."""
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_COMMANDS[args.command](args, settings))
    except DocManifestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FATAL
