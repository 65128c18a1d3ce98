"""Build manifest use case."""

import asyncio
import logging
import os
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import TypeVar

from docmanifest.application.dto.manifest_dto import (
    BuildInput,
    BuildResult,
    BuildStats,
    ReportEntry,
    ValidationReport,
)
from docmanifest.application.ports import DocumentLoader, SourceFile, SourceScanner
from docmanifest.domain.entities import Document
from docmanifest.domain.exceptions import DocumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class BuildManifestUseCase:
    """Turn a content tree into a manifest and a validation report.

    Reading and parsing run on a worker pool; results are applied to the
    store and tag index one by one in path order, so the outcome does not
    depend on the pool size or on which worker finishes first.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        scanner: SourceScanner,
        loader: DocumentLoader,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._scanner = scanner
        self._loader = loader

    async def execute(self, input_data: BuildInput) -> BuildResult:
        """Run one full pass over the tree. Raises SourceTreeError before indexing anything."""
        root = Path(input_data.root)
        workers = input_data.max_workers
        if workers is None:
            workers = os.cpu_count() or 1

        paths = self._scanner.scan(root, input_data.extensions)
        sources = await _run_pool(
            lambda path: self._scanner.read(root, path), paths, workers
        )

        previous = input_data.previous.by_source_path() if input_data.previous else {}
        reused: dict[PurePosixPath, Document] = {}
        changed: list[SourceFile] = []
        for source in sources:
            prior = previous.get(source.relative_path.as_posix())
            if prior is not None and prior.content_fingerprint == source.fingerprint:
                logger.debug("Reusing unchanged %s", source.relative_path)
                reused[source.relative_path] = prior
            else:
                changed.append(source)

        parsed = await _run_pool(self._attempt, changed, workers)
        outcomes: dict[PurePosixPath, Document | DocumentError] = dict(reused)
        outcomes.update(
            (source.relative_path, outcome) for source, outcome in zip(changed, parsed, strict=True)
        )

        entries: list[ReportEntry] = []
        drafts_skipped = 0
        async with self._uow_factory() as uow:
            for source in sources:
                outcome = outcomes[source.relative_path]
                if isinstance(outcome, Document):
                    if outcome.draft and not input_data.include_drafts:
                        drafts_skipped += 1
                        continue
                    try:
                        uow.insert(outcome)
                        continue
                    except DocumentError as exc:
                        outcome = exc
                entries.append(_report_entry(source.relative_path, outcome))
            manifest = uow.snapshot()

        current = {source.relative_path.as_posix() for source in sources}
        removed = tuple(sorted(set(previous) - current))
        for path in removed:
            logger.info("Dropped %s: source file removed", path)

        stats = BuildStats(
            scanned=len(sources),
            parsed=len(changed),
            reused=len(reused),
            failed=len(entries),
            drafts_skipped=drafts_skipped,
            removed=removed,
        )
        logger.info(
            "Built manifest from %s: %d documents, %d tags, %d failed (%d parsed, %d reused)",
            root,
            len(manifest.documents),
            len(manifest.tags),
            stats.failed,
            stats.parsed,
            stats.reused,
        )
        return BuildResult(
            manifest=manifest,
            report=ValidationReport(entries=tuple(entries)),
            stats=stats,
        )

    def _attempt(self, source: SourceFile) -> Document | DocumentError:
        try:
            return self._loader.load(source)
        except DocumentError as exc:
            return exc


def _report_entry(path: PurePosixPath, error: DocumentError) -> ReportEntry:
    logger.warning("Skipped %s: %s %s", path, error.kind, error.detail)
    return ReportEntry(source_path=path.as_posix(), error_kind=error.kind, detail=error.detail)


async def _run_pool(func: Callable[[T], R], items: Sequence[T], workers: int) -> list[R]:
    """Map func over items on a thread pool; results come back in input order."""
    if not items:
        return []
    loop = asyncio.get_running_loop()
    pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="docmanifest")
    try:
        futures = [loop.run_in_executor(pool, func, item) for item in items]
        return list(await asyncio.gather(*futures))
    finally:
        pool.shutdown(wait=True, cancel_futures=True)
