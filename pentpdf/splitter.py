"""Split a PDF into sequential, page-bounded parts."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Protocol

from .backends import PDFBackend, PypdfBackend
from .exceptions import OutputWriteFailed, PageDeletionFailed, PentPDFError
from .logging_utils import get_logger
from .planner import needs_split, plan_chunks, validate_page_limit
from .resolver import resolve_inputs
from .types import Chunk, RunConfig, SplitResult

LOGGER = get_logger("splitter")


class SplitReporter(Protocol):
    """Receives progress notifications while a run is in flight."""

    def loaded(self, source: Path, total_pages: int) -> None: ...

    def no_split_needed(self, total_pages: int, max_pages: int) -> None: ...

    def planned(self, chunks: List[Chunk], max_pages: int) -> None: ...

    def chunk_started(self, part_index: int, chunk: Chunk, destination: Path) -> None: ...

    def chunk_done(self, part_index: int, chunk: Chunk, destination: Path) -> None: ...

    def finished(self, result: SplitResult, output_dir: Path) -> None: ...


class NullReporter:
    """Reporter that ignores every notification."""

    def loaded(self, source: Path, total_pages: int) -> None:
        pass

    def no_split_needed(self, total_pages: int, max_pages: int) -> None:
        pass

    def planned(self, chunks: List[Chunk], max_pages: int) -> None:
        pass

    def chunk_started(self, part_index: int, chunk: Chunk, destination: Path) -> None:
        pass

    def chunk_done(self, part_index: int, chunk: Chunk, destination: Path) -> None:
        pass

    def finished(self, result: SplitResult, output_dir: Path) -> None:
        pass


def materialize_chunk(
    backend: PDFBackend,
    source: Path,
    chunk: Chunk,
    total_pages: int,
    destination: Path,
) -> Path:
    """Write the pages of ``chunk`` from ``source`` to ``destination``.

    The source is reloaded for every call, so no chunk ever sees the pages
    removed for another one.
    """

    document = backend.load(source)

    pages_to_remove = chunk.complement(total_pages)
    if pages_to_remove:
        try:
            document.delete_pages(pages_to_remove)
        except PentPDFError:
            raise
        except Exception as exc:
            raise PageDeletionFailed(
                f"Failed to delete {len(pages_to_remove)} page(s) outside {chunk.label} "
                f"of {source}. Error: {exc}",
                path=source,
            ) from exc
        LOGGER.debug("Removed %s page(s) outside %s", len(pages_to_remove), chunk.label)

    try:
        document.save(destination)
    except PentPDFError:
        raise
    except Exception as exc:
        raise OutputWriteFailed(
            f"Failed to write output file: {destination}. Error: {exc}", path=destination
        ) from exc

    LOGGER.info("Wrote %s (%s) to %s", source.name, chunk.label, destination)
    return destination


def split_document(
    config: RunConfig,
    *,
    backend: Optional[PDFBackend] = None,
    reporter: Optional[SplitReporter] = None,
) -> SplitResult:
    """Split ``config.input_path`` into parts of at most ``config.max_pages``.

    Parts are written to ``config.output_dir`` as ``{prefix}_part{N}.pdf`` in
    page order. Nothing is written when the document already fits in a single
    part. The first failure aborts the run and parts written before it are
    left in place.

    Raises:
        InvalidPageLimit: If ``config.max_pages`` is below 1.
        InputNotFound, InputNotAFile: If the source path is unusable.
        OutputDirCreateFailed: If the output directory cannot be created.
        InvalidDocument: If the source is not a loadable PDF.
        PageDeletionFailed, OutputWriteFailed: If a part cannot be produced.
    """

    backend = backend or PypdfBackend()
    reporter = reporter or NullReporter()

    validate_page_limit(config.max_pages)
    source, output_dir = resolve_inputs(config)

    total_pages = backend.load(source).page_count
    LOGGER.info("Loaded %s (%s pages)", source, total_pages)
    reporter.loaded(source, total_pages)

    result = SplitResult(source_file=source, total_pages=total_pages)

    if not needs_split(total_pages, config.max_pages):
        LOGGER.info("No split needed for %s", source)
        result.split_needed = False
        reporter.no_split_needed(total_pages, config.max_pages)
        return result

    result.chunks = plan_chunks(total_pages, config.max_pages)
    reporter.planned(result.chunks, config.max_pages)

    for part_index, chunk in enumerate(result.chunks, start=1):
        destination = config.part_path(part_index)
        reporter.chunk_started(part_index, chunk, destination)
        materialize_chunk(backend, source, chunk, total_pages, destination)
        result.files_created.append(destination)
        reporter.chunk_done(part_index, chunk, destination)

    reporter.finished(result, output_dir)
    return result


__all__ = ["NullReporter", "SplitReporter", "materialize_chunk", "split_document"]
