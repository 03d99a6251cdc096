"""Page partitioning for split runs."""

from __future__ import annotations

from typing import List

from .exceptions import InvalidPageLimit
from .logging_utils import get_logger
from .types import Chunk

LOGGER = get_logger("planner")


def validate_page_limit(max_pages: int) -> None:
    if max_pages < 1:
        raise InvalidPageLimit(max_pages)


def needs_split(total_pages: int, max_pages: int) -> bool:
    """Return ``True`` when ``total_pages`` does not fit in a single part."""

    validate_page_limit(max_pages)
    return total_pages > max_pages


def plan_chunks(total_pages: int, max_pages: int) -> List[Chunk]:
    """Partition ``[0, total_pages)`` into windows of at most ``max_pages``.

    Args:
        total_pages: Number of pages in the source document.
        max_pages: Maximum number of pages per chunk, at least 1.

    Returns:
        Contiguous, ascending chunks covering every page exactly once. All
        chunks hold ``max_pages`` pages except possibly the last one.

    Raises:
        InvalidPageLimit: If ``max_pages`` is below 1.
        ValueError: If ``total_pages`` is negative.
    """

    validate_page_limit(max_pages)
    if total_pages < 0:
        raise ValueError(f"Total pages must be >= 0, got {total_pages}")

    chunks = [
        Chunk(start=start, end=min(start + max_pages, total_pages))
        for start in range(0, total_pages, max_pages)
    ]
    LOGGER.debug("Planned %s chunk(s) for %s pages (max %s)", len(chunks), total_pages, max_pages)
    return chunks


__all__ = ["needs_split", "plan_chunks", "validate_page_limit"]
