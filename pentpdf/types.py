"""
Type definitions and dataclasses for pentpdf.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

DEFAULT_MAX_PAGES = 100
DEFAULT_PREFIX = "output"


@dataclass(frozen=True)
class Chunk:
    """
    Contiguous window of source pages written to one output file.

    Attributes:
        start: Zero-based index of the first page (inclusive)
        end: Zero-based index one past the last page (exclusive)
    """
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start

    @property
    def first_page(self) -> int:
        """One-based number of the first page."""
        return self.start + 1

    @property
    def last_page(self) -> int:
        """One-based number of the last page."""
        return self.end

    @property
    def label(self) -> str:
        return f"pages {self.first_page}-{self.last_page}"

    def complement(self, total_pages: int) -> List[int]:
        """Zero-based indices of every source page outside this chunk."""
        return list(range(0, self.start)) + list(range(self.end, total_pages))


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable inputs of a single split run.

    Attributes:
        input_path: Source PDF document
        output_dir: Directory receiving the generated parts
        max_pages: Maximum number of pages per part
        prefix: Filename prefix of the generated parts
    """
    input_path: Path
    output_dir: Path = Path(".")
    max_pages: int = DEFAULT_MAX_PAGES
    prefix: str = DEFAULT_PREFIX

    @classmethod
    def create(
        cls,
        input_path: Union[str, Path],
        output_dir: Union[str, Path] = ".",
        max_pages: int = DEFAULT_MAX_PAGES,
        prefix: str = DEFAULT_PREFIX,
    ) -> "RunConfig":
        return cls(
            input_path=Path(input_path),
            output_dir=Path(output_dir),
            max_pages=max_pages,
            prefix=prefix,
        )

    def part_filename(self, part_index: int) -> str:
        return f"{self.prefix}_part{part_index}.pdf"

    def part_path(self, part_index: int) -> Path:
        return self.output_dir / self.part_filename(part_index)


@dataclass
class SplitResult:
    """
    Result of a split run.

    Attributes:
        source_file: Path of the source PDF
        total_pages: Number of pages in the source
        split_needed: False when the source already fits in one part
        chunks: Planned chunks in output order
        files_created: Paths of the written parts, in chunk order
    """
    source_file: Path
    total_pages: int
    split_needed: bool = True
    chunks: List[Chunk] = field(default_factory=list)
    files_created: List[Path] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files_created)

    def __str__(self) -> str:
        """String representation of the result."""
        if not self.split_needed:
            return f"SplitResult(split_needed=False, pages={self.total_pages})"
        return f"SplitResult(pages={self.total_pages}, files={self.total_files})"


__all__ = ["Chunk", "RunConfig", "SplitResult", "DEFAULT_MAX_PAGES", "DEFAULT_PREFIX"]
