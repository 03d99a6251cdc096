"""Backend protocol for PDF operations."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol, Union


class DocumentHandle(Protocol):
    """A loaded document that can report, drop and persist its pages."""

    @property
    def page_count(self) -> int:
        """Number of pages currently in the document."""

    def delete_pages(self, indices: Iterable[int]) -> None:
        """Remove the pages at the given zero-based ``indices`` in place."""

    def save(self, destination: Union[str, Path]) -> None:
        """Serialize the current state of the document to ``destination``."""


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF loading."""

    def load(self, pdf_path: Union[str, Path]) -> DocumentHandle:
        """Load a PDF file and return a fresh, unmodified document handle."""
