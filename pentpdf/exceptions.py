"""
Custom exceptions for pentpdf.

Every failure of a run is terminal: library code raises one of these and the
command line interface turns it into an error line and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class PentPDFError(Exception):
    """Base exception for all pentpdf errors."""

    def __init__(self, message: str = "", *, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else None
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def default_message(self) -> str:
        if self.path is not None:
            return f"An unknown pentpdf error occurred: {self.path}"
        return "An unknown pentpdf error occurred."


class InputNotFound(PentPDFError):
    """Raised when the source document does not exist."""

    @property
    def default_message(self) -> str:
        return f"Input file not found: {self.path}"


class InputNotAFile(PentPDFError):
    """Raised when the source path exists but is not a regular file."""

    @property
    def default_message(self) -> str:
        return f"Input path is not a file: {self.path}"


class OutputDirCreateFailed(PentPDFError):
    """Raised when the output directory cannot be created."""

    @property
    def default_message(self) -> str:
        return f"Failed to create output directory: {self.path}"


class InvalidDocument(PentPDFError):
    """Raised when the source cannot be parsed as a well-formed PDF."""

    @property
    def default_message(self) -> str:
        return f"Failed to parse PDF file. Is it a valid PDF? {self.path}"


class InvalidPageLimit(PentPDFError):
    """Raised when the per-chunk page limit is below one."""

    def __init__(self, limit: int, message: str = "") -> None:
        self.limit = limit
        super().__init__(message)

    @property
    def default_message(self) -> str:
        return f"Page limit must be >= 1, got {self.limit}"


class PageDeletionFailed(PentPDFError):
    """Raised when pages outside a chunk cannot be removed."""

    @property
    def default_message(self) -> str:
        return f"Failed to delete pages from document: {self.path}"


class OutputWriteFailed(PentPDFError):
    """Raised when a chunk cannot be written to disk."""

    @property
    def default_message(self) -> str:
        return f"Failed to write output file: {self.path}"


__all__ = [
    "PentPDFError",
    "InputNotFound",
    "InputNotAFile",
    "OutputDirCreateFailed",
    "InvalidDocument",
    "InvalidPageLimit",
    "PageDeletionFailed",
    "OutputWriteFailed",
]
