"""
pentpdf - Split PDF files into manageable, page-bounded parts.

Quick Start:
    >>> from pentpdf import RunConfig, split_document
    >>> result = split_document(RunConfig.create('book.pdf', 'parts/', max_pages=50))
    >>> result.files_created
    [PosixPath('parts/output_part1.pdf'), ...]

For CLI usage, use the 'pentpdf' command after installation.
"""

__version__ = "0.1.0"

from pentpdf.backends import PDFBackend, PypdfBackend
from pentpdf.exceptions import (
    PentPDFError,
    InputNotFound,
    InputNotAFile,
    OutputDirCreateFailed,
    InvalidDocument,
    InvalidPageLimit,
    PageDeletionFailed,
    OutputWriteFailed,
)
from pentpdf.planner import needs_split, plan_chunks
from pentpdf.resolver import resolve_inputs
from pentpdf.splitter import split_document
from pentpdf.types import Chunk, RunConfig, SplitResult

__all__ = [
    # Entry points
    "split_document",
    "plan_chunks",
    "needs_split",
    "resolve_inputs",
    # Data types
    "Chunk",
    "RunConfig",
    "SplitResult",
    # Backends
    "PDFBackend",
    "PypdfBackend",
    # Exceptions
    "PentPDFError",
    "InputNotFound",
    "InputNotAFile",
    "OutputDirCreateFailed",
    "InvalidDocument",
    "InvalidPageLimit",
    "PageDeletionFailed",
    "OutputWriteFailed",
    # Version info
    "__version__",
]
