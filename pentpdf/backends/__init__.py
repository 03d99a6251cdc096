"""Backend abstractions for pentpdf."""

from .base import DocumentHandle, PDFBackend
from .pypdf_backend import PypdfBackend, PypdfDocument

__all__ = [
    "DocumentHandle",
    "PDFBackend",
    "PypdfBackend",
    "PypdfDocument",
]
