"""pypdf backend implementation for pentpdf."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Optional, Union

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import InvalidDocument
from ..logging_utils import get_logger
from .base import DocumentHandle, PDFBackend

LOGGER = get_logger("backends.pypdf")


class PypdfDocument(DocumentHandle):
    """Document handle backed by a :class:`pypdf.PdfReader`.

    The reader is never modified. The first call to :meth:`delete_pages`
    clones it into a :class:`pypdf.PdfWriter`, which then receives every
    further mutation and is what :meth:`save` serializes.
    """

    def __init__(self, reader: PdfReader, source: Path) -> None:
        self.reader = reader
        self.source = source
        self._writer: Optional[PdfWriter] = None

    @property
    def writer(self) -> PdfWriter:
        if self._writer is None:
            self._writer = PdfWriter(clone_from=self.reader)
        return self._writer

    @property
    def page_count(self) -> int:
        if self._writer is not None:
            return len(self._writer.pages)
        return len(self.reader.pages)

    def delete_pages(self, indices: Iterable[int]) -> None:
        writer = self.writer
        # highest index first so earlier deletions never shift later ones
        for index in sorted(set(indices), reverse=True):
            if index < 0 or index >= len(writer.pages):
                raise IndexError(
                    f"Page index {index} is out of bounds for {len(writer.pages)} pages"
                )
            writer.remove_page(index, clean=True)
        LOGGER.debug("%s now has %s page(s)", self.source, len(writer.pages))

    def save(self, destination: Union[str, Path]) -> None:
        path = Path(destination)
        # removed pages leave their content streams and resources behind
        self.writer.compress_identical_objects(remove_identicals=False, remove_orphans=True)
        with path.open("wb") as handle:
            self.writer.write(handle)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: Union[str, Path]) -> PypdfDocument:
        path = Path(pdf_path)

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidDocument(f"Unable to read PDF file: {path}. Error: {exc}", path=path) from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
            if reader.is_encrypted and not reader.decrypt(""):
                raise InvalidDocument(
                    f"PDF is encrypted and cannot be opened without a password: {path}",
                    path=path,
                )
            num_pages = len(reader.pages)
        except InvalidDocument:
            raise
        except PdfReadError as exc:
            raise InvalidDocument(
                f"Failed to parse PDF file. Is it a valid PDF? {path}. Error: {exc}", path=path
            ) from exc
        except Exception as exc:
            raise InvalidDocument(f"Unexpected error reading PDF: {path}. Error: {exc}", path=path) from exc

        LOGGER.debug("Loaded %s (%s pages, %s bytes)", path, num_pages, len(raw_bytes))
        return PypdfDocument(reader, path)
