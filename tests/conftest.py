from __future__ import annotations

from pathlib import Path
from typing import Callable, List
import os
import sys

import pytest
from pypdf import PdfReader, PdfWriter
from pypdf.generic import DecodedStreamObject, NameObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

BASE_WIDTH = 100


def _page_widths(path: Path) -> List[int]:
    reader = PdfReader(str(path))
    return [round(float(page.mediabox.width)) for page in reader.pages]


@pytest.fixture()
def page_widths() -> Callable[[Path], List[int]]:
    """Widths of every page in a PDF; test pages are told apart by width."""
    return _page_widths


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(num_pages: int, filename: str = "source.pdf", title: str | None = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for index in range(num_pages):
            writer.add_blank_page(width=BASE_WIDTH + index, height=200)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def heavy_pdf(tmp_path: Path) -> Path:
    """Ten pages, each carrying its own ~50 KB content stream."""
    path = tmp_path / "heavy.pdf"
    writer = PdfWriter()
    for index in range(10):
        page = writer.add_blank_page(width=BASE_WIDTH + index, height=200)
        stream = DecodedStreamObject()
        stream.set_data(b"% " + os.urandom(25_000).hex().encode("ascii") + b"\n")
        page[NameObject("/Contents")] = writer._add_object(stream)
    with path.open("wb") as handle:
        writer.write(handle)
    return path


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory(10, "sample.pdf", title="Sample")


@pytest.fixture()
def invalid_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "broken.pdf"
    path.write_text("this is not a pdf document")
    return path
