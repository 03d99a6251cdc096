from __future__ import annotations

from pathlib import Path

import pytest

from pentpdf.exceptions import InputNotAFile, InputNotFound, OutputDirCreateFailed
from pentpdf.resolver import ensure_output_dir, resolve_inputs
from pentpdf.types import RunConfig


def test_resolve_creates_nested_output_dir(sample_pdf: Path, tmp_path: Path) -> None:
    output_dir = tmp_path / "a" / "b" / "c"

    source, resolved = resolve_inputs(RunConfig.create(sample_pdf, output_dir))

    assert source == sample_pdf
    assert resolved == output_dir
    assert output_dir.is_dir()


def test_resolve_accepts_existing_output_dir(sample_pdf: Path, tmp_path: Path) -> None:
    _, resolved = resolve_inputs(RunConfig.create(sample_pdf, tmp_path))
    assert resolved == tmp_path


def test_missing_input_creates_nothing(tmp_path: Path) -> None:
    output_dir = tmp_path / "out"
    config = RunConfig.create(tmp_path / "missing.pdf", output_dir)

    with pytest.raises(InputNotFound) as excinfo:
        resolve_inputs(config)

    assert "missing.pdf" in str(excinfo.value)
    assert excinfo.value.path == tmp_path / "missing.pdf"
    assert not output_dir.exists()


def test_directory_input_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(InputNotAFile):
        resolve_inputs(RunConfig.create(tmp_path, tmp_path / "out"))


def test_output_dir_under_a_file_fails(sample_pdf: Path, tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(OutputDirCreateFailed) as excinfo:
        resolve_inputs(RunConfig.create(sample_pdf, blocker / "out"))

    assert str(blocker / "out") in str(excinfo.value)


def test_output_path_that_is_a_file_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(OutputDirCreateFailed):
        ensure_output_dir(blocker)
