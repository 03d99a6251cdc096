"""Input and output path validation for split runs."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from .exceptions import InputNotAFile, InputNotFound, OutputDirCreateFailed
from .logging_utils import get_logger
from .types import RunConfig

LOGGER = get_logger("resolver")


def ensure_output_dir(output_dir: Path) -> Path:
    """Create ``output_dir`` and any missing parents if needed."""

    if output_dir.exists() and not output_dir.is_dir():
        raise OutputDirCreateFailed(
            f"Output path exists but is not a directory: {output_dir}", path=output_dir
        )

    if not output_dir.exists():
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirCreateFailed(
                f"Failed to create output directory: {output_dir}. Error: {exc}", path=output_dir
            ) from exc
        LOGGER.info("Created output directory %s", output_dir)

    return output_dir


def resolve_inputs(config: RunConfig) -> Tuple[Path, Path]:
    """Validate the source path and make sure the output directory exists.

    The source is checked first so a bad input never leaves a new directory
    behind.
    """

    input_path = config.input_path
    if not input_path.exists():
        raise InputNotFound(path=input_path)
    if not input_path.is_file():
        raise InputNotAFile(path=input_path)

    output_dir = ensure_output_dir(config.output_dir)
    return input_path, output_dir


__all__ = ["ensure_output_dir", "resolve_inputs"]
