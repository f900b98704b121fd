"""Discovering and reading Markdown documents."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Sequence, Union

from core.exceptions import DocumentReadError
from utils.logging_config import get_logger

logger = get_logger(__name__)

MARKDOWN_EXTENSIONS = ("md", "MD", "markdown")


def is_markdown(
    path: Union[str, Path], extensions: Sequence[str] = MARKDOWN_EXTENSIONS
) -> bool:
    """Check if the file name carries a Markdown extension (case-sensitive)."""
    suffix = Path(path).suffix
    if not suffix:
        return False
    return suffix[1:] in extensions


def read_markdown(path: Union[str, Path]) -> str:
    """
    Read a Markdown document as UTF-8 text.

    Raises:
        DocumentReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(path, str(exc)) from exc


def iter_markdown_files(
    root: Union[str, Path],
    extensions: Sequence[str] = MARKDOWN_EXTENSIONS,
    follow_symlinks: bool = False,
) -> Iterator[Path]:
    """
    Recursively yield the Markdown files below ``root``.

    Directories and file names are visited in sorted order so repeated runs
    report in the same order. Directories that cannot be listed are skipped.
    """

    def _on_error(exc: OSError) -> None:
        logger.warning("Skipping unreadable directory %s: %s", exc.filename, exc.strerror)

    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_error, followlinks=follow_symlinks
    ):
        dirnames.sort()
        for name in sorted(filenames):
            candidate = Path(dirpath) / name
            if is_markdown(candidate, extensions) and candidate.is_file():
                yield candidate
