"""Scratch file allocation for editing sessions."""

from __future__ import annotations

import logging
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .errors import ScratchFileError

_logger = logging.getLogger(__name__)

SCRATCH_NAME_FORMAT = "doc-%y%m%d%H%M%S"


@dataclass(frozen=True)
class ScratchFile:
    """A per-run file path the editor writes and the clipboard helper reads."""

    path: Path

    def read_bytes(self) -> bytes:
        """Return the file contents, or empty bytes if the editor never wrote it."""

        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""

    def is_empty(self) -> bool:
        return not self.read_bytes()


def scratch_name(now: datetime) -> str:
    return now.strftime(SCRATCH_NAME_FORMAT)


def _ensure_dir(directory: Path) -> None:
    try:
        directory.mkdir(exist_ok=True)
    except OSError as exc:
        raise ScratchFileError(
            f"Could not create temporary directory: {directory}"
        ) from exc


def new_scratch_file(
    dir_name: str,
    *,
    root: Path | str | None = None,
    now: datetime | None = None,
) -> ScratchFile:
    """Return a fresh scratch file path under ``root/dir_name``.

    The directory is created on first use. The file itself is not created; a
    stale file left by a run within the same second is removed first.
    """

    base = Path(root) if root is not None else Path(tempfile.gettempdir())
    directory = (base / dir_name).absolute()
    _ensure_dir(directory)

    path = directory / scratch_name(now or datetime.now())
    if path.exists():
        _logger.debug("Removing stale scratch file %s", path)
        try:
            path.unlink()
        except OSError as exc:
            raise ScratchFileError(f"Could not remove stale scratch file: {path}") from exc

    return ScratchFile(path=path)


__all__ = ["ScratchFile", "new_scratch_file", "scratch_name", "SCRATCH_NAME_FORMAT"]
