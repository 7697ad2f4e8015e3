"""Publishing the scratch file to the system clipboard.

xclip keeps serving the selection until another program claims it, so it has
to outlive this process. The helper is started in its own session with its
standard streams on /dev/null and is never waited on.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

from .errors import ClipboardError

_logger = logging.getLogger(__name__)


def clipboard_command(path: Path | str, helper: str = "xclip") -> List[str]:
    """Return the argv that loads ``path``'s raw bytes into the clipboard selection."""

    return [helper, "-r", "-selection", "c", str(path)]


def publish_file(path: Path | str, helper: str = "xclip") -> subprocess.Popen:
    """Start a detached clipboard helper for ``path`` and return without waiting."""

    argv = clipboard_command(path, helper)
    _logger.debug("Detaching clipboard helper: %s", argv)
    try:
        return subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
            close_fds=True,
        )
    except OSError as exc:
        raise ClipboardError(f"failed to launch {helper}") from exc


__all__ = ["clipboard_command", "publish_file"]
