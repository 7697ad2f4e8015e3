"""One editing session: edit a scratch file in a terminal, then publish it."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional

from .clipboard import publish_file
from .config import Settings
from .errors import HelperNotFoundError
from .locator import in_path
from .scratch import ScratchFile, new_scratch_file
from .shell import resolve_terminal_template
from .terminal import build_editor_command, launch_terminal

_logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Outcome of a session, mostly useful for callers that want to report on it."""

    scratch: ScratchFile
    terminal_status: int
    helper: Optional[subprocess.Popen] = None

    @property
    def published(self) -> bool:
        return self.helper is not None


def run_session(settings: Settings, *, search_path: str | None = None) -> SessionResult:
    """Run the full edit-then-copy flow described by ``settings``.

    Raises a ``VimAnywhereError`` subclass on any fatal condition.
    """

    helper = settings.clipboard_helper
    if not in_path(helper, search_path):
        raise HelperNotFoundError(f"{helper} not found in path, please install")

    scratch = new_scratch_file(settings.scratch_dir_name, root=settings.scratch_root)
    template = resolve_terminal_template(settings.terminal_template)

    result = launch_terminal(template, build_editor_command(settings.editor, scratch.path))

    if settings.skip_empty and scratch.is_empty():
        _logger.info("Scratch file %s is empty; clipboard left untouched", scratch.path)
        return SessionResult(scratch=scratch, terminal_status=result.returncode)

    process = publish_file(scratch.path, helper)
    return SessionResult(scratch=scratch, terminal_status=result.returncode, helper=process)


__all__ = ["SessionResult", "run_session"]
