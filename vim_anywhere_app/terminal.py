"""Helper utilities for launching the editor inside a terminal window."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from .errors import TEMPLATE_HINT, TerminalLaunchError
from .shell import InvocationTemplate

_logger = logging.getLogger(__name__)


def build_editor_command(editor: str, path: Path | str) -> str:
    """Return the command string the terminal runs: open ``path`` in insert mode."""

    return f"{editor} +star {shlex.quote(str(path))}"


def launch_terminal(template: InvocationTemplate, command: str) -> subprocess.CompletedProcess:
    """Run the terminal with ``command`` substituted in and wait for it to exit."""

    invocation = template.resolve(command)
    _logger.info("Launching terminal: %s", shlex.join(invocation.argv))

    try:
        result = subprocess.run(invocation.argv, capture_output=True, check=False)
    except OSError as exc:
        raise TerminalLaunchError("Failed to spawn shell", TEMPLATE_HINT) from exc

    if result.returncode != 0:
        # The scratch file may still hold partial content; keep going.
        _logger.warning(
            "Terminal %s exited with status %d", invocation.executable, result.returncode
        )
    return result


__all__ = ["build_editor_command", "launch_terminal"]
