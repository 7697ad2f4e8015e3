"""Exception types shared across vim-anywhere components."""

from __future__ import annotations

from typing import Sequence


TEMPLATE_HINT = (
    "Set VIM_ANYWHERE_TERM to your preferred terminal",
    "Use %s in place of the vim command to execute",
    "Ex. 'terminator -e \"%s\"'",
)


class VimAnywhereError(RuntimeError):
    """Base error carrying a user-facing message and optional remediation lines."""

    def __init__(self, message: str, hint: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hint = tuple(hint)


class HelperNotFoundError(VimAnywhereError):
    """Raised when the clipboard helper is not on the search path."""


class TemplateError(VimAnywhereError):
    """Raised when the terminal template cannot be tokenized or lacks ``%s``."""


class TerminalLaunchError(VimAnywhereError):
    """Raised when the terminal process cannot be spawned."""


class ClipboardError(VimAnywhereError):
    """Raised when the clipboard helper process cannot be spawned."""


class ScratchFileError(VimAnywhereError):
    """Raised when the scratch directory or file cannot be prepared."""


__all__ = [
    "TEMPLATE_HINT",
    "VimAnywhereError",
    "HelperNotFoundError",
    "TemplateError",
    "TerminalLaunchError",
    "ClipboardError",
    "ScratchFileError",
]
