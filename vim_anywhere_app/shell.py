"""Parsing of terminal command templates.

A template is a shell-quoted command line with a single standalone ``%s``
token marking where the editor command goes, e.g. ``terminator -e "%s"``.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import TEMPLATE_HINT, TemplateError

PLACEHOLDER = "%s"
DEFAULT_TERMINAL_TEMPLATE = 'xterm -e "%s"'


@dataclass(frozen=True)
class ResolvedInvocation:
    """A terminal command line with the editor command substituted in."""

    executable: str
    arguments: Tuple[str, ...]

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.arguments]


@dataclass(frozen=True)
class InvocationTemplate:
    """Terminal executable and arguments, minus the placeholder.

    ``placeholder_index`` is the position within ``arguments`` where the
    editor command is inserted.
    """

    executable: str
    arguments: Tuple[str, ...]
    placeholder_index: int

    def resolve(self, command: str) -> ResolvedInvocation:
        argv = list(self.arguments)
        argv.insert(self.placeholder_index, command)
        return ResolvedInvocation(executable=self.executable, arguments=tuple(argv))


def parse_template(raw: str) -> Optional[InvocationTemplate]:
    """Return the parsed template, or None if quoting is malformed or ``%s`` is missing."""

    try:
        tokens = shlex.split(raw, posix=True)
    except ValueError:
        return None
    if not tokens:
        return None

    executable, *arguments = tokens
    try:
        index = arguments.index(PLACEHOLDER)
    except ValueError:
        return None
    del arguments[index]

    return InvocationTemplate(
        executable=executable,
        arguments=tuple(arguments),
        placeholder_index=index,
    )


def resolve_terminal_template(raw: str | None) -> InvocationTemplate:
    """Parse the user's template, falling back to xterm only when none is set."""

    source = DEFAULT_TERMINAL_TEMPLATE if raw is None else raw
    template = parse_template(source)
    if template is None:
        raise TemplateError("Failed to parse shell from environment", TEMPLATE_HINT)
    return template


__all__ = [
    "PLACEHOLDER",
    "DEFAULT_TERMINAL_TEMPLATE",
    "InvocationTemplate",
    "ResolvedInvocation",
    "parse_template",
    "resolve_terminal_template",
]
