"""Search-path lookup for helper programs."""

from __future__ import annotations

import os


def in_path(name: str, search_path: str | None = None) -> bool:
    """Return True if ``name`` exists in any directory of the search path.

    ``search_path`` defaults to ``$PATH``; an unset or empty value yields False.
    """

    if search_path is None:
        search_path = os.environ.get("PATH")
    if not search_path:
        return False

    return any(
        os.path.exists(os.path.join(directory, name))
        for directory in search_path.split(os.pathsep)
        if directory
    )


__all__ = ["in_path"]
