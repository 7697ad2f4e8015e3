"""Command-line interface entry point for vim-anywhere."""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Sequence, Tuple

from .config import Settings, get_settings
from .errors import VimAnywhereError
from .logging_config import configure_logging
from .session import run_session


def _print_help() -> None:
    print("✏️  vim-anywhere - Edit in vim, paste anywhere")
    print("\nUsage:")
    print("  vim-anywhere [options]")
    print("\nOptions:")
    print("  -v, --verbose       - Log debug output to stderr")
    print("  --skip-empty        - Leave the clipboard alone if nothing was written")
    print("  help, -h, --help    - Show this help message")
    print("\nEnvironment:")
    print("  VIM_ANYWHERE_TERM   - Terminal template, %s marks the vim command")
    print("                        (default: xterm -e \"%s\")")
    print("  VIM_ANYWHERE_EDITOR - Editor program (default: vim)")


def _extract_flag(args: Sequence[str], *flags: str) -> Tuple[bool, list[str]]:
    present = any(flag in args for flag in flags)
    remaining = [arg for arg in args if arg not in flags]
    return present, remaining


def _report_error(exc: VimAnywhereError) -> None:
    print(f"❌ {exc.message}")
    for line in exc.hint:
        print(f"\t{line}")


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]

    if args and args[0] in {"help", "-h", "--help"}:
        _print_help()
        return 0

    verbose, args = _extract_flag(args, "-v", "--verbose")
    skip_empty, args = _extract_flag(args, "--skip-empty")

    if args:
        print(f"Unknown argument: {args[0]}")
        print("Use 'vim-anywhere help' to see available options")
        return 1

    settings: Settings = get_settings()
    if skip_empty:
        settings = dataclasses.replace(settings, skip_empty=True)

    configure_logging(logging.DEBUG if verbose else settings.log_level)

    try:
        run_session(settings)
    except VimAnywhereError as exc:
        logging.getLogger(__name__).debug("Session aborted", exc_info=True)
        _report_error(exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
