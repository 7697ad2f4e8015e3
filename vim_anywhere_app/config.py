"""Configuration helpers for the vim-anywhere CLI."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = PROJECT_ROOT / ".env"

# Load .env from the project root (if present) regardless of current working dir
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    load_dotenv()

SCRATCH_DIR_NAME = "vim-anywhere"
DEFAULT_EDITOR = "vim"
DEFAULT_CLIPBOARD_HELPER = "xclip"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    terminal_template: Optional[str]
    editor: str
    clipboard_helper: str
    scratch_root: Path
    scratch_dir_name: str = SCRATCH_DIR_NAME
    skip_empty: bool = False
    log_level: str = "WARNING"

    @property
    def scratch_dir(self) -> Path:
        return self.scratch_root / self.scratch_dir_name


def _parse_flag(raw_value: str | None) -> bool:
    if not raw_value:
        return False
    return raw_value.strip().lower() in _TRUTHY


def _resolve_scratch_root(raw_value: str | None) -> Path:
    if not raw_value:
        return Path(tempfile.gettempdir())
    return Path(raw_value).expanduser().resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(
        # Unset and empty differ: an empty template is a user error, not "use the default".
        terminal_template=os.environ.get("VIM_ANYWHERE_TERM"),
        editor=os.getenv("VIM_ANYWHERE_EDITOR") or DEFAULT_EDITOR,
        clipboard_helper=DEFAULT_CLIPBOARD_HELPER,
        scratch_root=_resolve_scratch_root(os.getenv("VIM_ANYWHERE_TMPDIR")),
        skip_empty=_parse_flag(os.getenv("VIM_ANYWHERE_SKIP_EMPTY")),
        log_level=os.getenv("VIM_ANYWHERE_LOG_LEVEL", "WARNING").upper(),
    )


__all__ = ["Settings", "get_settings", "PROJECT_ROOT", "SCRATCH_DIR_NAME"]
