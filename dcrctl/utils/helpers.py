"""Path helpers shared by config loading and logging."""

from __future__ import annotations

import os
import sys
from pathlib import Path


def app_data_dir(app_name: str, *, home: Path | None = None) -> Path:
    """Return the per-user data directory the Decred tools use for ``app_name``.

    ~/.<app> on unix, ~/Library/Application Support/<App> on macOS and
    %LOCALAPPDATA%\\<App> on Windows.
    """
    name = app_name.lstrip(".")
    home_dir = home or Path.home()
    if sys.platform.startswith("win"):
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return Path(base) / name.capitalize()
        return home_dir / name.capitalize()
    if sys.platform == "darwin":
        return home_dir / "Library" / "Application Support" / name.capitalize()
    return home_dir / f".{name.lower()}"


def clean_and_expand_path(path: str | None) -> str:
    """Expand environment variables and a leading ~ (or ~user), then normalize."""
    if not path:
        return ""
    expanded = os.path.expanduser(os.path.expandvars(path))
    if expanded.startswith("~"):
        # Unknown user: resolve relative to the working directory.
        expanded = os.path.join(".", expanded.split(os.sep, 1)[1] if os.sep in expanded else "")
    return os.path.normpath(expanded)


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, return it."""
    path.mkdir(parents=True, exist_ok=True)
    return path
