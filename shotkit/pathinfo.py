"""Locations of icons and translations."""

from __future__ import annotations

import os
import sys

_DEFAULT_PREFIX = "/usr/local"


def white_icon_path() -> str:
    """Resource prefix of the white icon set."""
    return ":/img/material/white/"


def black_icon_path() -> str:
    """Resource prefix of the black icon set."""
    return ":/img/material/black/"


def translations_paths(app_dir: str | None = None, prefix: str = _DEFAULT_PREFIX) -> list[str]:
    """Directories searched for translation files, in order."""
    if app_dir is None:
        app_dir = os.path.dirname(os.path.abspath(sys.argv[0] or "."))
    local_path = os.path.abspath(app_dir) + "/translations"
    if sys.platform.startswith("win"):
        return [local_path.replace("/", "\\")]
    return [
        prefix + "/share/shotkit/translations",
        local_path,
        "/usr/share/shotkit/translations",
        "/usr/local/share/shotkit/translations",
    ]