"""Detection of the desktop session from the environment."""

from __future__ import annotations

import enum
import os
from collections.abc import Mapping


class WindowManager(enum.Enum):
    GNOME = "gnome"
    KDE = "kde"
    OTHER = "other"
    SWAY = "sway"


class DesktopInfo:
    """Snapshot of the session variables that identify the desktop."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ
        self.xdg_current_desktop = env.get("XDG_CURRENT_DESKTOP", "")
        self.xdg_session_type = env.get("XDG_SESSION_TYPE", "")
        self.wayland_display = env.get("WAYLAND_DISPLAY", "")
        self.kde_full_session = env.get("KDE_FULL_SESSION", "")
        self.gnome_desktop_session_id = env.get("GNOME_DESKTOP_SESSION_ID", "")
        self.desktop_session = env.get("DESKTOP_SESSION", "")

    def wayland_detected(self) -> bool:
        """Tell whether the session runs on Wayland."""
        return (
            self.xdg_session_type == "wayland"
            or "wayland" in self.wayland_display.lower()
        )

    def window_manager(self) -> WindowManager:
        """Identify the running desktop environment."""
        for desktop in self.xdg_current_desktop.split(":"):
            if "gnome" in desktop.lower():
                return WindowManager.GNOME
            if "sway" in desktop.lower():
                return WindowManager.SWAY
            if "kde-plasma" in desktop:
                return WindowManager.KDE
        if self.gnome_desktop_session_id:
            return WindowManager.GNOME
        if self.kde_full_session:
            return WindowManager.KDE
        return WindowManager.OTHER