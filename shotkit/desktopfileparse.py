"""Reading of application entries from ``.desktop`` files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_ICON = "application-x-executable"


class DesktopFileError(ValueError):
    """The file holds no usable application entry."""


@dataclass(eq=False)
class DesktopAppData:
    """An application entry; two entries are equal when their names are."""

    name: str = ""
    description: str = ""
    exec: str = ""
    icon: str = DEFAULT_ICON
    categories: list[str] = field(default_factory=list)
    show_in_terminal: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DesktopAppData):
            return NotImplemented
        return self.name == other.name

    __hash__ = None  # type: ignore[assignment]


def _system_locale_name() -> str:
    for variable in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(variable, "")
        name = value.split(".")[0].split("@")[0]
        if name and name not in ("C", "POSIX"):
            return name
    return "C"


def _value_of(line: str) -> str:
    return line[line.find("=") + 1 :].strip()


class DesktopFileParser:
    """Collects applications from desktop entry files."""

    def __init__(self, locale: str | None = None) -> None:
        name = locale if locale is not None else _system_locale_name()
        short = name[:2]
        self._locale_name = f"Name[{name}]"
        self._locale_description = f"Comment[{name}]"
        self._locale_name_short = f"Name[{short}]"
        self._locale_description_short = f"Comment[{short}]"
        self.apps: list[DesktopAppData] = []

    def parse_desktop_file(self, file_name: str | os.PathLike[str]) -> DesktopAppData:
        """Parse one file; raise DesktopFileError if it is not a usable application."""
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            lines = iter(handle.read().splitlines())

        for line in lines:
            if line == "[Desktop Entry]":
                break

        app = DesktopAppData()
        name_locale_set = False
        description_locale_set = False
        is_application = False
        for line in lines:
            if line.startswith("Icon"):
                app.icon = _value_of(line) or DEFAULT_ICON
            elif not name_locale_set and line.startswith("Name"):
                if line.startswith(self._locale_name) or line.startswith(
                    self._locale_name_short
                ):
                    app.name = _value_of(line)
                    name_locale_set = True
                elif line.startswith("Name="):
                    app.name = _value_of(line)
            elif not description_locale_set and line.startswith("Comment"):
                if line.startswith(self._locale_description) or line.startswith(
                    self._locale_description_short
                ):
                    app.description = _value_of(line)
                    description_locale_set = True
                elif line.startswith("Comment="):
                    app.description = _value_of(line)
            elif line.startswith("Exec"):
                if "%" not in line:
                    raise DesktopFileError(f"{file_name}: Exec has no field code")
                app.exec = _value_of(line)
            elif line.startswith("Type"):
                if "Application" in line:
                    is_application = True
            elif line.startswith("Categories"):
                app.categories = line[line.find("=") + 1 :].split(";")
            elif line == "NoDisplay=true":
                raise DesktopFileError(f"{file_name}: entry is hidden")
            elif line == "Terminal=true":
                app.show_in_terminal = True
            elif line.startswith("["):
                break

        if not app.exec or not app.name or not is_application:
            raise DesktopFileError(f"{file_name}: not an application entry")
        return app

    def process_directory(self, directory: str | os.PathLike[str]) -> int:
        """Add every valid application in *directory*; return how many were added."""
        files = sorted(
            (
                entry
                for entry in Path(directory).iterdir()
                if entry.is_file() and not entry.name.startswith(".")
            ),
            key=lambda entry: entry.name.lower(),
        )
        before = len(self.apps)
        for entry in files:
            try:
                self.apps.append(self.parse_desktop_file(entry.absolute()))
            except (OSError, DesktopFileError):
                continue
        return len(self.apps) - before

    def apps_by_category(self, category: str) -> list[DesktopAppData]:
        """Return the collected applications listed under *category*."""
        return [app for app in self.apps if category in app.categories]

    def apps_by_categories(self, categories: list[str]) -> dict[str, list[DesktopAppData]]:
        """Group the collected applications by each of *categories*, keys sorted."""
        grouped: dict[str, list[DesktopAppData]] = {}
        for app in self.apps:
            for category in categories:
                if category in app.categories:
                    grouped.setdefault(category, []).append(app)
        return {key: grouped[key] for key in sorted(grouped)}