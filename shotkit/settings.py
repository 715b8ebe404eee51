"""Persistent key/value settings kept in an INI file, with grouped keys."""

from __future__ import annotations

import configparser
import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path
from typing import Union

SettingValue = Union[str, list[str]]

GENERAL_SECTION = "General"
SHORTCUTS_GROUP = "Shortcuts"
DEFAULT_FILE_NAME = "shotkit.ini"

_LIST_MARKER = "@List"
_STRING_MARKER = "@Str"
_RESERVED_SHORTCUTS = frozenset({"esc", "escape", "backspace"})


class ShortcutError(ValueError):
    """A shortcut could not be assigned."""


def default_settings_path() -> Path:
    """Location of the settings file in the user's configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    return Path(base) / "shotkit" / DEFAULT_FILE_NAME


def _normalize(value: object) -> SettingValue:
    """Bring a value into the form it has after being written and read back."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_normalize_item(item) for item in value]
    return str(value)


def _normalize_item(item: object) -> str:
    if isinstance(item, bool):
        return "true" if item else "false"
    return "" if item is None else str(item)


def _encode(value: SettingValue) -> str:
    if isinstance(value, list):
        return _LIST_MARKER + json.dumps(value)
    needs_escape = (
        value != value.strip()
        or "\n" in value
        or "\r" in value
        or value.startswith("@")
    )
    return _STRING_MARKER + json.dumps(value) if needs_escape else value


def _decode(raw: str) -> SettingValue:
    if raw.startswith(_LIST_MARKER):
        return [str(item) for item in json.loads(raw[len(_LIST_MARKER):])]
    if raw.startswith(_STRING_MARKER):
        return str(json.loads(raw[len(_STRING_MARKER):]))
    return raw


def _join(group: str, key: str) -> str:
    return f"{group}/{key}" if group else key


class SettingsStore:
    """Settings backed by an INI file; every change is written straight away.

    Values are kept the way the file holds them: booleans become ``"true"``
    or ``"false"``, numbers become strings, and sequences become lists of
    strings.  Keys inside a group are addressed as ``"group/key"``.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self._path = Path(path) if path is not None else default_settings_path()
        self._values: dict[str, SettingValue] = {}
        self._load()

    # -- persistence -------------------------------------------------------

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None, default_section="@Defaults", strict=False
        )
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    def _load(self) -> None:
        if not self._path.is_file():
            return
        parser = self._parser()
        parser.read(self._path, encoding="utf-8")
        for section in parser.sections():
            group = "" if section == GENERAL_SECTION else section
            for key, raw in parser.items(section, raw=True):
                self._values[_join(group, key)] = _decode(raw)

    def sync(self) -> None:
        """Write all settings to the file."""
        parser = self._parser()
        for full_key, value in self._values.items():
            group, sep, key = full_key.rpartition("/")
            section = group if sep else GENERAL_SECTION
            if not parser.has_section(section):
                parser.add_section(section)
            parser.set(section, key, _encode(value))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        handle, temp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=".settings-", suffix=".tmp"
        )
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as stream:
                parser.write(stream)
            os.replace(temp_name, self._path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise

    # -- plain keys ----------------------------------------------------------

    def contains(self, key: str) -> bool:
        """Tell whether *key* has a value."""
        return key in self._values

    def get(self, key: str, default: object = None) -> SettingValue | object:
        """Return the value of *key*, or *default* when it is not set."""
        return self._values.get(key, default)

    def set(self, key: str, value: object) -> None:
        """Store *value* under *key* and write the file."""
        if not key or key.startswith("/") or key.endswith("/"):
            raise ValueError(f"invalid settings key: {key!r}")
        self._values[key] = _normalize(value)
        self.sync()

    def remove(self, key: str) -> None:
        """Remove *key* and every key inside the group of that name."""
        prefix = key + "/"
        doomed = [k for k in self._values if k == key or k.startswith(prefix)]
        for k in doomed:
            del self._values[k]
        if doomed:
            self.sync()

    def all_keys(self) -> list[str]:
        """Every key that holds a value, group keys as ``group/key``."""
        return list(self._values)

    def file_name(self) -> str:
        """Path of the file the settings are kept in."""
        return str(self._path)

    # -- grouped keys --------------------------------------------------------

    def set_value(self, group: str, key: str, value: object) -> None:
        """Store *value* under *key* in *group*; an empty group is the top level."""
        self.set(_join(group, key), value)

    def value(self, group: str, key: str) -> SettingValue | None:
        """Return the value of *key* in *group*, or None when it is not set."""
        return self._values.get(_join(group, key))

    def _group_keys(self, group: str) -> Iterable[str]:
        prefix = group + "/"
        return [k[len(prefix):] for k in self._values if k.startswith(prefix)]

    # -- shortcuts -----------------------------------------------------------

    def set_shortcut(self, shortcut_name: str, shortcut_value: str) -> None:
        """Assign a key sequence to a shortcut.

        An empty value clears the shortcut.  Reserved keys (Escape and
        Backspace) raise ShortcutError.  A value already held by a shortcut
        clears *shortcut_name* and raises ShortcutError.
        """
        if not shortcut_value:
            self.set_value(SHORTCUTS_GROUP, shortcut_name, "")
            return
        if shortcut_value.strip().lower() in _RESERVED_SHORTCUTS:
            raise ShortcutError(f"{shortcut_value!r} is a reserved shortcut")

        item = "Return" if shortcut_value == "Enter" else shortcut_value
        for current in self._group_keys(SHORTCUTS_GROUP):
            if self.value(SHORTCUTS_GROUP, current) == item:
                self.set_value(SHORTCUTS_GROUP, shortcut_name, "")
                raise ShortcutError(f"{item!r} is already assigned to {current!r}")
        self.set_value(SHORTCUTS_GROUP, shortcut_name, item)

    def shortcut(self, shortcut_name: str) -> str | None:
        """Return the key sequence of a shortcut, or None when it was never set."""
        found = self.value(SHORTCUTS_GROUP, shortcut_name)
        if found is None:
            return None
        return ", ".join(found) if isinstance(found, list) else found

    # -- reset ---------------------------------------------------------------

    def reset(self) -> None:
        """Remove every setting except the shortcuts, then write the file."""
        prefix = SHORTCUTS_GROUP + "/"
        self._values = {k: v for k, v in self._values.items() if k.startswith(prefix)}
        self.sync()