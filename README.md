# shotkit

Building blocks for a screenshot application: an INI-backed settings store
with keyboard shortcut handling, expansion of strftime-style filename
patterns, detection of the running desktop session, and a reader for
`.desktop` application entries. It has no dependencies outside the standard
library.

## Installation

```
pip install shotkit
```

## What is inside

- `shotkit.strfparse`: `format_time_string(specifier, when=None)` expands the
  strftime-style specifiers of a pattern such as `%F_%H-%M` for the given
  `datetime` (the current local time when `when` is omitted). Only a fixed set
  of specifiers, listed by `create_specifier_list()`, is expanded; any other
  `%x` sequence is left as it is. The helpers `split`, `replace_all` and
  `match_specifiers` are public too.
- `shotkit.desktopinfo`: `DesktopInfo` reads the session variables
  (`XDG_CURRENT_DESKTOP`, `XDG_SESSION_TYPE`, `WAYLAND_DISPLAY`,
  `KDE_FULL_SESSION`, `GNOME_DESKTOP_SESSION_ID`, `DESKTOP_SESSION`) from the
  process environment or from a mapping you pass, and reports
  `wayland_detected()` and `window_manager()`, a `WindowManager` member
  (`GNOME`, `KDE`, `SWAY` or `OTHER`).
- `shotkit.desktopfileparse`: `DesktopFileParser` reads the `[Desktop Entry]`
  section of `.desktop` files into `DesktopAppData` records, preferring the
  `Name[...]` and `Comment[...]` lines for the configured locale.
  `parse_desktop_file` raises `DesktopFileError` for hidden entries, entries
  that are not applications, and entries whose `Exec` line has no `%` field
  code. `process_directory` adds every valid file of a directory and returns
  how many were added; `apps_by_category` and `apps_by_categories` select the
  collected applications by category.
- `shotkit.pathinfo`: `white_icon_path()`, `black_icon_path()` and
  `translations_paths(app_dir=None, prefix="/usr/local")`, the directories
  searched for translation files.
- `shotkit.settings`: `SettingsStore`, a key/value store kept in an INI file
  (by default `$XDG_CONFIG_HOME/shotkit/shotkit.ini`). Every change is written
  straight away. Booleans are stored as `"true"`/`"false"`, numbers as strings
  and sequences as lists of strings. Keys inside a group are addressed as
  `group/key`, or with `set_value(group, key, value)` and `value(group, key)`.
  `set_shortcut` refuses Escape and Backspace and values already assigned to
  another shortcut by raising `ShortcutError`; `reset()` removes everything
  except the shortcuts.

## Example

```python
from datetime import datetime

from shotkit.settings import SettingsStore, ShortcutError
from shotkit.strfparse import format_time_string

print(format_time_string("%F_%H-%M", datetime(2021, 3, 4, 5, 6)))
# 2021-03-04_05-06

store = SettingsStore("settings.ini")
store.set("showHelp", False)
print(store.get("showHelp"))          # false

store.set_shortcut("TYPE_PENCIL", "P")
try:
    store.set_shortcut("TYPE_TEXT", "P")
except ShortcutError as error:
    print(error)
print(store.shortcut("TYPE_PENCIL"))  # P
```

## What it does not do

shotkit does not capture the screen, save or copy images, send desktop
notifications or keep a history of uploads. Its settings store holds raw
values only: there are no typed accessors with application defaults (colours,
save path, thumbnail limits and the like), and nothing turns a filename
pattern into a unique file path on disk. There is no command-line program.

## Running the tests

```
pip install "shotkit[test]"
pytest
```