from pathlib import Path

import pytest

from shotkit.settings import ShortcutError, SettingsStore


@pytest.fixture
def ini_path(tmp_path):
    return tmp_path / "conf" / "settings.ini"


@pytest.fixture
def store(ini_path):
    return SettingsStore(ini_path)


def test_missing_key(store):
    assert store.contains("savePath") is False
    assert store.get("savePath") is None
    assert store.get("savePath", "fallback") == "fallback"


def test_set_and_get(store):
    store.set("savePath", "/tmp/pictures")
    assert store.contains("savePath")
    assert store.get("savePath") == "/tmp/pictures"


def test_booleans_and_numbers_are_stored_as_text(store):
    store.set("showHelp", False)
    store.set("drawThickness", 5)
    assert store.get("showHelp") == "false"
    assert store.get("drawThickness") == "5"


def test_values_survive_reload(ini_path, store):
    store.set("uiColor", "#740096")
    store.set("buttons", [1, 2, 3])
    store.set("savePathFixed", True)
    reloaded = SettingsStore(ini_path)
    assert reloaded.get("uiColor") == "#740096"
    assert reloaded.get("buttons") == ["1", "2", "3"]
    assert reloaded.get("savePathFixed") == "true"


@pytest.mark.parametrize(
    "text", ["  padded  ", "line\nbreak", "@special", "", "a,b", "%F_%H-%M"]
)
def test_awkward_strings_round_trip(ini_path, store, text):
    store.set("filenamePattern", text)
    assert SettingsStore(ini_path).get("filenamePattern") == text


@pytest.mark.parametrize("items", [[], ["only"], ["picker", "#ff0000"]])
def test_lists_round_trip(ini_path, store, items):
    store.set("userColors", items)
    assert SettingsStore(ini_path).get("userColors") == items


def test_remove(ini_path, store):
    store.set("savePreset", "100x100")
    store.remove("savePreset")
    assert store.contains("savePreset") is False
    assert SettingsStore(ini_path).contains("savePreset") is False


def test_all_keys_uses_group_prefix(store):
    store.set("showHelp", True)
    store.set_value("Shortcuts", "TYPE_PENCIL", "P")
    assert sorted(store.all_keys()) == ["Shortcuts/TYPE_PENCIL", "showHelp"]


def test_file_name(ini_path, store):
    assert store.file_name() == str(ini_path)


def test_file_written_with_general_section(ini_path, store):
    store.set("showHelp", True)
    written = Path(store.file_name())
    assert written == ini_path
    text = written.read_text(encoding="utf-8")
    assert "[General]" in text
    assert "showHelp = true" in text
    reloaded = SettingsStore(ini_path)
    assert reloaded.all_keys() == ["showHelp"]
    assert reloaded.get("showHelp") == "true"


def test_grouped_value_round_trip(ini_path, store):
    store.set_value("Plugins", "answer", "42")
    store.set_value("", "topLevel", "yes")
    assert store.value("Plugins", "answer") == "42"
    assert store.get("Plugins/answer") == "42"
    assert store.value("", "topLevel") == "yes"
    reloaded = SettingsStore(ini_path)
    assert reloaded.value("Plugins", "answer") == "42"
    assert reloaded.value("Plugins", "missing") is None


def test_invalid_key_rejected(store):
    with pytest.raises(ValueError):
        store.set("", "x")


def test_shortcut_unset_is_none(store):
    assert store.shortcut("TYPE_PENCIL") is None


def test_set_shortcut(store):
    store.set_shortcut("TYPE_PENCIL", "P")
    assert store.shortcut("TYPE_PENCIL") == "P"


def test_empty_shortcut_clears(store):
    store.set_shortcut("TYPE_PENCIL", "P")
    store.set_shortcut("TYPE_PENCIL", "")
    assert store.shortcut("TYPE_PENCIL") == ""


@pytest.mark.parametrize("reserved", ["Esc", "Escape", "Backspace"])
def test_reserved_shortcut_rejected(store, reserved):
    with pytest.raises(ShortcutError):
        store.set_shortcut("TYPE_EXIT", reserved)
    assert store.shortcut("TYPE_EXIT") is None


def test_enter_is_stored_as_return(store):
    store.set_shortcut("TYPE_IMAGEUPLOADER", "Enter")
    assert store.shortcut("TYPE_IMAGEUPLOADER") == "Return"


def test_overlapping_shortcut_rejected_and_cleared(store):
    store.set_shortcut("TYPE_PENCIL", "P")
    store.set_shortcut("TYPE_TEXT", "T")
    with pytest.raises(ShortcutError):
        store.set_shortcut("TYPE_TEXT", "P")
    assert store.shortcut("TYPE_TEXT") == ""
    assert store.shortcut("TYPE_PENCIL") == "P"


def test_reset_keeps_shortcuts(ini_path, store):
    store.set("showHelp", False)
    store.set("savePath", "/tmp")
    store.set_shortcut("TYPE_PENCIL", "P")
    store.reset()
    assert store.all_keys() == ["Shortcuts/TYPE_PENCIL"]
    reloaded = SettingsStore(ini_path)
    assert reloaded.contains("showHelp") is False
    assert reloaded.shortcut("TYPE_PENCIL") == "P"