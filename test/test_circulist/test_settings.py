import pytest

from circulist import CursorSettings, SettingsError, configure, get_settings, init, load_settings


@pytest.fixture
def restore_settings():
    prev = get_settings()
    yield
    configure(prev)


def test_defaults():
    assert CursorSettings().fast_stepping


def test_load_settings(tmp_path):
    path = tmp_path / "cursor.yaml"
    path.write_text("fast_stepping: false\n")

    assert not load_settings(path).fast_stepping


def test_load_settings_from_search_dir(tmp_path):
    (tmp_path / "cursor.yaml").write_text("fast_stepping: false\n")

    assert not load_settings("cursor.yaml", tmp_path).fast_stepping


def test_load_empty_settings(tmp_path):
    path = tmp_path / "cursor.yaml"
    path.write_text("")

    assert load_settings(path) == CursorSettings()


@pytest.mark.parametrize("contents", [
    "fast_stepping: [",
    "- fast_stepping",
    "fast_stepping: maybe-later",
])
def test_load_bad_settings(tmp_path, contents):
    path = tmp_path / "cursor.yaml"
    path.write_text(contents)

    with pytest.raises(SettingsError) as e:
        load_settings(path)
    assert str(path) in e.value.message
    assert e.value.exitcode == 1


def test_load_undecodable_settings(tmp_path):
    path = tmp_path / "cursor.yaml"
    path.write_bytes(b"fast_stepping: \xff\xfe\n")

    with pytest.raises(SettingsError) as e:
        load_settings(path)
    assert str(path) in e.value.message


def test_load_missing_settings(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(tmp_path / "missing.yaml")
    with pytest.raises(SettingsError):
        load_settings("missing.yaml", tmp_path)
    with pytest.raises(SettingsError):
        load_settings(tmp_path)


def test_configure(restore_settings):
    slow = CursorSettings(fast_stepping=False)
    configure(slow)

    assert get_settings() is slow
    assert init([1, 2, 3]).settings is slow
    assert init([1, 2, 3]).next(100).value() == 2

    configure()
    assert get_settings().fast_stepping


def test_explicit_settings_are_carried(restore_settings):
    own = CursorSettings(fast_stepping=False)
    cll = init([1, 2, 3], own).next().insert(0)
    configure(CursorSettings())

    assert cll.settings is own
    assert cll.reset().settings is own
