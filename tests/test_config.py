from bid_items.config import (
    END_MARKERS_ENV,
    OPEN_ENV,
    START_MARKER_ENV,
    load_env_files,
    load_settings,
    split_markers,
)
from bid_items.scanner import DEFAULT_END_MARKERS, DEFAULT_START_MARKER


def test_defaults():
    s = load_settings()
    assert s.markers.start == DEFAULT_START_MARKER
    assert s.markers.end == DEFAULT_END_MARKERS
    assert s.open_after is False


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv(START_MARKER_ENV, "QTY DESCRIPTION")
    monkeypatch.setenv(END_MARKERS_ENV, "SUBTOTAL | Page 2 of")
    monkeypatch.setenv(OPEN_ENV, "yes")
    s = load_settings()
    assert s.markers.start == "QTY DESCRIPTION"
    assert s.markers.end == ("SUBTOTAL", "Page 2 of")
    assert s.open_after is True


def test_arguments_override_environment(monkeypatch):
    monkeypatch.setenv(START_MARKER_ENV, "QTY DESCRIPTION")
    monkeypatch.setenv(OPEN_ENV, "1")
    s = load_settings(start_marker="ITEM QTY", end_markers=["TOTAL"], open_after=False)
    assert s.markers.start == "ITEM QTY"
    assert s.markers.end == ("TOTAL",)
    assert s.open_after is False


def test_empty_end_marker_list_uses_default():
    assert load_settings(end_markers=[]).markers.end == DEFAULT_END_MARKERS


def test_split_markers():
    assert split_markers("a|b") == ("a", "b")
    assert split_markers(" a || ") == ("a",)
    assert split_markers("") == ()
    assert split_markers(None) == ()


def test_dotenv_file_in_working_directory(tmp_path, monkeypatch):
    # register the variable so monkeypatch removes what load_dotenv sets
    monkeypatch.setenv(START_MARKER_ENV, "placeholder")
    monkeypatch.delenv(START_MARKER_ENV)
    (tmp_path / ".env").write_text(f"{START_MARKER_ENV}=LINE QTY\n", encoding="utf-8")
    load_env_files(cwd=tmp_path)
    assert load_settings().markers.start == "LINE QTY"


def test_dotenv_never_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(START_MARKER_ENV, "FROM ENV")
    (tmp_path / ".env").write_text(f"{START_MARKER_ENV}=FROM FILE\n", encoding="utf-8")
    load_env_files(cwd=tmp_path)
    assert load_settings().markers.start == "FROM ENV"
