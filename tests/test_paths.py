from pathlib import Path

import pytest

from keymeow_data.data import paths
from keymeow_data.data.paths import APP_NAME, category_dir, create_directories, locate_data_dir
from keymeow_data.domain.errors import DirectoryCreateError, NoHomeDirectoryError
from keymeow_data.domain.models import DataKind


def test_locate_appends_app_namespace(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platformdirs, "user_data_path", lambda: tmp_path / "share")
    assert locate_data_dir() == tmp_path / "share" / APP_NAME


def test_locate_does_not_create_anything(monkeypatch, tmp_path):
    monkeypatch.setattr(paths.platformdirs, "user_data_path", lambda: tmp_path / "share")
    locate_data_dir()
    assert not (tmp_path / "share").exists()


def test_locate_without_home_raises(monkeypatch):
    # What expanduser leaves behind when neither HOME nor a passwd entry exists.
    monkeypatch.setattr(paths.platformdirs, "user_data_path", lambda: Path("~/.local/share"))
    with pytest.raises(NoHomeDirectoryError):
        locate_data_dir()


def test_locate_platform_error_raises(monkeypatch):
    def _fail():
        raise KeyError("HOME")

    monkeypatch.setattr(paths.platformdirs, "user_data_path", _fail)
    with pytest.raises(NoHomeDirectoryError) as exc_info:
        locate_data_dir()
    assert isinstance(exc_info.value.cause, KeyError)


def test_create_directories_makes_all_categories(data_dir):
    create_directories(data_dir)
    for name in ("corpora", "metrics", "layouts"):
        assert (data_dir / name).is_dir()


def test_create_directories_is_idempotent(data_dir):
    create_directories(data_dir)
    (data_dir / "corpora" / "english.bin").write_bytes(b"x")
    create_directories(data_dir)
    assert (data_dir / "corpora" / "english.bin").read_bytes() == b"x"


def test_create_directories_over_a_file_fails(tmp_path):
    blocker = tmp_path / "keymeow"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(DirectoryCreateError) as exc_info:
        create_directories(blocker)
    assert isinstance(exc_info.value.cause, OSError)


def test_category_dir(data_dir):
    assert category_dir(data_dir, DataKind.KEYBOARD) == data_dir / "metrics"
