from __future__ import annotations

from pathlib import Path

import pytest

from fleet.common import AppDirectories, get_data_directory_from_dirs


@pytest.fixture
def app_directories() -> AppDirectories:
    return AppDirectories(app_name="fleet")


def test_get_data_directory_uses_xdg(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, app_directories: AppDirectories
) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))

    assert get_data_directory_from_dirs(app_directories) == tmp_path / "xdg-data" / "fleet"


def test_get_data_directory_falls_back_to_home(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, app_directories: AppDirectories
) -> None:
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert get_data_directory_from_dirs(app_directories) == tmp_path / ".local" / "share" / "fleet"
