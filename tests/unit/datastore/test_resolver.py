from __future__ import annotations

from pathlib import Path

import pytest

from fleet.datastore import resolver as resolver_module
from fleet.datastore.models import DataStoreInvalidKeyError, DataStoreNotInitializedError
from fleet.datastore.prefix import PrefixRegistry
from fleet.datastore.resolver import PathResolver, split_key


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    return PathResolver(PrefixRegistry(tmp_path))


def test_resolve_flat_key(resolver: PathResolver, tmp_path: Path) -> None:
    assert resolver.resolve("token").unwrap() == tmp_path / "token"


def test_resolve_nested_key(resolver: PathResolver, tmp_path: Path) -> None:
    assert resolver.resolve("keys/device.pem").unwrap() == tmp_path / "keys" / "device.pem"


def test_resolve_normalizes_empty_and_current_segments(resolver: PathResolver, tmp_path: Path) -> None:
    assert resolver.resolve("nested//./text/").unwrap() == tmp_path / "nested" / "text"


def test_resolve_follows_prefix_changes(tmp_path: Path) -> None:
    registry = PrefixRegistry(tmp_path / "first")
    resolver = PathResolver(registry)

    registry.set(tmp_path / "second")

    assert resolver.resolve("token").unwrap() == tmp_path / "second" / "token"


def test_resolve_requires_prefix() -> None:
    resolver = PathResolver(PrefixRegistry())

    error = resolver.resolve("token").unwrap_err()

    assert isinstance(error, DataStoreNotInitializedError)
    assert error.key == "token"


def test_resolve_reports_missing_prefix_before_invalid_key() -> None:
    resolver = PathResolver(PrefixRegistry())

    assert isinstance(resolver.resolve("").unwrap_err(), DataStoreNotInitializedError)


@pytest.mark.parametrize(
    "key",
    ["", "/", "//", ".", "./.", "..", "../token", "nested/../../token", "a/../b", "/absolute", "nul\x00byte"],
)
def test_split_key_rejects_invalid_keys(key: str) -> None:
    error = split_key(key).unwrap_err()

    assert isinstance(error, DataStoreInvalidKeyError)
    assert error.key == key


def test_split_key_allows_dotted_names() -> None:
    assert split_key(".hidden/file..name").unwrap() == [".hidden", "file..name"]


def test_resolve_relative_root_returns_absolute_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    resolver = PathResolver(PrefixRegistry("relroot"))

    resolved = resolver.resolve("text").unwrap()

    assert resolved.is_absolute()
    assert resolved == tmp_path / "relroot" / "text"


@pytest.mark.parametrize("key", ["C:foo", "nested/D:bar", "c:"])
def test_split_key_rejects_drive_segments_on_windows(key: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(resolver_module, "_DRIVE_LETTERS", True)

    error = split_key(key).unwrap_err()

    assert isinstance(error, DataStoreInvalidKeyError)
    assert "drive" in error.message


def test_split_key_allows_colons_without_drive_letters(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(resolver_module, "_DRIVE_LETTERS", False)

    assert split_key("C:foo").unwrap() == ["C:foo"]
