from __future__ import annotations

from pathlib import Path

import pytest

from fleet.datastore.adapter import FilesystemAdapter


@pytest.fixture
def fs() -> FilesystemAdapter:
    return FilesystemAdapter()


@pytest.mark.asyncio
async def test_write_bytes_creates_parents(fs: FilesystemAdapter, tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c.bin"

    await fs.write_bytes(target, b"payload")

    assert await fs.read_bytes(target) == b"payload"


@pytest.mark.asyncio
async def test_exists_and_is_dir(fs: FilesystemAdapter, tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()
    (tmp_path / "file").write_bytes(b"")

    assert await fs.exists(tmp_path / "dir") is True
    assert await fs.is_dir(tmp_path / "dir") is True
    assert await fs.exists(tmp_path / "file") is True
    assert await fs.is_dir(tmp_path / "file") is False
    assert await fs.exists(tmp_path / "missing") is False


@pytest.mark.asyncio
async def test_is_dir_follows_symlinks(fs: FilesystemAdapter, tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "dir", target_is_directory=True)

    assert await fs.is_dir(link) is True


@pytest.mark.asyncio
async def test_exists_reports_dangling_symlink(fs: FilesystemAdapter, tmp_path: Path) -> None:
    link = tmp_path / "link"
    link.symlink_to(tmp_path / "missing")

    assert await fs.exists(link) is True


@pytest.mark.asyncio
async def test_remove_symlink_to_directory_keeps_target(fs: FilesystemAdapter, tmp_path: Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    (target / "file").write_bytes(b"keep")
    link = tmp_path / "link"
    link.symlink_to(target, target_is_directory=True)

    await fs.remove(link)

    assert not link.exists()
    assert (target / "file").read_bytes() == b"keep"


@pytest.mark.asyncio
async def test_remove_missing_path_raises(fs: FilesystemAdapter, tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await fs.remove(tmp_path / "missing")


@pytest.mark.asyncio
async def test_atomic_write_cleans_up_on_failure(fs: FilesystemAdapter, tmp_path: Path) -> None:
    (tmp_path / "dir").mkdir()

    with pytest.raises(IsADirectoryError):
        await fs.write_bytes(tmp_path / "dir", b"payload", atomic=True)

    assert [p.name for p in tmp_path.iterdir()] == ["dir"]
