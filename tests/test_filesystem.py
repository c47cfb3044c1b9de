import shutil
import stat
from pathlib import Path

import pytest

from cursor_rules.errors import TemplateCopyError, TemplateRemoveError
from cursor_rules.filesystem import (
    copy_file,
    prune_dir_if_empty,
    prune_empty_parents,
    remove_file,
)
from cursor_rules.models import DirectoryOutcome


def test_copy_file_creates_parent_dirs(tmp_path: Path, write_file) -> None:
    source = write_file(tmp_path / "src" / "a.mdc", "alpha")
    target = tmp_path / "dst" / "deep" / "a.mdc"

    copy_file(source, target)

    assert target.read_text(encoding="utf-8") == "alpha"


def test_copy_file_overwrites_read_only_target(tmp_path: Path, write_file) -> None:
    source = write_file(tmp_path / "src" / "a.mdc", "new")
    target = write_file(tmp_path / "dst" / "a.mdc", "old")
    target.chmod(stat.S_IRUSR | stat.S_IRGRP | stat.S_IROTH)

    copy_file(source, target)

    assert target.read_text(encoding="utf-8") == "new"


def test_copy_file_wraps_os_errors(tmp_path: Path, write_file, monkeypatch) -> None:
    source = write_file(tmp_path / "src" / "a.mdc")
    target = tmp_path / "dst" / "a.mdc"

    def _disk_full(*_args, **_kwargs):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr(shutil, "copy2", _disk_full)

    with pytest.raises(TemplateCopyError) as exc_info:
        copy_file(source, target)

    assert exc_info.value.path == target
    assert "No space left on device" in str(exc_info.value)


def test_remove_file_reports_missing(tmp_path: Path) -> None:
    assert remove_file(tmp_path / "missing.mdc") is False


def test_remove_file_deletes_existing(tmp_path: Path, write_file) -> None:
    path = write_file(tmp_path / "a.mdc")

    assert remove_file(path) is True
    assert not path.exists()


def test_remove_file_refuses_directories(tmp_path: Path) -> None:
    path = tmp_path / "dir.mdc"
    path.mkdir()

    with pytest.raises(TemplateRemoveError):
        remove_file(path)
    assert path.is_dir()


def test_prune_outcomes(tmp_path: Path, write_file) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    busy = tmp_path / "busy"
    write_file(busy / "custom.mdc")

    assert prune_dir_if_empty(empty) == DirectoryOutcome.REMOVED
    assert not empty.exists()
    assert prune_dir_if_empty(busy) == DirectoryOutcome.KEPT
    assert (busy / "custom.mdc").exists()
    assert prune_dir_if_empty(tmp_path / "absent") == DirectoryOutcome.ABSENT


def test_prune_keeps_directory_with_only_subdirectories(tmp_path: Path) -> None:
    root = tmp_path / "root"
    (root / "nested").mkdir(parents=True)

    assert prune_dir_if_empty(root) == DirectoryOutcome.KEPT
    assert (root / "nested").is_dir()


def test_prune_empty_parents_stops_at_root(tmp_path: Path, write_file) -> None:
    root = tmp_path / "rules"
    leaf = root / "a" / "b" / "rule.mdc"
    write_file(root / "a" / "keep.mdc")
    (root / "a" / "b").mkdir(parents=True, exist_ok=True)

    prune_empty_parents(leaf, stop=root)

    assert not (root / "a" / "b").exists()
    assert (root / "a" / "keep.mdc").exists()
    assert root.is_dir()


def test_copy_file_refuses_directory_target(tmp_path: Path, write_file) -> None:
    source = write_file(tmp_path / "src" / "a.mdc")
    target = tmp_path / "dst" / "a.mdc"
    target.mkdir(parents=True)

    with pytest.raises(TemplateCopyError) as exc_info:
        copy_file(source, target)

    assert "destination is a directory" in str(exc_info.value)
    assert not (target / "a.mdc").exists()


def test_prune_never_deletes_file_added_after_check(
    tmp_path: Path, write_file, monkeypatch
) -> None:
    root = tmp_path / "rules"
    late = write_file(root / "late-arrival.mdc", "user file")
    monkeypatch.setattr(Path, "iterdir", lambda self: iter(()))

    with pytest.raises(TemplateRemoveError):
        prune_dir_if_empty(root)

    assert late.read_text(encoding="utf-8") == "user file"
