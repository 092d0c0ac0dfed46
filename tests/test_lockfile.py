# tests/test_lockfile.py

"""Tests for the pkg.lock file."""

import json
from pathlib import Path

import pytest

from pathsource.core.exceptions import FormatError
from pathsource.core.lockfile import LockFile
from pathsource.core.path_source import PathSource


def test_relative_entry_is_stored_relative_to_lockfile(tmp_path: Path):
    project = tmp_path / "app"
    project.mkdir()
    package_id = PathSource().parse_id(
        "shared", "1.0.0", {"path": str(tmp_path / "shared"), "relative": True}
    )

    lockfile = LockFile(project)
    lockfile.update_if_changed([package_id])

    data = json.loads((project / "pkg.lock").read_text(encoding="utf-8"))
    assert data["version"] == "1"
    assert data["packages"]["shared"] == {
        "source": "path",
        "version": "1.0.0",
        "description": {"path": str(Path("..") / "shared"), "relative": True},
    }


def test_absolute_entry_is_stored_unchanged(tmp_path: Path):
    package_id = PathSource().parse_id(
        "shared", "1.0.0", {"path": str(tmp_path / "shared"), "relative": False}
    )

    lockfile = LockFile(tmp_path / "app")
    lockfile.update_if_changed([package_id])

    data = json.loads((tmp_path / "app" / "pkg.lock").read_text(encoding="utf-8"))
    assert data["packages"]["shared"]["description"] == {
        "path": str(tmp_path / "shared"),
        "relative": False,
    }


def test_entry_reads_back_as_same_identity(tmp_path: Path):
    package_id = PathSource().parse_id(
        "shared", "3.1.0", {"path": str(tmp_path / "shared"), "relative": True}
    )
    lockfile = LockFile(tmp_path / "app")
    lockfile.update_if_changed([package_id])

    assert LockFile(tmp_path / "app").get("shared") == package_id


def test_relative_entry_follows_moved_project(tmp_path: Path):
    old_root = tmp_path / "old"
    package_id = PathSource().parse_id(
        "shared", "1.0.0", {"path": str(old_root / "shared"), "relative": True}
    )
    lockfile = LockFile(old_root / "app")
    lockfile.update_if_changed([package_id])

    new_root = tmp_path / "new"
    old_root.rename(new_root)

    locked = LockFile(new_root / "app").get("shared")
    assert locked.description.path == str(new_root / "shared")
    assert locked.description.is_relative is True


def test_update_if_changed_only_writes_on_change(tmp_path: Path):
    package_id = PathSource().parse_id(
        "shared", "1.0.0", {"path": str(tmp_path / "shared"), "relative": True}
    )
    lockfile = LockFile(tmp_path / "app")

    assert lockfile.update_if_changed([package_id]) is True
    assert lockfile.update_if_changed([package_id]) is False

    bumped = PathSource().parse_id(
        "shared", "1.1.0", {"path": str(tmp_path / "shared"), "relative": True}
    )
    assert lockfile.update_if_changed([bumped]) is True
    assert LockFile(tmp_path / "app").get("shared").version == "1.1.0"


def test_update_if_changed_drops_entries_not_given(tmp_path: Path):
    source = PathSource()
    shared = source.parse_id("shared", "1.0.0", {"path": str(tmp_path / "shared"), "relative": True})
    old = source.parse_id("old", "1.0.0", {"path": str(tmp_path / "old"), "relative": True})
    LockFile(tmp_path / "app").update_if_changed([shared, old])

    lockfile = LockFile(tmp_path / "app")
    assert lockfile.update_if_changed([shared]) is True

    reread = LockFile(tmp_path / "app")
    assert reread.names() == ["shared"]
    assert reread.get("old") is None


def test_update_if_changed_writes_empty_lockfile(tmp_path: Path):
    lockfile = LockFile(tmp_path)

    assert lockfile.update_if_changed([]) is True
    assert json.loads((tmp_path / "pkg.lock").read_text(encoding="utf-8")) == {
        "version": "1",
        "packages": {},
    }


def test_missing_lockfile_is_empty(tmp_path: Path):
    lockfile = LockFile(tmp_path)

    assert lockfile.get("shared") is None
    assert lockfile.names() == []


@pytest.mark.parametrize("content", ["{ broken", json.dumps({"version": "99", "packages": {"x": {}}}), "[]"])
def test_unreadable_or_unsupported_lockfile_is_empty(tmp_path: Path, content: str):
    (tmp_path / "pkg.lock").write_text(content, encoding="utf-8")

    assert LockFile(tmp_path).names() == []


def test_malformed_description_raises_format_error(tmp_path: Path):
    (tmp_path / "pkg.lock").write_text(json.dumps({
        "version": "1",
        "packages": {"shared": {"source": "path", "version": "1.0.0",
                                "description": {"path": "../shared", "relative": "yes"}}},
    }), encoding="utf-8")

    with pytest.raises(FormatError, match="'relative'"):
        LockFile(tmp_path).get("shared")


def test_entry_without_version_raises_format_error(tmp_path: Path):
    (tmp_path / "pkg.lock").write_text(json.dumps({
        "version": "1",
        "packages": {"shared": {"description": {"path": "/x", "relative": False}}},
    }), encoding="utf-8")

    with pytest.raises(FormatError):
        LockFile(tmp_path).get("shared")
