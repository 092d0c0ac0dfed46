# tests/test_validate.py

"""Tests for path dependency validation."""

import os
from pathlib import Path

import pytest

from pathsource.core import utils
from pathsource.core.exceptions import PackageNotFoundError, PackageTypeError, DependencyError
from pathsource.core.models import PathDescription
from pathsource.core.path_source import validate_path


def _description(path: Path) -> PathDescription:
    return PathDescription(path=str(path), is_relative=False)


def test_existing_directory_is_returned_unchanged(tmp_path: Path):
    dep = tmp_path / "dep"
    dep.mkdir()

    assert validate_path("dep", _description(dep)) == str(dep)


def test_regular_file_is_a_type_error(tmp_path: Path):
    file_path = tmp_path / "bar.txt"
    file_path.write_text("not a package")

    with pytest.raises(PackageTypeError) as exc:
        validate_path("bar", _description(file_path))

    assert not isinstance(exc.value, PackageNotFoundError)
    assert exc.value.name == "bar"
    assert exc.value.path == str(file_path)
    assert "must refer to a directory, not a file" in str(exc.value)


def test_missing_path_is_not_found(tmp_path: Path):
    missing = tmp_path / "doesnotexist"

    with pytest.raises(PackageNotFoundError) as exc:
        validate_path("foo", _description(missing))

    assert exc.value.name == "foo"
    assert "foo" in str(exc.value)
    assert str(missing) in str(exc.value)


def test_path_below_a_file_is_not_found(tmp_path: Path):
    file_path = tmp_path / "plain.txt"
    file_path.write_text("x")

    with pytest.raises(PackageNotFoundError):
        validate_path("foo", _description(file_path / "child"))


def test_both_errors_are_dependency_errors():
    assert issubclass(PackageNotFoundError, DependencyError)
    assert issubclass(PackageTypeError, DependencyError)
    assert not issubclass(PackageTypeError, PackageNotFoundError)


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_symlink_to_directory_is_accepted(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    alias = tmp_path / "alias"
    alias.symlink_to(real, target_is_directory=True)

    assert validate_path("dep", _description(alias)) == str(alias)


@pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
def test_dangling_symlink_is_not_found(tmp_path: Path):
    alias = tmp_path / "alias"
    alias.symlink_to(tmp_path / "gone")

    with pytest.raises(PackageNotFoundError):
        validate_path("dep", _description(alias))


def test_other_io_errors_propagate(tmp_path: Path, monkeypatch):
    def deny(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(utils.os, "stat", deny)

    with pytest.raises(PermissionError):
        validate_path("dep", _description(tmp_path / "dep"))
