# tests/test_exceptions.py

"""Tests for custom pathsource exceptions."""

import pytest

from pathsource.core.exceptions import (
    PathSourceError,
    FormatError,
    DependencyError,
    PackageNotFoundError,
    PackageTypeError,
    PackageLinkError,
    DependencyConflictError,
    UnsupportedSourceError,
    ManifestError,
    ManifestNotFoundError,
    ManifestLoadError,
    ManifestNameMismatchError,
)


@pytest.mark.parametrize(
    "error",
    [
        FormatError("bad"),
        PackageNotFoundError("foo", "/tmp/doesnotexist"),
        PackageTypeError("bar", "/tmp/bar.txt"),
        PackageLinkError("foo", "/work/packages/foo"),
        DependencyConflictError("b", "/one/b", "/two/b"),
        UnsupportedSourceError("lib", "git"),
        ManifestNotFoundError("/work"),
        ManifestLoadError("/work/pkg.yaml", "broken"),
        ManifestNameMismatchError("/work/pkg.yaml", "a", "b"),
    ],
)
def test_all_errors_share_one_root(error):
    assert isinstance(error, PathSourceError)


def test_not_found_message_names_package_and_path():
    error = PackageNotFoundError("foo", "/tmp/doesnotexist")

    assert str(error) == 'Could not find package foo at "/tmp/doesnotexist".'
    assert error.name == "foo"
    assert error.path == "/tmp/doesnotexist"


def test_type_error_message_names_package_and_path():
    error = PackageTypeError("bar", "/tmp/bar.txt")

    assert "bar" in str(error)
    assert "/tmp/bar.txt" in str(error)
    assert "not a file" in str(error)


def test_missing_and_wrong_kind_are_distinct_classes():
    assert not isinstance(PackageTypeError("bar", "/x"), PackageNotFoundError)
    assert not isinstance(PackageNotFoundError("bar", "/x"), PackageTypeError)


def test_manifest_errors_are_not_dependency_errors():
    assert issubclass(ManifestLoadError, ManifestError)
    assert not issubclass(ManifestError, DependencyError)


def test_conflict_message_lists_both_locations():
    error = DependencyConflictError("b", "/one/b", "/two/b")

    assert "/one/b" in str(error)
    assert "/two/b" in str(error)
