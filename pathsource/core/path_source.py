# pathsource/core/path_source.py

"""
Source for packages that live at a local filesystem path.

PathSource handles descriptions without touching the session cache;
BoundPathSource reads target manifests, memoizes them and links packages
into place.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .console import Console
from .exceptions import FormatError, PackageNotFoundError, PackageTypeError
from .file_reading import load_manifest
from .models import PackageRef, PackageId, PathDescription, Manifest
from .source import Source, BoundSource
from .system_cache import SystemCache
from .utils import canonicalize, create_package_symlink, dir_exists, file_exists

# ==============================================================
# VALIDATION
# ==============================================================

def validate_path(name: str, description: PathDescription) -> str:
    """
    Ensure `description` points to an existing directory and return its path.

    Raises:
        PackageTypeError: A file exists at the path
        PackageNotFoundError: Nothing exists at the path
    """
    directory = description.path

    if dir_exists(directory):
        return directory

    if file_exists(directory):
        raise PackageTypeError(name, directory)

    raise PackageNotFoundError(name, directory)

# ==============================================================
# PATH SOURCE
# ==============================================================

class PathSource(Source):
    """A Source that gets packages from a given local file path."""

    name = "path"

    def bind(self, system_cache: SystemCache, console: Optional[Console] = None,
             verbose: bool = False) -> BoundPathSource:
        return BoundPathSource(self, system_cache, console=console, verbose=verbose)

    def path_from_description(self, description: PathDescription) -> str:
        """
        Return the file path a description points to.

        For descriptions built with ref_for()/id_for() this may be relative,
        and it is up to the caller to interpret it.
        """
        return description.path

    def ref_for(self, name: str, path: str) -> PackageRef:
        """Reference to a path package named `name` at `path`."""
        return PackageRef(
            name=name,
            source=self.name,
            description=PathDescription(path=path, is_relative=not os.path.isabs(path)),
        )

    def id_for(self, name: str, version: str, path: str) -> PackageId:
        """ID for a path package named `name` with `version` at `path`."""
        return PackageId(
            name=name,
            source=self.name,
            version=version,
            description=PathDescription(path=path, is_relative=not os.path.isabs(path)),
        )

    def descriptions_equal(self, description1: PathDescription,
                           description2: PathDescription) -> bool:
        # Compare real paths after normalizing and resolving symlinks.
        return canonicalize(description1.path) == canonicalize(description2.path)

    def parse_ref(self, name: str, description: Any,
                  containing_path: Optional[str] = None) -> PackageRef:
        """
        Parse a path dependency.

        `description` is the path string from the manifest. A relative path
        is joined to the directory of `containing_path` (the manifest file
        that declares it) and normalized; `is_relative` remembers that the
        original spelling was relative.

        Raises:
            FormatError: Not a string, or relative without a containing manifest
        """
        if not isinstance(description, str):
            raise FormatError("The description must be a path string.")

        path = description
        is_relative = not os.path.isabs(path)
        if is_relative:
            # A relative path only makes sense inside a manifest on the local
            # file system, not one reached through another kind of source.
            if containing_path is None:
                raise FormatError(
                    f'"{description}" is a relative path, but this '
                    "isn't a local manifest."
                )
            containing_dir = os.path.dirname(os.fspath(containing_path))
            path = os.path.normpath(os.path.join(containing_dir, path))

        return PackageRef(
            name=name,
            source=self.name,
            description=PathDescription(path=path, is_relative=is_relative),
        )

    def parse_id(self, name: str, version: str, description: Any,
                 containing_dir: Optional[str] = None) -> PackageId:
        """
        Parse a serialized description of the form {"path": str, "relative": bool}.

        When `containing_dir` is given, a relative entry is joined back onto
        it, which is how a lockfile entry written by serialize_description()
        is read again.

        Raises:
            FormatError: Any field missing or of the wrong type
        """
        if not isinstance(description, Mapping):
            raise FormatError("The description must be a map.")

        path = description.get("path")
        if not isinstance(path, str):
            raise FormatError("The 'path' field of the description must be a string.")

        is_relative = description.get("relative")
        if not isinstance(is_relative, bool):
            raise FormatError("The 'relative' field of the description must be a boolean.")

        if is_relative and containing_dir is not None:
            path = os.path.normpath(os.path.join(os.fspath(containing_dir), path))

        return PackageId(
            name=name,
            source=self.name,
            version=version,
            description=PathDescription(path=path, is_relative=is_relative),
        )

    def serialize_description(self, containing_path: str,
                              description: PathDescription) -> Dict[str, Any]:
        """
        Portable form of `description`.

        Relative descriptions are rewritten relative to `containing_path`;
        absolute ones are returned unchanged.
        """
        if description.is_relative:
            return {
                "path": os.path.relpath(description.path, os.fspath(containing_path)),
                "relative": True,
            }
        return description.to_dict()

    def format_description(self, containing_path: str,
                           description: PathDescription) -> str:
        """Convert a parsed relative path back to its relative form, for display."""
        source_path = description.path
        if description.is_relative:
            source_path = os.path.relpath(description.path, os.fspath(containing_path))

        return source_path

# ==============================================================
# BOUND PATH SOURCE
# ==============================================================

class BoundPathSource(BoundSource):
    """The BoundSource for PathSource."""

    source: PathSource

    def get_versions(self, ref: PackageRef) -> List[PackageId]:
        # There's only one package ID for a given path. We just need to find
        # the version.
        manifest = self._load_manifest(ref)
        package_id = PackageId(
            name=ref.name,
            source=self.source.name,
            version=manifest.version,
            description=ref.description,
        )
        if not self.system_cache.has_manifest(package_id):
            self.system_cache.memoize_manifest(package_id, manifest)
        self.log(f"[dim]Resolved[/] {package_id}")
        return [package_id]

    def do_describe(self, package_id: PackageId) -> Manifest:
        return self._load_manifest(package_id.to_ref())

    def get(self, package_id: PackageId, symlink: str) -> None:
        """Link the package directory of `package_id` at `symlink`."""
        directory = validate_path(package_id.name, package_id.description)
        create_package_symlink(
            package_id.name,
            directory,
            symlink,
            relative=package_id.description.is_relative,
        )
        self.log(f"[dim]Linked[/] {package_id.name} → {symlink}")

    def get_directory(self, package_id: PackageId) -> str:
        return package_id.description.path

    def _load_manifest(self, ref: PackageRef) -> Manifest:
        directory = validate_path(ref.name, ref.description)
        return load_manifest(directory, expected_name=ref.name)
