# pathsource/core/source.py

"""
Capability shape shared by dependency sources.

A Source is stateless: it parses, serializes, formats and compares
descriptions. Binding it to a SystemCache yields a BoundSource, which does
the filesystem work (version lookup, describe, fetch) for one resolution
session. Path, registry and version-control sources all expose this shape to
the resolver.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .console import Console, ConsoleAware
from .models import PackageRef, PackageId, PathDescription, Manifest
from .system_cache import SystemCache


class Source:
    """Stateless half of a dependency source."""

    name: str = ""

    def bind(self, system_cache: SystemCache, console: Optional[Console] = None,
             verbose: bool = False) -> BoundSource:
        raise NotImplementedError

    def parse_ref(self, name: str, description: Any,
                  containing_path: Optional[str] = None) -> PackageRef:
        raise NotImplementedError

    def parse_id(self, name: str, version: str, description: Any,
                 containing_dir: Optional[str] = None) -> PackageId:
        raise NotImplementedError

    def serialize_description(self, containing_path: str,
                              description: PathDescription) -> Dict[str, Any]:
        raise NotImplementedError

    def format_description(self, containing_path: str,
                           description: PathDescription) -> str:
        raise NotImplementedError

    def descriptions_equal(self, description1: PathDescription,
                           description2: PathDescription) -> bool:
        raise NotImplementedError


class BoundSource(ConsoleAware):
    """Cache-bound half of a dependency source."""

    def __init__(self, source: Source, system_cache: SystemCache,
                 console: Optional[Console] = None, verbose: bool = False):
        super().__init__(console=console, verbose=verbose)
        self.source = source
        self.system_cache = system_cache

    def get_versions(self, ref: PackageRef) -> List[PackageId]:
        raise NotImplementedError

    def describe(self, package_id: PackageId) -> Manifest:
        """
        Return the manifest for `package_id`, from the session cache when
        possible. Sources override do_describe() for the uncached case.
        """
        cached = self.system_cache.cached_manifest(package_id)
        if cached is not None:
            self.log(f"[dim]Cached[/] {package_id}")
            return cached

        manifest = self.do_describe(package_id)
        self.system_cache.memoize_manifest(package_id, manifest)
        return manifest

    def do_describe(self, package_id: PackageId) -> Manifest:
        raise NotImplementedError

    def get(self, package_id: PackageId, symlink: str) -> None:
        raise NotImplementedError

    def get_directory(self, package_id: PackageId) -> str:
        raise NotImplementedError
