# pathsource/core/dependency_installer.py

"""
Path dependency installer.

Walks a project's path dependencies recursively through a BoundPathSource,
links every resolved package into the packages directory and records the
resolved identities in the lockfile. Registry and version-control
dependencies are not handled here; they are reported and skipped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Set

from pathsource.core.config import get_packages_dir
from pathsource.core.console import ConsoleAware, Console
from pathsource.core.exceptions import DependencyConflictError, UnsupportedSourceError
from pathsource.core.file_reading import find_manifest_file, load_manifest
from pathsource.core.lockfile import LockFile
from pathsource.core.models import Manifest, PackageId, PackageRef, PathDescription
from pathsource.core.path_source import PathSource
from pathsource.core.system_cache import SystemCache

# ==============================================================
# TYPE DEFINITIONS
# ==============================================================

@dataclass
class ProjectNode:
    """A resolved package with hierarchy information."""
    name: str
    version: str
    description: PathDescription
    is_root: bool
    package_id: Optional[PackageId] = None
    dependencies: List['ProjectNode'] = field(default_factory=list)
    parent: Optional['ProjectNode'] = None

    def add_dependency(self, dependency: 'ProjectNode'):
        """Add a child node and set parent reference."""
        dependency.parent = self
        self.dependencies.append(dependency)

    def find(self, name: str) -> Optional['ProjectNode']:
        """Return the node named `name` in this subtree, or None."""
        if name == self.name:
            return self
        for child in self.dependencies:
            found = child.find(name)
            if found is not None:
                return found
        return None

    def resolved_nodes(self, add_root: bool = False) -> List['ProjectNode']:
        """All nodes of the tree, ordered from leaves to root."""
        result = []
        for child in self.dependencies:
            result.extend(child.resolved_nodes(add_root))
        if not self.is_root or add_root:
            result.append(self)
        return result

    def resolved_names(self, add_root: bool = False) -> List[str]:
        return [node.name for node in self.resolved_nodes(add_root)]

# ==============================================================
# PATH DEPENDENCY INSTALLER CLASS
# ==============================================================

class PathDependencyInstaller(ConsoleAware):
    """
    Resolves and links the path dependencies of a project.

    Attributes:
        project_dir: Root project directory (absolute)
        system_cache: Manifest cache for this resolution session
        packages_dir: Where dependency links are created
        source: Stateless path source
        bound_source: Path source bound to system_cache
    """

    def __init__(self, project_dir: Path, system_cache: Optional[SystemCache] = None,
                 packages_dir: Optional[Path] = None,
                 console: Optional[Console] = None, verbose: bool = False):
        super().__init__(console=console, verbose=verbose)
        self.project_dir: Path = Path(project_dir).resolve()
        self.system_cache: SystemCache = system_cache if system_cache is not None else SystemCache()
        self.packages_dir: Path = (
            Path(packages_dir) if packages_dir is not None else get_packages_dir(self.project_dir)
        )
        self.source: PathSource = PathSource()
        self.bound_source = self.source.bind(self.system_cache, console=console, verbose=verbose)

    def resolve_all(self) -> ProjectNode:
        """
        Resolve the dependency tree without touching the packages directory.

        Raises:
            ManifestError: Root or dependency manifest missing, invalid or misnamed
            FormatError: Malformed path description
            PackageNotFoundError / PackageTypeError: Bad dependency path
            DependencyConflictError: One name at two different locations
        """
        manifest_path = find_manifest_file(self.project_dir)
        manifest = load_manifest(manifest_path)

        root = ProjectNode(
            name=manifest.name,
            version=manifest.version,
            description=PathDescription(path=str(self.project_dir), is_relative=False),
            is_root=True,
        )
        self._root_node: ProjectNode = root

        self._resolve_dependencies(manifest, manifest_path, root)
        return root

    def install_all(self) -> ProjectNode:
        """
        Resolve, link every dependency into packages_dir and write the lockfile.

        Links and lockfile entries of packages that are no longer resolved
        are removed.
        """
        root = self.resolve_all()
        nodes = root.resolved_nodes()

        for node in nodes:
            package_id: PackageId = node.package_id  # type: ignore
            self.bound_source.get(package_id, str(self.packages_dir / node.name))
            shown = self.source.format_description(str(self.project_dir), package_id.description)
            self.print(f"[green]✔[/] {node.name} [cyan]{node.version}[/] → {shown}")

        self._remove_stale_links({node.name for node in nodes})

        lockfile = LockFile(self.project_dir, self.source)
        if lockfile.update_if_changed(node.package_id for node in nodes):  # type: ignore
            self.log(f"[dim]Lockfile updated[/] {lockfile.lockfile_path}")
        return root

    def _remove_stale_links(self, resolved: Set[str]) -> None:
        """Unlink symlinks in packages_dir whose names were not resolved. Real files stay."""
        if not self.packages_dir.is_dir():
            return
        for entry in self.packages_dir.iterdir():
            if entry.is_symlink() and entry.name not in resolved:
                entry.unlink()
                self.print(f"[yellow]✘[/] {entry.name} (removed)")

    # ==============================================================
    # CORE RESOLUTION LOGIC
    # ==============================================================

    def _resolve_dependencies(self, manifest: Manifest, manifest_path: Path, parent: ProjectNode):
        for dep_name, spec in manifest.dependencies.items():
            ref = self._parse_dependency(dep_name, spec, manifest_path)
            if ref is None:
                continue

            existing = self._root_node.find(dep_name)
            if existing is not None:
                if self.source.descriptions_equal(existing.description, ref.description):
                    self.log(f"[dim]Skip[/] {dep_name} (already resolved)")
                    continue
                raise DependencyConflictError(dep_name, existing.description.path, ref.description.path)

            package_id = self.bound_source.get_versions(ref)[0]
            dep_manifest = self.bound_source.describe(package_id)

            node = ProjectNode(
                name=dep_name,
                version=package_id.version,
                description=package_id.description,
                is_root=False,
                package_id=package_id,
            )
            parent.add_dependency(node)
            self.print(
                f"[dim cyan]↳ processing dependency[/] [bold]{dep_name}[/] : "
                f"{package_id.version}"
            )

            if dep_manifest.dependencies:
                self.log(
                    f"[dim]Recursive:[/] {dep_name} → "
                    f"{len(dep_manifest.dependencies)} dep(s)"
                )
                dep_manifest_path = find_manifest_file(self.bound_source.get_directory(package_id))
                self._resolve_dependencies(dep_manifest, dep_manifest_path, node)

    def _parse_dependency(self, dep_name: str, spec: Any, manifest_path: Path) -> Optional[PackageRef]:
        ref = parse_path_dependency(self.source, dep_name, spec, manifest_path)
        if ref is None:
            self.warn(f"Skipping '{dep_name}': only path dependencies are installed here.")
        return ref

# ==============================================================
# MANIFEST DEPENDENCY ENTRIES
# ==============================================================

def parse_path_dependency(source: PathSource, dep_name: str, spec: Any,
                          manifest_path: Path) -> Optional[PackageRef]:
    """
    Parse one manifest dependency entry declared in `manifest_path`.

    A mapping with a `path` key becomes a PackageRef. Anything that is not
    a mapping is a registry constraint and yields None.

    Raises:
        UnsupportedSourceError: A mapping that names another source
        FormatError: Malformed path value
    """
    if isinstance(spec, Mapping):
        if source.name in spec:
            return source.parse_ref(dep_name, spec[source.name], containing_path=str(manifest_path))
        raise UnsupportedSourceError(dep_name, ", ".join(str(k) for k in spec) or "<empty>")
    return None
