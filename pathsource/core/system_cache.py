# pathsource/core/system_cache.py

"""
Session-scoped manifest cache.

One SystemCache lives for exactly one resolution run and is handed to every
bound source. Manifests on disk are treated as immutable for that run; a new
run must start from a fresh (or reset) cache so on-disk edits are seen.
"""

from typing import Dict, Optional

from .models import PackageId, Manifest


class SystemCache:
    """Maps package identities to the manifests already loaded for them."""

    def __init__(self):
        self._manifests: Dict[PackageId, Manifest] = {}

    def memoize_manifest(self, package_id: PackageId, manifest: Manifest) -> None:
        """Remember `manifest` for `package_id`. A repeated write replaces the value."""
        self._manifests[package_id] = manifest

    def cached_manifest(self, package_id: PackageId) -> Optional[Manifest]:
        return self._manifests.get(package_id)

    def has_manifest(self, package_id: PackageId) -> bool:
        return package_id in self._manifests

    def reset(self) -> None:
        """Forget everything; used between independent resolution runs."""
        self._manifests.clear()

    def __len__(self) -> int:
        return len(self._manifests)
