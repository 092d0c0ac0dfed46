from typing import Dict, Iterable, Optional
from pathlib import Path
import json

from pathsource.core.constants import LOCK_FILE
from pathsource.core.exceptions import FormatError
from pathsource.core.models import PackageId
from pathsource.core.path_source import PathSource

LOCKFILE_VERSION = "1"

# ==============================================================
# LOCKFILE CLASS
# ==============================================================

class LockFile:
    """
    Manages lockfile operations for a project.

    Relative path descriptions are stored relative to the lockfile's own
    directory, so the project can be moved together with its path
    dependencies.
    """

    def __init__(self, project_dir: str | Path, source: Optional[PathSource] = None):
        self.project_dir: Path = Path(project_dir)
        self.lockfile_path: Path = self.project_dir / LOCK_FILE
        self.source: PathSource = source if source is not None else PathSource()
        self._data: Optional[Dict] = None

    def load(self) -> Dict:
        """Load lockfile data and cache it. Missing or unsupported files start empty."""
        data = {"version": LOCKFILE_VERSION, "packages": {}}
        try:
            json_data = json.loads(self.lockfile_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            json_data = None
        if isinstance(json_data, dict) and json_data.get("version") == LOCKFILE_VERSION:
            data = json_data
            data.setdefault("packages", {})
        self._data = data
        return data

    def save(self) -> None:
        """Save cached data to lockfile."""
        if self._data is None:
            return
        self._data.setdefault("version", LOCKFILE_VERSION)
        self.lockfile_path.parent.mkdir(parents=True, exist_ok=True)
        self.lockfile_path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding="utf-8")

    def update_if_changed(self, package_ids: Iterable[PackageId]) -> bool:
        """
        Make the lockfile hold exactly `package_ids` and save it if anything
        differs; entries for packages no longer resolved are dropped.
        Returns True if saved.
        """
        packages = {package_id.name: self._entry(package_id) for package_id in package_ids}
        current = self._packages()
        if self.lockfile_path.exists() and current == packages:
            return False
        self._data["packages"] = packages  # type: ignore
        self.save()
        return True

    def _entry(self, package_id: PackageId) -> Dict:
        return {
            "source": package_id.source,
            "version": package_id.version,
            "description": self.source.serialize_description(
                str(self.project_dir), package_id.description
            ),
        }

    def get(self, name: str) -> Optional[PackageId]:
        """
        Return the locked identity for `name`, or None.

        Raises:
            FormatError: The stored description is malformed
        """
        entry = self._packages().get(name)
        if entry is None:
            return None
        if not isinstance(entry, dict) or not isinstance(entry.get("version"), str):
            raise FormatError(f"Malformed lockfile entry for '{name}'.")
        return self.source.parse_id(
            name, entry["version"], entry.get("description"),
            containing_dir=str(self.project_dir),
        )

    def names(self) -> list[str]:
        return list(self._packages().keys())

    def _packages(self) -> Dict:
        if self._data is None:
            self.load()
        return self._data["packages"]  # type: ignore
