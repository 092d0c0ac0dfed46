# pathsource/core/config.py

"""
Configuration options management for pathsource.

Per-project settings live in .pathsource/config.yaml. The packages
directory can also be set through the PATHSOURCE_PACKAGES_DIR environment
variable, which wins over the project file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from .constants import CONFIG_FILE, PACKAGES_DIR, PACKAGES_DIR_ENV

# ==============================================================
# PROJECT CONFIGURATION MANAGER CLASS
# ==============================================================

class ProjectConfig:
    """Manages configuration settings and file operations for a project."""

    def __init__(self, project_path: Path):
        self.project_path = Path(project_path)
        self.config_file = self.project_path / CONFIG_FILE
        self._data: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """Load config data and cache it. A missing or unreadable file is empty."""
        if not self.config_file.exists():
            self._data = {}
            return self._data

        try:
            content = self.config_file.read_text(encoding="utf-8")
            data = yaml.safe_load(content)
            self._data = data if isinstance(data, dict) else {}
        except (OSError, yaml.YAMLError):
            self._data = {}
        return self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get a specific setting value."""
        return self._ensure_loaded().get(key, default)

    def _ensure_loaded(self) -> Dict[str, Any]:
        if self._data is None:
            self.load()
        return self._data  # type: ignore


def get_packages_dir(project_dir: Path) -> Path:
    """
    Directory where path dependencies are linked, from:
    1. Environment variable PATHSOURCE_PACKAGES_DIR
    2. Project config .pathsource/config.yaml (key: packages_dir)
    3. Default "packages"

    Relative values are taken relative to `project_dir`.
    """
    project_dir = Path(project_dir)

    # 1. Env var (highest priority)
    if env_dir := os.getenv(PACKAGES_DIR_ENV):
        packages_dir = Path(env_dir)
    # 2. Project config
    elif cfg_dir := ProjectConfig(project_dir).get("packages_dir"):
        packages_dir = Path(str(cfg_dir))
    # 3. Default
    else:
        packages_dir = PACKAGES_DIR

    if packages_dir.is_absolute():
        return packages_dir
    return project_dir / packages_dir
