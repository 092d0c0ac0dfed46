# pathsource/core/file_reading.py

"""
Manifest reading for pathsource.

A package directory carries its manifest as pkg.yaml or pkg.json; YAML
takes precedence when both exist.
"""

import json
import yaml
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .constants import MANIFEST_FILES, MANIFEST_YAML
from .models import Manifest
from .exceptions import (
    ManifestLoadError,
    ManifestNotFoundError,
    ManifestNameMismatchError,
)

def find_manifest_file(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Locate the manifest file for `path`.

    Args:
        path:
            - None: current directory
            - Path to file (pkg.yaml/pkg.json)
            - Directory (searches for manifest inside it)

    Raises:
        ManifestLoadError: Invalid filename
        ManifestNotFoundError: No manifest found
    """
    if path is None:
        path = Path.cwd()

    path = Path(path)

    if path.is_file():
        if path.name not in MANIFEST_FILES:
            raise ManifestLoadError(
                str(path), f"invalid file name, expected one of {', '.join(MANIFEST_FILES)}"
            )
        return path

    if path.is_dir():
        for file_name in MANIFEST_FILES:
            candidate = path / file_name
            if candidate.exists():
                return candidate

    raise ManifestNotFoundError(str(path))

def load_manifest(
    path: Optional[Union[str, Path]] = None,
    expected_name: Optional[str] = None
) -> Manifest:
    """
    Load pkg.yaml OR pkg.json.

    Args:
        path: Directory or manifest file (see find_manifest_file)
        expected_name: If given, the manifest's `name` must equal it

    Returns:
        Manifest instance

    Raises:
        ManifestNotFoundError: No manifest found
        ManifestLoadError: Unreadable or invalid manifest
        ManifestNameMismatchError: Declared name differs from expected_name

    Example:
        >>> manifest = load_manifest("path/to/shared", expected_name="shared")
        >>> print(manifest.version)
    """
    manifest_path = find_manifest_file(path)

    if manifest_path.name == MANIFEST_YAML:
        manifest = _load_from_yaml(manifest_path)
    else:
        manifest = _load_from_json(manifest_path)

    if expected_name is not None and manifest.name != expected_name:
        raise ManifestNameMismatchError(str(manifest_path), expected_name, manifest.name)

    return manifest

def _load_from_yaml(path: Path) -> Manifest:
    """Load and parse a pkg.yaml manifest file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ManifestLoadError(str(path), str(e))
    return _validate(path, data)

def _load_from_json(path: Path) -> Manifest:
    """Load and parse a pkg.json manifest file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestLoadError(str(path), str(e))
    return _validate(path, data)

def _validate(path: Path, data) -> Manifest:
    if data is None:
        raise ManifestLoadError(str(path), f"{path.name} is empty")
    if not isinstance(data, dict):
        raise ManifestLoadError(str(path), f"{path.name} must contain a mapping")
    try:
        return Manifest.model_validate(data)
    except ValidationError as e:
        raise ManifestLoadError(str(path), str(e))
