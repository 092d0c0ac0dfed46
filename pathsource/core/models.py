# pathsource/core/models.py

"""
Core models for pathsource.

This module contains the manifest definition read from a package directory
and the typed records describing a path dependency: its description, the
reference that names it and the identity produced once its version is known.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

import semver
from pydantic import (
    BaseModel,
    Field,
    field_validator,
    ConfigDict,
)

# ==============================================================
# PATH DESCRIPTION
# ==============================================================

class PathDescription(BaseModel):
    """
    Location of a path dependency.

    `path` is always the joined, normalized form. `is_relative` records how
    the dependency was spelled in its manifest and is never recomputed from
    `path`. The serialized alias of `is_relative` is `relative`.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str = Field(..., description="Joined and normalized dependency path")
    is_relative: bool = Field(
        ...,
        alias="relative",
        description="True if the path was written relative to its manifest"
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return the portable two-field form: {"path": ..., "relative": ...}."""
        return self.model_dump(by_alias=True)

# ==============================================================
# PACKAGE REFERENCES AND IDENTITIES
# ==============================================================

class PackageRef(BaseModel):
    """A dependency by name, via a source, at a location. No version."""
    model_config = ConfigDict(frozen=True)

    name: str
    source: str = "path"
    description: PathDescription

    def __str__(self) -> str:
        return f"{self.name} from {self.source}"

class PackageId(PackageRef):
    """A PackageRef plus the version declared by the target's own manifest."""

    version: str

    def to_ref(self) -> PackageRef:
        return PackageRef(name=self.name, source=self.source, description=self.description)

    def __str__(self) -> str:
        return f"{self.name} {self.version} from {self.source}"

# ==============================================================
# MANIFEST
# ==============================================================

NAME_PATTERN = r"^[A-Za-z0-9_\-\.]+$"

class Manifest(BaseModel):
    """
    Package manifest (pkg.yaml / pkg.json).

    Only `name` and `version` are needed to resolve a path dependency;
    other keys are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        pattern=NAME_PATTERN,
        description="Package name (alphanumeric, hyphens, underscores, dots only)"
    )

    version: str = Field(
        ...,
        description="Semantic Versioning string (e.g. 1.0.0)"
    )

    description: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Short package description"
    )

    dependencies: Dict[str, Any] = Field(
        default_factory=dict,
        description="Dependencies; path dependencies are written as {path: <dir>}"
    )

    @field_validator("version")
    @classmethod
    def validate_semver(cls, v: str) -> str:
        """Strict SemVer validation."""
        v = v.strip()
        try:
            semver.Version.parse(v)
        except ValueError:
            raise ValueError(
                "version must follow SemVer format (e.g. 1.0.0, 2.1.3-beta.1)"
            )
        return v

    @field_validator("dependencies", mode="before")
    @classmethod
    def validate_dependencies(cls, v: Any) -> Dict[str, Any]:
        """
        Shape check of the dependencies section.

        Note: path existence is not checked here; it is deferred to
        resolution time.
        """
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("dependencies must be a dictionary")
        return v
