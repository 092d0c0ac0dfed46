# pathsource/__init__.py

from .core.exceptions import (
    PathSourceError,
    FormatError,
    DependencyError,
    PackageNotFoundError,
    PackageTypeError,
    PackageLinkError,
    ManifestError,
)
from .core.models import PathDescription, PackageRef, PackageId, Manifest
from .core.path_source import PathSource, BoundPathSource, validate_path
from .core.system_cache import SystemCache

__all__ = [
    'PathSourceError',
    'FormatError',
    'DependencyError',
    'PackageNotFoundError',
    'PackageTypeError',
    'PackageLinkError',
    'ManifestError',
    'PathDescription',
    'PackageRef',
    'PackageId',
    'Manifest',
    'PathSource',
    'BoundPathSource',
    'validate_path',
    'SystemCache',
]
