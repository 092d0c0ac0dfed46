# pathsource/core/exceptions.py

"""
pathsource domain-specific exceptions.

Library code raises these; the CLI layer catches them and turns them into
readable messages and exit codes.
"""

class PathSourceError(Exception):
    """Base exception for all pathsource errors."""
    pass

# ==============================================================
# DESCRIPTION ERRORS
# ==============================================================

class FormatError(PathSourceError, ValueError):
    """Raised when a path description is malformed."""
    pass

# ==============================================================
# DEPENDENCY RESOLUTION ERRORS
# ==============================================================

class DependencyError(PathSourceError):
    """Base exception for dependency-related errors."""
    pass

class PackageNotFoundError(DependencyError):
    """Raised when a path dependency points to nothing."""
    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f'Could not find package {name} at "{path}".')

class PackageTypeError(DependencyError):
    """Raised when a path dependency points to a file instead of a directory."""
    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(
            f"Path dependency for package {name} must refer to a directory, "
            f'not a file. Was "{path}".'
        )

class PackageLinkError(DependencyError):
    """Raised when the link destination is occupied by a real file or directory."""
    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(
            f"Cannot link package {name}: destination exists and is not a link:\n    → {path}"
        )

class DependencyConflictError(DependencyError):
    """Raised when one dependency name is reached at two different locations."""
    def __init__(self, name: str, first: str, second: str):
        self.name = name
        self.first = first
        self.second = second
        super().__init__(
            f"Dependency '{name}' is declared at two different locations:\n"
            f"    → {first}\n"
            f"    → {second}"
        )

class UnsupportedSourceError(DependencyError):
    """Raised when a dependency declares a source that is not available."""
    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source
        super().__init__(f"Dependency '{name}' uses unsupported source '{source}'")

# ==============================================================
# MANIFEST ERRORS
# ==============================================================

class ManifestError(PathSourceError):
    """Base exception for manifest-related errors."""
    pass

class ManifestNotFoundError(ManifestError):
    """Raised when pkg.yaml/pkg.json is not found."""
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No manifest file found in {path}")

class ManifestLoadError(ManifestError):
    """Raised when a manifest file cannot be parsed or validated."""
    def __init__(self, path: str, details: str):
        self.path = path
        self.details = details
        super().__init__(f"Failed to load manifest {path}: {details}")

class ManifestNameMismatchError(ManifestError):
    """Raised when a manifest declares a different name than the dependency expects."""
    def __init__(self, path: str, expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'"name" field "{actual}" doesn\'t match expected name "{expected}" in {path}'
        )
