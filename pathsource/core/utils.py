import os
import stat
import uuid
from pathlib import Path
from typing import Optional, Union

from .exceptions import PackageLinkError

# ==============================================================
# FILESYSTEM PRIMITIVES
# ==============================================================

def _stat(path: Union[str, Path]) -> Optional[os.stat_result]:
    """Stat `path` following links; None when nothing is there.

    Other OSErrors (permissions, I/O) are left to the caller.
    """
    try:
        return os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return None


def dir_exists(path: Union[str, Path]) -> bool:
    """Return True if `path` is an existing directory (links followed)."""
    st = _stat(path)
    return st is not None and stat.S_ISDIR(st.st_mode)


def file_exists(path: Union[str, Path]) -> bool:
    """Return True if something other than a directory exists at `path`."""
    st = _stat(path)
    return st is not None and not stat.S_ISDIR(st.st_mode)


def canonicalize(path: Union[str, Path]) -> str:
    """Absolute path with symlinks resolved and case normalized for the platform."""
    return os.path.normcase(os.path.realpath(path))


def create_package_symlink(
    name: str,
    target: Union[str, Path],
    symlink: Union[str, Path],
    relative: bool = False
) -> None:
    """
    Create a symlink at `symlink` pointing to the package directory `target`.

    With `relative`, the link text is the path from the link's (canonical)
    parent directory to `target`, so moving both together keeps it valid.
    Windows always gets an absolute link.

    An existing link is swapped out atomically: the new link is created
    under a temporary name and renamed over it, so the old one stays in
    place if creation fails.

    Raises:
        PackageLinkError: `symlink` exists and is not a link
    """
    symlink_path = Path(symlink)

    if os.path.lexists(symlink_path) and not symlink_path.is_symlink():
        raise PackageLinkError(name, str(symlink_path))

    symlink_path.parent.mkdir(parents=True, exist_ok=True)

    target = os.path.abspath(target)
    if relative and os.name != "nt":
        link_dir = os.path.realpath(symlink_path.parent)
        target = os.path.relpath(target, link_dir)

    tmp_path = symlink_path.parent / f".{symlink_path.name}.{uuid.uuid4().hex}.tmp"
    os.symlink(target, tmp_path, target_is_directory=True)
    try:
        os.replace(tmp_path, symlink_path)
    except OSError:
        os.unlink(tmp_path)
        raise
