"""Path checks run before anything below the Battlefield 2 folder is deleted.

Cache purging removes whole directory trees found by globbing. A match is
only removed if it lies strictly inside the Battlefield 2 folder and outside
of the profile data. A symlink is judged by where the link itself lives.
"""

from pathlib import Path

from .paths import GamePaths
from ..logging_config import get_logger

logger = get_logger("path_validator")

# Folders below the Battlefield 2 folder that hold user data, never cache
PROTECTED_SUBDIRECTORIES = [
    GamePaths.PROFILES_DIR_NAME,
]


class UnsafePathError(ValueError):
    """Raised when a path is not safe to delete."""


def is_path_under_root(path: Path, root: Path, strict: bool = False) -> bool:
    """Check if a path is under a given root directory.

    Symlinks are resolved first, so a link pointing out of root is not
    considered to be under it.

    Args:
        path: The path to check
        root: The root directory
        strict: If True, the root itself does not count as being under root

    Returns:
        True if path is under root, False otherwise
    """
    try:
        path_resolved = path.resolve()
        root_resolved = root.resolve()
    except (OSError, ValueError) as e:
        logger.warning("Failed to check path relationship: %s", e)
        return False

    if path_resolved == root_resolved:
        return not strict
    return root_resolved in path_resolved.parents


def removal_location(path: Path) -> Path:
    """Get the resolved location that removing a path actually affects.

    Removing a symlink deletes the link itself, never its target, so only
    the folder containing the link is resolved.
    """
    if path.is_symlink():
        return path.parent.resolve() / path.name
    return path.resolve()


def is_protected_path(path: Path, base_path: Path) -> bool:
    """Check whether removing a path would remove protected user data."""
    location = removal_location(path)
    for name in PROTECTED_SUBDIRECTORIES:
        protected = base_path.resolve() / name
        if location == protected or protected in location.parents or location in protected.parents:
            return True
    return False


def validate_removal_path(path: Path, base_path: Path) -> None:
    """Ensure a path may be removed recursively.

    Args:
        path: The path about to be removed
        base_path: The Battlefield 2 folder, the path must be strictly below it

    Raises:
        UnsafePathError: If the path is outside base_path or holds profile data
    """
    try:
        location = removal_location(path)
        base_resolved = base_path.resolve()
    except (OSError, ValueError) as e:
        raise UnsafePathError(f"Refusing to remove {path}: {e}") from e

    if base_resolved not in location.parents:
        logger.warning("Path %s is not below %s", path, base_path)
        raise UnsafePathError(f"Refusing to remove {path}: not below {base_path}")

    if is_protected_path(path, base_path):
        logger.warning("Path %s contains profile data", path)
        raise UnsafePathError(f"Refusing to remove {path}: contains profile data")
