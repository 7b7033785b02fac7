"""Pure path string helpers.

Nothing in this module touches the filesystem. Paths are plain strings
and are never normalized beyond what each helper documents.
"""

import os
import re

# Drive roots such as "C:\" or "C:/"
_DRIVE_ROOT = re.compile(r"^[A-Za-z]:[\\/]$")
_DRIVE_PREFIX = re.compile(r"^([A-Za-z]:[\\/])(.*)$", re.DOTALL)
_ANY_SEPARATOR = re.compile(r"[\\/]+")

_SEPARATOR_RUN = re.compile(re.escape(os.sep) + "{2,}")


def join(*segments: str) -> str:
    """Join path segments with the platform separator.

    Empty segments are ignored and any run of consecutive separators in
    the result is collapsed into a single one.

    Args:
        *segments: Path segments to join.

    Returns:
        The joined path.

    Example:
        >>> join("a", "", "b")
        'a/b'
        >>> join("a/", "/b")
        'a/b'
    """
    parts = [segment for segment in segments if segment != ""]
    return _SEPARATOR_RUN.sub(os.sep, os.sep.join(parts))


def is_root(path: str) -> bool:
    """Check whether a path denotes a filesystem root.

    Recognizes a bare separator ("/" or "\\") and drive roots ("C:\\").

    Args:
        path: Path string to check.

    Returns:
        True if the path is a root, False otherwise.
    """
    if path in ("/", "\\"):
        return True
    return _DRIVE_ROOT.match(path) is not None


def _trim_trailing(path: str) -> str:
    """Remove trailing separators unless the path is a root."""
    if is_root(path):
        return path
    trimmed = path.rstrip("/" + os.sep)
    return trimmed or path[:1]


def basename(path: str) -> str:
    """Return the final component of a path.

    Trailing separators are ignored, so "/a/b/" yields "b".
    A root path yields an empty string.
    """
    if is_root(path):
        return ""
    return os.path.basename(_trim_trailing(path))


def strip_segments(path: str, levels: int) -> str:
    """Remove trailing components from a path.

    Works on the string only. Stripping past the top of the path clamps
    to the root for absolute paths and to "." for relative ones. Paths
    with a drive prefix ("C:\\a") clamp to the drive root on every platform.

    Args:
        path: Path string to shorten.
        levels: Number of trailing components to remove (>= 1).

    Returns:
        The shortened path.
    """
    drive = _DRIVE_PREFIX.match(path)
    if drive is not None:
        root, rest = drive.groups()
        parts = [part for part in _ANY_SEPARATOR.split(rest) if part]
        kept = parts[: max(len(parts) - levels, 0)]
        return root + root[-1].join(kept)

    current = _trim_trailing(path)
    for _ in range(levels):
        if is_root(current):
            break
        parent = os.path.dirname(current)
        if parent == "":
            return "."
        current = parent
    return current
