"""Path normalization and parent/child tests over separator-delimited keys."""

from typing import List, Optional

from common.constants import PATH_SEPARATOR, ROOT_PATH


def trim(path: Optional[str]) -> Optional[str]:
    """
    Strip surrounding whitespace and any trailing separators.

    The root path is returned as-is.

    Args:
        path: Raw path string (may be None)

    Returns:
        Canonical path, or the input unchanged when it is None or empty
    """
    if path is None:
        return None
    path = path.strip()
    while len(path) > 1 and path.endswith(PATH_SEPARATOR):
        path = path[:-1]
    return path


def components(path: Optional[str], from_index: int = 0) -> Optional[List[str]]:
    """
    Split a path into its segments, starting the search at from_index.

    A separator located exactly at from_index is dropped together with
    everything before it, otherwise the whole path is split. Empty segments
    are discarded.

    Args:
        path: Path to decompose
        from_index: Offset at which the first separator is searched

    Returns:
        Ordered list of segments, or None if no separator occurs at or
        after from_index
    """
    if path is None:
        return None
    path = path.strip()
    index = path.find(PATH_SEPARATOR, from_index)
    if index == -1:
        return None
    if index == from_index:
        path = path[from_index + 1:]
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def is_direct_child_of(parent: Optional[str], child: Optional[str]) -> bool:
    """
    Check whether child sits exactly one segment below parent.

    Args:
        parent: Canonical parent path
        child: Candidate child path

    Returns:
        True if child is a direct child of parent, False otherwise
    """
    if parent is None or child is None:
        return False
    if not child.startswith(parent):
        return False
    # the root already ends with a separator, so step back onto it
    from_index = len(parent) - 1 if parent == ROOT_PATH else len(parent)
    if child.find(PATH_SEPARATOR, from_index) != from_index:
        return False
    segments = components(child, from_index)
    return segments is not None and len(segments) == 1


def join(parent: str, child: str) -> str:
    """Join two path fragments with a single separator and trim the result."""
    return trim(parent.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR + child.lstrip(PATH_SEPARATOR))


def name_of(path: str) -> str:
    """Last segment of a canonical path ("" for the root)."""
    return path[path.rfind(PATH_SEPARATOR) + 1:]


def parent_of(path: str) -> Optional[str]:
    """
    Parent of a canonical path.

    Returns:
        The prefix before the last separator, the root for top-level paths,
        or None for the root itself and for separator-free paths
    """
    if path == ROOT_PATH:
        return None
    index = path.rfind(PATH_SEPARATOR)
    if index == -1:
        return None
    if index == 0:
        return ROOT_PATH
    return path[:index]
