"""
sprout.paths - Destination Path Resolution
==========================================

Maps a path inside the template tree to the matching path inside the
destination tree. This is plain string manipulation; nothing here touches
the filesystem.
"""

from __future__ import annotations

import os


def resolve_destination_path(
    source_root: str,
    destination_root: str,
    source_tree_path: str,
) -> str:
    """
    Compute where a template tree entry lands in the destination tree.

    The first occurrence of ``source_root`` is removed from
    ``source_tree_path``, one leading separator is stripped, and the
    remainder is joined onto ``destination_root``.

    Parameters
    ----------
    source_root : str
        Root of the template tree.

    destination_root : str
        Root of the destination tree.

    source_tree_path : str
        ``source_root`` itself or a path beneath it. Other paths give an
        undefined result.

    Returns
    -------
    str
        The destination path. Resolving ``source_root`` itself returns
        ``destination_root`` unchanged.

    Examples
    --------
    >>> resolve_destination_path("tpl", "out", "tpl/widget/README.md")
    'out/widget/README.md'
    >>> resolve_destination_path("tpl", "out", "tpl")
    'out'
    """
    relative = source_tree_path.replace(source_root, "", 1)
    if relative.startswith(os.sep):
        relative = relative[1:]

    if not relative:
        return destination_root

    return os.path.join(destination_root, relative)
