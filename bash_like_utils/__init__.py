"""Bash-like pathname utilities.

This package provides ``PathString``, a namespace of functions that behave
like ``readlink -f``, ``dirname`` and ``basename``, plus ``extension`` and
``basenoext``. The same functions are exported at module level.
"""

from bash_like_utils import path
from bash_like_utils.path import PathString

# Re-export the operations as free functions.
readlink = PathString.readlink
dirname = PathString.dirname
basename = PathString.basename
extension = PathString.extension
basenoext = PathString.basenoext
file_stem = PathString.file_stem

__all__ = [
    # Path
    "path",
    "PathString",
    # Operations
    "readlink",
    "dirname",
    "basename",
    "extension",
    "basenoext",
    "file_stem",
]
