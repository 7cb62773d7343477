"""Path utilities that behave like the bash tools of the same name.

Every operation takes a path string and returns a new string. None of them
raise: a missing result is reported as the empty string.
"""

import logging
import os
from typing import List, Tuple

logger = logging.getLogger(__name__)

# Component types.
CURRENT = "."
PARENT = ".."
ROOT = "/"

SEPARATOR = "/"
EXTENSION_SEPARATOR = "."

Component = str


def is_normal(component: Component) -> bool:
    """Check if a component is a normal path segment."""
    return component not in (CURRENT, PARENT, ROOT)


def components(arg: str) -> List[Component]:
    """Split a path into its components."""
    parts = arg.split(SEPARATOR)
    result: List[Component] = []

    # Handle root.
    if parts and len(parts[0]) == 0 and len(arg) > 0:
        result.append(ROOT)
        parts = parts[1:]

    for i, part in enumerate(parts):
        # Skip empty parts.
        if len(part) == 0:
            continue
        # Skip . except at the beginning of a relative path.
        if part == CURRENT and (i > 0 or result):
            continue
        result.append(part)

    return result


def _trim_back(arg: str) -> str:
    """Drop trailing separators and trailing non-leading "." segments."""
    end = len(arg)
    while end > 1:
        if arg[end - 1] == SEPARATOR:
            end -= 1
        elif arg[end - 2 : end] == SEPARATOR + CURRENT:
            end -= 1
        else:
            break
    return arg[:end]


def _split_last(arg: str) -> Tuple[str, Component]:
    """Split a path into the text before its last component and that component.

    The first element is already trimmed. Both are empty when the path has no
    components, and the root is returned as its own last component.
    """
    trimmed = _trim_back(arg)
    if not trimmed:
        return "", ""
    if trimmed == ROOT:
        return "", ROOT
    index = trimmed.rfind(SEPARATOR)
    if index < 0:
        return "", trimmed
    return _trim_back(trimmed[: index + 1]), trimmed[index + 1 :]


class PathString:
    """Operations on pathnames, as in bash."""

    @staticmethod
    def readlink(path: str) -> str:
        """Canonicalize a path like ``readlink -f``.

        Symlinks are followed and ``.``/``..`` segments are resolved against
        the filesystem. Returns an empty string if any component is missing or
        the path cannot be resolved.

        >>> PathString.readlink("/definitely/does/not/exist")
        ''
        """
        if not path:
            return ""
        try:
            os.stat(path)
            return os.path.realpath(path, strict=True)
        except (OSError, RuntimeError, ValueError) as e:
            logger.debug("Could not canonicalize %r: %s", path, e)
            return ""

    @staticmethod
    def dirname(path: str) -> str:
        """Return the directory part of a pathname.

        >>> PathString.dirname("./qweqwe")
        '.'
        >>> PathString.dirname("/qwe/asd/zxczxc")
        '/qwe/asd'
        >>> PathString.dirname("qwe/asd/zxczxc")
        'qwe/asd'
        >>> PathString.dirname("/qwe/asd/zxczxc/")
        '/qwe/asd'
        """
        head, last = _split_last(path)
        if last == ROOT or not last:
            return ""
        return head

    @staticmethod
    def basename(path: str) -> str:
        """Return the file name part of a pathname.

        >>> PathString.basename("./qweqwe")
        'qweqwe'
        >>> PathString.basename("/qwe/asd/zxczxc")
        'zxczxc'
        >>> PathString.basename("qwe/asd/zxczxc")
        'zxczxc'
        >>> PathString.basename("/qwe/asd/zxczxc/")
        'zxczxc'
        """
        comps = components(path)
        if not comps or not is_normal(comps[-1]):
            return ""
        return comps[-1]

    @staticmethod
    def extension(path: str) -> str:
        """Return the text after the last dot of the basename.

        A leading dot counts, so ``.bashrc`` has the extension ``bashrc``.

        >>> PathString.extension("/qwe/asd/zxczxc")
        ''
        >>> PathString.extension("qwe/asd/zxczxc.wer")
        'wer'
        >>> PathString.extension("/qwe/asd/zxczxc.wer/")
        'wer'
        """
        parts = PathString.basename(path).split(EXTENSION_SEPARATOR)
        if len(parts) <= 1:
            return ""
        return parts[-1]

    @staticmethod
    def basenoext(path: str) -> str:
        """Return the basename without its extension.

        Only the segment just before the last dot is kept: ``archive.tar.gz``
        gives ``tar``.

        >>> PathString.basenoext("./qweqwe")
        'qweqwe'
        >>> PathString.basenoext("/qwe/asd/zxczxc.wer")
        'zxczxc'
        >>> PathString.basenoext("/qwe/asd/zxczxc.wer/")
        'zxczxc'
        """
        parts = PathString.basename(path).split(EXTENSION_SEPARATOR)
        if not parts:
            return ""
        if len(parts) == 1:
            return parts[0]
        parts.pop()
        return parts[-1]

    @staticmethod
    def file_stem(path: str) -> str:
        """Alias of basenoext."""
        return PathString.basenoext(path)
