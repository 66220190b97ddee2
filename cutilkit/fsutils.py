"""File system helpers: path inspection, creation, removal and permissions.

Paths are plain strings (or path-like objects) using ``/`` as separator.
Failures raise the usual ``OSError`` subclasses; bad arguments raise
``ValueError``.
"""

from __future__ import annotations

import enum
import errno
import os
import stat
from typing import Optional, Union

PathArg = Union[str, "os.PathLike[str]"]

DEFAULT_FILE_MODE = stat.S_IRWXU | stat.S_IRGRP | stat.S_IWGRP
DEFAULT_DIR_MODE = stat.S_IRWXU | stat.S_IRGRP | stat.S_IWGRP | stat.S_IROTH
PERMISSION_BITS = stat.S_IRWXU | stat.S_IRWXG | stat.S_IRWXO

_MODE_FLAGS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


class PathType(enum.Enum):
    """What a path points to."""

    FILE = "file"
    DIRECTORY = "directory"
    NO_EXISTS = "no_exists"
    NOT_VALID = "not_valid"


def identify_path(path: Optional[PathArg]) -> PathType:
    """Classify ``path`` as a file, a directory, missing, or something else."""
    if path is None:
        return PathType.NOT_VALID
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return PathType.NO_EXISTS
    except (OSError, ValueError):
        return PathType.NOT_VALID
    if stat.S_ISDIR(mode):
        return PathType.DIRECTORY
    if stat.S_ISREG(mode):
        return PathType.FILE
    return PathType.NOT_VALID


def is_symlink(path: Optional[PathArg]) -> bool:
    """Whether ``path`` is itself a symbolic link."""
    if path is None:
        return False
    return os.path.islink(path)


def cwd() -> str:
    """The current working directory."""
    return os.getcwd()


def resolve_path(path: PathArg) -> str:
    """Make ``path`` absolute, resolving its longest existing leading part.

    The part of the path that does not exist is kept as given. The result
    never ends with a ``/`` unless it is the root itself.
    """
    path = os.fspath(path)
    if path == ".":
        return cwd()

    result: Optional[str] = None
    pos = path.rfind("/")
    while pos != -1:
        head, tail = path[:pos], path[pos + 1:]
        base = head or "/"
        if os.path.exists(base):
            result = _join(os.path.realpath(base), tail)
            break
        pos = path.rfind("/", 0, pos)

    if result is None:
        result = _join(cwd(), path)

    if len(result) > 1 and result.endswith("/"):
        result = result[:-1]
    return result


def _join(base: str, rest: str) -> str:
    return base + rest if base.endswith("/") else f"{base}/{rest}"


def combine_filepath(path: Optional[PathArg], filename: Optional[PathArg]) -> str:
    """Join ``path`` and ``filename`` with exactly one ``/`` between them."""
    if path is None and filename is None:
        raise ValueError("path and filename cannot both be None")
    if path is None:
        return os.fspath(filename)
    if filename is None:
        return os.fspath(path)
    path = os.fspath(path)
    if path.endswith("/"):
        path = path[:-1]
    return f"{path}/{os.fspath(filename)}"


def rename(path: PathArg, new_path: PathArg) -> None:
    """Rename ``path`` to ``new_path``."""
    os.rename(path, new_path)


def move(path: PathArg, new_path: PathArg) -> None:
    """Move ``path`` to ``new_path``."""
    rename(path, new_path)


def touch(path: PathArg, mode: int = DEFAULT_FILE_MODE) -> None:
    """Create ``path`` if missing and set its permissions to ``mode``."""
    fd = os.open(path, os.O_CREAT, mode)
    os.close(fd)
    if identify_path(path) is not PathType.FILE:
        raise OSError(errno.EINVAL, "not a regular file", os.fspath(path))
    set_permissions(path, mode)


def remove_file(path: PathArg) -> None:
    """Delete the regular file at ``path``."""
    kind = identify_path(path)
    if kind is PathType.NO_EXISTS:
        raise FileNotFoundError(errno.ENOENT, "no such file", os.fspath(path))
    if kind is not PathType.FILE:
        raise ValueError(f"not a regular file: {path!r}")
    os.remove(path)


def _make_dir(path: str, mode: int) -> None:
    try:
        os.mkdir(path, mode)
    except FileExistsError:
        pass


def mkdir(path: PathArg, recursive: bool = False, mode: int = DEFAULT_DIR_MODE) -> bool:
    """Create the directory ``path``, with its parents if ``recursive``.

    Returns False if ``path`` already exists and True if it was created.
    """
    path = os.fspath(path)
    if not path:
        raise ValueError("path must not be empty")
    try:
        os.stat(path)
    except OSError:
        pass
    else:
        return False

    if not recursive:
        _make_dir(path, mode)
        return True

    target = resolve_path(path) + "/"
    pos = target.find("/", 1)
    while pos != -1:
        _make_dir(target[:pos], mode)
        pos = target.find("/", pos + 1)
    return True


def rmdir(path: PathArg, recursive: bool = False) -> None:
    """Remove the directory ``path``; with ``recursive``, its contents too."""
    kind = identify_path(path)
    if kind is PathType.NO_EXISTS:
        raise FileNotFoundError(errno.ENOENT, "no such directory", os.fspath(path))
    if kind is not PathType.DIRECTORY:
        raise NotADirectoryError(errno.ENOTDIR, "not a directory", os.fspath(path))

    if not recursive:
        os.rmdir(path)
        return

    try:
        os.rmdir(path)
        return
    except OSError as exc:
        if exc.errno not in (errno.ENOTEMPTY, errno.EEXIST):
            raise

    for name in list_dir(path):
        child = combine_filepath(path, name)
        child_kind = identify_path(child)
        if child_kind is PathType.FILE:
            remove_file(child)
        elif child_kind is PathType.DIRECTORY:
            rmdir(child, recursive=True)
        else:
            raise OSError(errno.EINVAL, "cannot remove entry", child)
    os.rmdir(path)


def list_dir(path: PathArg) -> list[str]:
    """Names of the entries in directory ``path``, sorted."""
    if identify_path(path) is not PathType.DIRECTORY:
        raise NotADirectoryError(errno.ENOTDIR, "not a directory", os.fspath(path))
    return sorted(os.listdir(path))


def get_raw_mode(path: PathArg) -> int:
    """The full ``st_mode`` of ``path``, file type bits included."""
    return os.stat(path).st_mode


def get_permissions(path: PathArg) -> int:
    """The permission bits of ``path``."""
    return get_raw_mode(path) & PERMISSION_BITS


def set_permissions(path: PathArg, mode: int) -> None:
    """Set the permission bits of a file or directory."""
    if identify_path(path) not in (PathType.FILE, PathType.DIRECTORY):
        raise ValueError(f"not a file or directory: {path!r}")
    os.chmod(path, mode)


def mode_to_string(mode: int) -> str:
    """Render ``mode`` as a ten character string such as ``drwxrwxrwx``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & flag else "-" for flag, ch in _MODE_FLAGS)


def string_to_mode(s: str) -> int:
    """Parse a ten character permission string into permission bits.

    The first (file type) character is ignored.
    """
    if s is None or len(s) != 10:
        raise ValueError(f"invalid permission string: {s!r}")
    mode = 0
    for (flag, ch), given in zip(_MODE_FLAGS, s[1:]):
        if given == ch:
            mode |= flag
    return mode