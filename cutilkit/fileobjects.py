"""Objects describing a single file or a directory listing."""

from __future__ import annotations

import errno
import os
import stat
from typing import Optional

from cutilkit.fsutils import (
    PERMISSION_BITS,
    PathArg,
    PathType,
    combine_filepath,
    identify_path,
    is_symlink,
    list_dir,
    resolve_path,
)
from cutilkit.stringlib import split_lines


def _split_path(filepath: str) -> tuple[str, str]:
    """Split ``filepath`` into its directory part and file name."""
    slash = filepath.rfind("/")
    if slash == -1:
        return ".", filepath
    return filepath[: slash + 1], filepath[slash + 1:]


class FileInfo:
    """Information about a regular file, with lazy access to its contents.

    ``buffer`` holds the raw bytes once read; ``lines`` holds the
    non-empty lines once parsed, split on newline, carriage return and
    form feed.
    """

    def __init__(self, filepath: PathArg) -> None:
        filepath = os.fspath(filepath)
        st = os.stat(filepath)
        if stat.S_ISDIR(st.st_mode):
            raise IsADirectoryError(errno.EISDIR, "is a directory", filepath)
        if not stat.S_ISREG(st.st_mode):
            raise ValueError(f"not a regular file: {filepath!r}")

        self.mode: int = st.st_mode
        self.filesize: int = st.st_size
        self.is_symlink: bool = is_symlink(filepath)

        directory, self.filename = _split_path(filepath)
        self.basedir: str = os.path.realpath(directory)
        self.absolute_path: str = combine_filepath(self.basedir, self.filename)

        dot = self.filename.rfind(".")
        self.extension: Optional[str] = (
            self.filename[dot + 1:] if dot != -1 and dot + 1 < len(self.filename) else None
        )

        self.buffer: Optional[bytes] = None
        self.lines: Optional[list[str]] = None

    def __repr__(self) -> str:
        return f"FileInfo({self.absolute_path!r})"

    @property
    def num_lines(self) -> int:
        """Number of lines parsed so far; 0 before parsing."""
        return len(self.lines) if self.lines is not None else 0

    def permissions(self) -> int:
        """The permission bits of the file."""
        return self.mode & PERMISSION_BITS

    def read_file(self) -> bytes:
        """Read the file's contents into ``buffer`` and return them."""
        self.buffer = None
        full_path = combine_filepath(self.basedir, self.filename)
        with open(full_path, "rb") as handle:
            data = handle.read(self.filesize)
        if len(data) != self.filesize:
            raise OSError(
                errno.EIO,
                f"expected {self.filesize} bytes, read {len(data)}",
                full_path,
            )
        self.buffer = data
        return data

    def parse_lines(self) -> list[str]:
        """Split the contents into non-empty lines, reading the file if needed."""
        if self.buffer is None:
            self.read_file()
        assert self.buffer is not None
        text = self.buffer.decode("utf-8", errors="surrogateescape")
        self.lines = split_lines(text)
        return self.lines


class DirectoryInfo:
    """A sorted listing of a directory, split into sub-directories and files.

    Anything that is not a directory (files, links to files, other
    entries) is counted among the files.
    """

    def __init__(self, path: PathArg) -> None:
        if identify_path(path) is not PathType.DIRECTORY:
            raise NotADirectoryError(errno.ENOTDIR, "not a directory", os.fspath(path))
        self.full_path: str = resolve_path(path)
        self.items: list[str] = []
        self.items_full_path: list[str] = []
        self.dirs: list[str] = []
        self.dirs_full_path: list[str] = []
        self.files: list[str] = []
        self.files_full_path: list[str] = []
        self.update_list()

    def __repr__(self) -> str:
        return f"DirectoryInfo({self.full_path!r})"

    def update_list(self) -> None:
        """Re-read the directory's entries."""
        names = list_dir(self.full_path)
        items_full: list[str] = []
        dirs: list[str] = []
        dirs_full: list[str] = []
        files: list[str] = []
        files_full: list[str] = []
        for name in names:
            full = combine_filepath(self.full_path, name)
            items_full.append(full)
            if identify_path(full) is PathType.DIRECTORY:
                dirs.append(name)
                dirs_full.append(full)
            else:
                files.append(name)
                files_full.append(full)
        self.items = names
        self.items_full_path = items_full
        self.dirs = dirs
        self.dirs_full_path = dirs_full
        self.files = files
        self.files_full_path = files_full