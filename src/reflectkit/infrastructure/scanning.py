"""Scanning service: lazy entries of an archive or a directory tree.

Entries carry a name relative to the scan root and read their bytes only
when asked. Listing errors of the root itself propagate as OSError /
zipfile.BadZipFile; reading errors surface from ScanEntry.read().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import zipfile
    from collections.abc import Callable, Iterator


@dataclass(frozen=True, slots=True)
class ScanEntry:
    """Single file of a scan.

    Attributes:
        name: Path relative to the scan root, as stored (either separator)
        origin: Printable location (archive path + member, or file path)
        read: Returns the entry's bytes
    """

    name: str
    origin: str
    read: Callable[[], bytes]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("entry name must not be empty")
        if not callable(self.read):
            raise TypeError("read must be callable")

    @classmethod
    def for_file(cls, path: Path, root: Path) -> ScanEntry:
        """Entry for a file below a directory root."""
        return cls(name=path.relative_to(root).as_posix(), origin=str(path), read=path.read_bytes)


def iter_archive(archive: zipfile.ZipFile, origin: str) -> Iterator[ScanEntry]:
    """Yield file entries of an open zip archive in listing order.

    Args:
        archive: Open archive, must stay open while entries are read
        origin: Archive path used to build entry origins
    """
    for info in archive.infolist():
        if info.is_dir():
            continue
        member = info.filename
        yield ScanEntry(
            name=member,
            origin=f"{origin}/{member}",
            read=lambda member=member: archive.read(member),
        )


def iter_directory(
    root: Path,
    skip_directories: frozenset[str] = frozenset(),
    on_error: Callable[[Path, OSError], None] | None = None,
) -> Iterator[Path]:
    """Yield regular files under root, depth-first in sorted order.

    Directories named in skip_directories are not descended into.
    A subdirectory that cannot be listed is passed to on_error and skipped.

    Raises:
        NotADirectoryError: If root is not a directory
        OSError: If root itself cannot be listed
    """
    if not root.is_dir():
        raise NotADirectoryError(f"not a directory: {root}")

    # Listing the root eagerly so that an unreadable root fails the call,
    # not the first iteration
    children = _list(root)
    return _walk(children, skip_directories, on_error)


def _list(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda e: e.name)


def _walk(
    children: list[os.DirEntry[str]],
    skip_directories: frozenset[str],
    on_error: Callable[[Path, OSError], None] | None,
) -> Iterator[Path]:
    for child in children:
        path = Path(child.path)
        if child.is_dir(follow_symlinks=False):
            if child.name in skip_directories:
                continue
            try:
                nested = _list(path)
            except OSError as e:
                if on_error is not None:
                    on_error(path, e)
                continue
            yield from _walk(nested, skip_directories, on_error)
        elif child.is_file():
            yield path
