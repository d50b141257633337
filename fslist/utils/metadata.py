import stat
from typing import Any, Optional

from fslist.utils.entry import Entry, EntryKind
from fslist.utils.errors import MetadataUnavailable

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def normalize(handle: Any, as_of: float) -> Entry:
    """Build an entry from a directory entry handle.

    Symbolic links are described by their own metadata, not their target's,
    so a link is never a file entry and a dangling link is still listed.

    Parameters
    ----------
    handle : os.DirEntry
        Directory entry, or any object with ``name``, ``path`` and ``stat()``.
    as_of : float
        Reference timestamp the ages are computed against.

    Returns
    -------
    Entry
        Normalized entry.

    Raises
    ------
    MetadataUnavailable
        If metadata can not be read or a required timestamp is missing.
    """
    path = display_name(getattr(handle, 'path', handle.name))
    try:
        st = handle.stat(follow_symlinks=False)
    except OSError as err:
        raise MetadataUnavailable(f"Can't read metadata of '{path}': {err.strerror or err}", path) from err

    modified = _required_time(st, 'st_mtime', path)
    accessed = _required_time(st, 'st_atime', path)
    # no birth time on most Linux file systems
    created = getattr(st, 'st_birthtime', None)

    return Entry(
        name=display_name(handle.name),
        size=st.st_size,
        modified_age=age(modified, as_of),
        accessed_age=age(accessed, as_of),
        created_age=age(created, as_of) if created is not None else None,
        kind=EntryKind.FILE if stat.S_ISREG(st.st_mode) else EntryKind.DIR,
        readonly=not st.st_mode & WRITE_BITS,
    )


def display_name(name: str) -> str:
    """Escape bytes that are not valid UTF-8, e.g. ``bad\\xff``."""
    return name.encode('utf-8', 'surrogateescape').decode('utf-8', 'backslashreplace')


def age(timestamp: float, as_of: float) -> int:
    # truncates toward zero, negative values are kept
    return int(as_of - timestamp)


def _required_time(st: Any, attr: str, path: str) -> float:
    value: Optional[float] = getattr(st, attr, None)
    if value is None:
        raise MetadataUnavailable(f"'{path}' has no {attr} timestamp", path)
    return value
