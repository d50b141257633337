import os
from types import SimpleNamespace

import pytest

from fslist.utils.entry import Entry, EntryKind, EntrySet


@pytest.fixture
def sample_dir(tmp_path):
    (tmp_path / 'a.txt').write_bytes(b'0123456789')
    (tmp_path / '.hidden').write_bytes(b'')
    (tmp_path / 'sub').mkdir()
    return tmp_path


def scan_order(path):
    with os.scandir(path) as it:
        return [entry.name for entry in it]


def make_entry(name, kind=EntryKind.FILE, size=0):
    return Entry(
        name=name,
        size=size,
        modified_age=1,
        accessed_age=2,
        created_age=3,
        kind=kind,
        readonly=False,
    )


def make_set(*names):
    return EntrySet([make_entry(name) for name in names])


class FakeDirEntry:
    def __init__(self, name, stat_result=None, error=None):
        self.name = name
        self.path = os.path.join('fake', name)
        self._stat = stat_result
        self._error = error
        self.follow_symlinks = None

    def stat(self, follow_symlinks=True):
        self.follow_symlinks = follow_symlinks
        if self._error is not None:
            raise self._error
        return self._stat


def fake_stat(mode=0o100644, size=0, mtime=900.0, atime=950.0, ctime=800.0, **extra):
    return SimpleNamespace(st_mode=mode, st_size=size, st_mtime=mtime, st_atime=atime, st_ctime=ctime, **extra)
