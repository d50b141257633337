import stat

import pytest

from conftest import FakeDirEntry, fake_stat
from fslist.utils.entry import EntryKind
from fslist.utils.errors import MetadataUnavailable
from fslist.utils.metadata import age, normalize


class TestNormalize:

    def test_file_entry(self):
        entry = normalize(FakeDirEntry('a.txt', fake_stat(size=10)), as_of=1000.0)
        assert entry.name == 'a.txt'
        assert entry.size == 10
        assert entry.kind is EntryKind.FILE
        assert entry.modified_age == 100
        assert entry.accessed_age == 50
        assert entry.created_age is None
        assert entry.readonly is False

    def test_directory_entry(self):
        entry = normalize(FakeDirEntry('sub', fake_stat(mode=stat.S_IFDIR | 0o755)), as_of=1000.0)
        assert entry.kind is EntryKind.DIR

    def test_non_regular_is_directory_kind(self):
        entry = normalize(FakeDirEntry('fifo', fake_stat(mode=stat.S_IFIFO | 0o644)), as_of=1000.0)
        assert entry.kind is EntryKind.DIR

    def test_readonly_without_write_bits(self):
        entry = normalize(FakeDirEntry('ro', fake_stat(mode=stat.S_IFREG | 0o444)), as_of=1000.0)
        assert entry.readonly is True

    def test_birthtime_preferred_over_ctime(self):
        entry = normalize(FakeDirEntry('a', fake_stat(st_birthtime=400.0)), as_of=1000.0)
        assert entry.created_age == 600

    def test_created_unknown_without_birthtime(self):
        entry = normalize(FakeDirEntry('a', fake_stat(ctime=10.0)), as_of=1000.0)
        assert entry.created_age is None

    def test_symlinks_not_followed(self):
        handle = FakeDirEntry('link', fake_stat(mode=stat.S_IFLNK | 0o777))
        entry = normalize(handle, as_of=1000.0)
        assert handle.follow_symlinks is False
        assert entry.kind is EntryKind.DIR

    def test_undecodable_name_escaped(self):
        entry = normalize(FakeDirEntry('bad\udcff', fake_stat()), as_of=1000.0)
        assert entry.name == 'bad\\xff'

    def test_ages_truncated(self):
        entry = normalize(FakeDirEntry('a', fake_stat(mtime=998.9)), as_of=1000.0)
        assert entry.modified_age == 1

    def test_clock_skew_is_not_clamped(self):
        entry = normalize(FakeDirEntry('a', fake_stat(mtime=1010.0)), as_of=1000.0)
        assert entry.modified_age == -10

    def test_stat_error(self):
        handle = FakeDirEntry('gone', error=PermissionError(13, 'Permission denied'))
        with pytest.raises(MetadataUnavailable) as exc_info:
            normalize(handle, as_of=1000.0)
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.path == handle.path

    def test_missing_timestamp(self):
        with pytest.raises(MetadataUnavailable):
            normalize(FakeDirEntry('a', fake_stat(mtime=None)), as_of=1000.0)


def test_age():
    assert age(10.0, 25.5) == 15
    assert age(25.5, 10.0) == -15
