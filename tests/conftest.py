"""Shared fixtures for disk usage viewer tests."""

import errno
import os

import pytest


def write_file(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small directory tree with known sizes.

    root/
        a.txt                   100
        big/
            b1.bin             5000
            nested/
                n.bin          3000
                deeper/
                    d.bin      2000
        small/
            s.txt                10
        empty/
    """
    root = tmp_path / "root"
    write_file(root / "a.txt", 100)
    write_file(root / "big" / "b1.bin", 5000)
    write_file(root / "big" / "nested" / "n.bin", 3000)
    write_file(root / "big" / "nested" / "deeper" / "d.bin", 2000)
    write_file(root / "small" / "s.txt", 10)
    (root / "empty").mkdir()
    return root


class _DeniedEntry:
    """DirEntry stand-in whose chosen methods raise PermissionError."""

    def __init__(self, entry, failing):
        self._entry = entry
        self._failing = failing
        self.name = entry.name
        self.path = entry.path

    def _check(self, method):
        if method in self._failing:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), self.path)

    def is_dir(self, follow_symlinks=True):
        self._check("is_dir")
        return self._entry.is_dir(follow_symlinks=follow_symlinks)

    def is_file(self, follow_symlinks=True):
        self._check("is_file")
        return self._entry.is_file(follow_symlinks=follow_symlinks)

    def stat(self, follow_symlinks=True):
        self._check("stat")
        return self._entry.stat(follow_symlinks=follow_symlinks)


class _Listing:
    def __init__(self, iterator, failing):
        self._iterator = iterator
        self._failing = failing

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self._iterator.close()

    def __iter__(self):
        for entry in self._iterator:
            failing = self._failing.get(entry.path, ())
            yield _DeniedEntry(entry, failing) if failing else entry


class AccessDenier:
    """Replaces os.scandir so chosen paths behave as unreadable.

    Works the same for every user, including root.
    """

    def __init__(self, scandir):
        self._scandir = scandir
        self.unlistable = set()
        self.failing = {}

    def deny_listing(self, path):
        self.unlistable.add(str(path))

    def deny_entry(self, path, *methods):
        self.failing[str(path)] = set(methods)

    def scandir(self, path="."):
        path = os.fspath(path)
        if path in self.unlistable:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        return _Listing(self._scandir(path), self.failing)


@pytest.fixture
def access_denier(monkeypatch):
    denier = AccessDenier(os.scandir)
    monkeypatch.setattr(os, "scandir", denier.scandir)
    return denier
