import os

real_scandir = os.scandir


def make_tree(root, layout):
    """Create files and directories under root from a nested dict.

    Values are either a dict (subdirectory) or an int (file of that many bytes).
    """
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            path.mkdir()
            make_tree(path, value)
        else:
            path.write_bytes(b'x' * value)
    return root


def failing_scandir(*paths):
    """os.scandir replacement that raises PermissionError for the given paths."""
    bad = {os.fspath(p) for p in paths}

    def scandir(path='.'):
        if os.fspath(path) in bad:
            raise PermissionError(13, 'Permission denied', os.fspath(path))
        return real_scandir(path)
    return scandir


class BrokenTypeEntry:
    def __init__(self, entry):
        self._entry = entry
        self.name = entry.name
        self.path = entry.path

    def is_dir(self, *, follow_symlinks=True):
        raise OSError(5, 'Input/output error', self.path)

    def is_file(self, *, follow_symlinks=True):
        raise OSError(5, 'Input/output error', self.path)


class FlakyIterator:
    """Wraps a scandir iterator, raising OSError before the first entry and
    replacing entries named in broken_names with BrokenTypeEntry."""

    def __init__(self, it, fail_first=False, broken_names=()):
        self.it = it
        self.fail_first = fail_first
        self.broken_names = set(broken_names)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.it.close()
        return False

    def __iter__(self):
        return self

    def __next__(self):
        if self.fail_first:
            self.fail_first = False
            raise OSError(5, 'Input/output error')
        entry = next(self.it)
        if entry.name in self.broken_names:
            return BrokenTypeEntry(entry)
        return entry


def flaky_scandir(target, fail_first=False, broken_names=()):
    target = os.fspath(target)

    def scandir(path='.'):
        it = real_scandir(path)
        if os.fspath(path) == target:
            return FlakyIterator(it, fail_first, broken_names)
        return it
    return scandir
