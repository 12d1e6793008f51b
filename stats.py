import logging
import os

import config
from loghist import Histogram, HistogramRangeError


class DirStats:
    def __init__(self):
        # number of directories visited, the walk root excluded
        self.count = 0
        self.dirs = Histogram(*config.dir_histogram_shape)
        self.files = Histogram(*config.dir_histogram_shape)
        self.entries = Histogram(*config.dir_histogram_shape)
        self.access_errors = 0


class FileStats:
    def __init__(self):
        self.count = 0
        self.size = Histogram(*config.file_size_shape)
        self.block_count = Histogram(*config.file_block_count_shape)
        self.block_size = Histogram(*config.file_block_size_shape)
        self.access_errors = 0
        self.out_of_range = 0


class StatsCollector:
    """Visitors for walker.walk that fold every entry into FileStats and DirStats."""

    def __init__(self, files: FileStats, dirs: DirStats, progress):
        self.files = files
        self.dirs = dirs
        self.progress = progress

    def visit_file(self, entry):
        self.progress.update(entry.path, self.files, self.dirs)
        self.files.count += 1
        try:
            st = os.stat(entry.path)
        except OSError as e:
            logging.debug('Cannot stat %s: %s', entry.path, e)
            self.files.access_errors += 1
            return
        samples = [
            (self.files.size, st.st_size),
            (self.files.block_size, st.st_blksize),
            (self.files.block_count, st.st_blocks),
        ]
        # all three values must fit before any is recorded
        try:
            for histogram, value in samples:
                histogram.index_of(value)
        except HistogramRangeError as e:
            logging.warning('Skipping %s: %s', entry.path, e)
            self.files.out_of_range += 1
            return
        for histogram, value in samples:
            histogram.add(value)

    def visit_dir(self, entry):
        self.progress.update(entry.path, self.files, self.dirs)
        self.dirs.count += 1
        self.record_children(entry.path)

    def record_children(self, path):
        """Record the direct subdirectory and file counts of path.

        Symlinks and special files count as neither. A listing that cannot be
        opened, or a child whose type cannot be read, discards the count and
        is tallied in DirStats.access_errors.
        """
        dir_count = 0
        file_count = 0
        try:
            with os.scandir(path) as it:
                while True:
                    try:
                        entry = next(it)
                    except StopIteration:
                        break
                    except OSError:
                        continue
                    if entry.is_dir(follow_symlinks=False):
                        dir_count += 1
                    elif entry.is_file(follow_symlinks=False):
                        file_count += 1
        except OSError as e:
            logging.debug('Cannot count entries of %s: %s', path, e)
            self.dirs.access_errors += 1
            return False
        self.dirs.dirs.add(dir_count)
        self.dirs.files.add(file_count)
        self.dirs.entries.add(dir_count + file_count)
        return True
