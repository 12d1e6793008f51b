import logging
import os


class WalkError(Exception):
    def __init__(self, message, path):
        super().__init__(message, path)
        self.message = message
        self.path = path

    def __str__(self):
        if self.__cause__ is not None:
            return '%s: %s (%s)' % (self.message, self.path, self.__cause__)
        return '%s: %s' % (self.message, self.path)


class NotADirectory(WalkError):
    pass


class ReadDirError(WalkError):
    pass


class FileTypeError(WalkError):
    pass


def walk(root, on_file, on_dir):
    """Depth-first walk below root, calling on_dir/on_file with each os.DirEntry.

    Returns the number of recoverable errors met in the subtree. Raises
    NotADirectory or ReadDirError when root itself cannot be listed, and
    FileTypeError when the type of one of root's children cannot be read.
    """
    if not os.path.isdir(root):
        raise NotADirectory('Not a directory', root)
    try:
        it = os.scandir(root)
    except OSError as e:
        raise ReadDirError('Failed to read dir', root) from e

    err_count = 0
    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                logging.error('Failed to read entry in %s: %s', root, e)
                err_count += 1
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise FileTypeError('Could not get file type', entry.path) from e

            if is_dir:
                on_dir(entry)
                try:
                    err_count += walk(entry.path, on_file, on_dir)
                except WalkError as e:
                    logging.error('visit %s: %s', entry.name, e)
                    err_count += 1
            else:
                on_file(entry)
    return err_count
