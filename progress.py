from rich.console import Console
from rich.live import Live
from rich.text import Text

import config


class NullProgress:
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def update(self, path, files, dirs):
        pass


class TerminalProgress:
    """Live three-line status block, repainted in place and erased on exit."""

    prefix = 'visit: '

    def __init__(self, console=None, refresh_per_second=config.progress_refresh_per_second):
        self.console = console or Console()
        self.live = Live(Text(''), console=self.console, transient=True,
                         refresh_per_second=refresh_per_second)

    def __enter__(self):
        self.live.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.live.stop()
        return False

    def render(self, path, files, dirs):
        width = max(self.console.width - len(self.prefix) - 1, 1)
        path = str(path)[:width]
        return Text('\n'.join([
            self.prefix + path,
            'Total Files: %s' % (dirs.count + files.count),
            'Files: %s, Dirs: %s' % (files.count, dirs.count),
        ]))

    def update(self, path, files, dirs):
        # the refresh thread repaints at most refresh_per_second times
        self.live.update(self.render(path, files, dirs))


def make_progress(console=None):
    console = console or Console()
    if console.is_terminal:
        return TerminalProgress(console)
    return NullProgress()
