"""Terminal progress display shared by concurrent probes."""

import threading
from typing import Optional

from tqdm import tqdm

BAR_FORMAT = (
    '[{elapsed}] |{bar}| {n_fmt}/{total_fmt} ({percentage:3.0f}%) '
    '[ETA: {remaining}] {desc}'
)


class ScanProgress:
    """
    Single-line progress bar with log lines printed above it.

    Every method is safe to call from any worker thread.
    """

    def __init__(self, total: int, disable: Optional[bool] = None, file=None):
        self._lock = threading.Lock()
        self._file = file
        self._bar = tqdm(
            total=total,
            file=file,
            bar_format=BAR_FORMAT,
            unit='host',
            dynamic_ncols=True,
            disable=disable
        )

    @property
    def count(self) -> int:
        return self._bar.n

    def increment(self, n: int = 1) -> None:
        with self._lock:
            self._bar.update(n)

    def print_line(self, text: str) -> None:
        """Print ``text`` above the bar without breaking it."""
        with self._lock:
            self._bar.write(text, file=self._file)

    def set_message(self, text: str) -> None:
        with self._lock:
            self._bar.set_description_str(text)

    def finish(self, message: str = 'Scan complete') -> None:
        with self._lock:
            self._bar.set_description_str(message)
            self._bar.close()


class NullProgress:
    """Progress sink that only counts, for library use and tests."""

    def __init__(self, total: int = 0):
        self.total = total
        self.count = 0
        self.lines = []
        self.message = ''
        self.finished = False
        self._lock = threading.Lock()

    def increment(self, n: int = 1) -> None:
        with self._lock:
            self.count += n

    def print_line(self, text: str) -> None:
        with self._lock:
            self.lines.append(text)

    def set_message(self, text: str) -> None:
        self.message = text

    def finish(self, message: str = 'Scan complete') -> None:
        self.message = message
        self.finished = True
