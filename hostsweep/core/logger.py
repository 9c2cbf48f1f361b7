"""Logging setup for the command line tool."""

import logging
from typing import Optional

from tqdm import tqdm

CONSOLE_FORMAT = '[%(name)s] %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s [%(name)s] %(levelname)s - %(message)s'


class TqdmLoggingHandler(logging.Handler):
    """Emit records through ``tqdm.write`` so an active bar is redrawn below them."""

    def emit(self, record):
        try:
            tqdm.write(self.format(record))
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def configure_logging(loglevel: str = 'INFO', logfile: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Console output always goes through tqdm; ``logfile`` adds a plain
    file handler at the same level.
    """
    level = getattr(logging, str(loglevel).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f'Invalid log level: {loglevel}')

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = TqdmLoggingHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)
