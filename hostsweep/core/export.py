"""Spreadsheet export of scan results."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from openpyxl import Workbook
from openpyxl.styles import Font

from hostsweep.core.errors import ExportError
from hostsweep.core.models import PingResult
from hostsweep.core.utils import format_latency

log = logging.getLogger('Export')

T = TypeVar('T')

PING_HEADERS = ['address', 'status', 'latency (ms)']


def save_to_excel(
    records: Iterable[T],
    headers: Sequence[str],
    row_mapper: Callable[[T], List[str]],
    subdir: str,
    prefix: str,
    base_dir: str = 'output',
    now: Optional[datetime] = None
) -> Path:
    """
    Write ``records`` to ``<base_dir>/<subdir>/<prefix>_<YYYYMMDD_HHMMSS>.xlsx``.

    The first row holds the bold ``headers``; each record becomes one row of
    strings produced by ``row_mapper``. The directory is created if missing.

    Raises:
        ExportError: the directory or file could not be written.
    """
    output_dir = Path(base_dir) / subdir
    timestamp = (now or datetime.now()).strftime('%Y%m%d_%H%M%S')
    path = output_dir / f'{prefix}_{timestamp}.xlsx'

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = subdir

    bold = Font(bold=True)
    for col, header in enumerate(headers, start=1):
        sheet.cell(row=1, column=col, value=header).font = bold

    for row, record in enumerate(records, start=2):
        for col, value in enumerate(row_mapper(record), start=1):
            sheet.cell(row=row, column=col, value=value)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        workbook.save(path)
    except OSError as e:
        raise ExportError(f'Failed to save results to {path}: {e}') from e

    log.info(f'Results saved to {path}')
    return path


def ping_row(result: PingResult) -> List[str]:
    return [
        result.ip,
        result.status.value,
        format_latency(result.latency_ms),
    ]


def export_ping_results(results: Iterable[PingResult], base_dir: str = 'output') -> Path:
    """Save ping results under ``<base_dir>/ping/``."""
    return save_to_excel(results, PING_HEADERS, ping_row, 'ping', 'ping', base_dir=base_dir)
