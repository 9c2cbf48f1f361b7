"""Console rendering of sweep results."""

from typing import List

from tabulate import tabulate

from hostsweep.core.models import ScanReport
from hostsweep.core.utils import format_duration, format_latency


def render_summary(report: ScanReport) -> str:
    """Return the end-of-run statistics table."""
    table = [
        ['Total', report.total, ''],
        ['Alive', report.success_count, f'{report.success_percent:.1f}%'],
        ['Dead', report.failure_count, f'{report.failure_percent:.1f}%'],
    ]
    if report.errors:
        table.append(['Errors', len(report.errors), ''])
    table.append(['Elapsed', format_duration(report.elapsed), ''])

    return tabulate(table, headers=['Hosts', 'Count', 'Share'], tablefmt='grid')


def render_alive(report: ScanReport) -> List[str]:
    """One line per alive host, for echo output."""
    lines = []
    for result in report.alive_hosts:
        suffix = ''
        if result.latency_ms is not None:
            suffix = f' ({format_latency(result.latency_ms)}ms)'
        lines.append(f'  + {result.ip} => alive{suffix}')
    return lines
