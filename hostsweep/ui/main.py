import logging
import sys
import traceback
from typing import List, Optional

from pydantic import ValidationError

from hostsweep.core.errors import ExportError, TargetParseError
from hostsweep.core.export import export_ping_results
from hostsweep.core.ip_parser import parse_targets
from hostsweep.core.logger import configure_logging
from hostsweep.core.models import ScanReport
from hostsweep.core.progress import ScanProgress
from hostsweep.core.report import render_alive, render_summary
from hostsweep.core.sweep import SweepScanner
from hostsweep.ui.runtime_args import RuntimeArgs, parse_args

log = logging.getLogger('core')


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        configure_logging(args.loglevel, args.logfile)
    except (ValueError, OSError) as e:
        # may run before any handler exists; logging.lastResort covers that
        log.critical(f'Invalid logging options: {e}')
        return 1

    handlers = {
        ('net', 'ping'): run_ping,
    }
    handler = handlers[(args.command, args.subcommand)]

    try:
        return handler(args)
    except KeyboardInterrupt:
        log.info('Keyboard interrupt received, terminating...')
        return 130


def run_ping(args: RuntimeArgs) -> int:
    """
    Run a ping sweep for the command line.

    Returns the process exit code: non-zero only for bad input or a failed
    export, never for unreachable hosts.
    """
    try:
        cfg = args.scan_config()
        addresses = parse_targets(args.target)
    except (TargetParseError, ValidationError) as e:
        log.critical(f'Failed to start ping sweep: {e}')
        log.debug(traceback.format_exc())
        return 1

    log.info(f'Starting ping sweep of {len(addresses)} targets')
    log.info(
        f'Timeout={cfg.timeout}s, attempts={cfg.attempts}, '
        f'concurrency={cfg.concurrency}'
    )

    progress = ScanProgress(len(addresses))
    scanner = SweepScanner(addresses, cfg, progress=progress)
    report = scanner.run()

    if cfg.echo:
        progress.print_line('Results:')
        for line in render_alive(report):
            progress.print_line(line)

    progress.finish('Ping sweep complete')
    print_summary(report)

    if cfg.export:
        try:
            export_ping_results(report.results, base_dir=cfg.output_dir)
        except ExportError as e:
            log.critical(str(e))
            log.debug(traceback.format_exc())
            return 1

    return 0


def print_summary(report: ScanReport) -> None:
    print()
    print(render_summary(report))


if __name__ == "__main__":
    sys.exit(main())
