"""
Repeated sweep script for hostsweep.
Runs the same sweep several times and tabulates how stable the results are.
"""

import sys

# Third-party imports - install with 'pip install tabulate'
from tabulate import tabulate

from hostsweep import ScanConfig, SweepScanner, TargetParseError


def main(targets: str, runs: int = 5):
    """Sweep ``targets`` ``runs`` times and print a comparison table."""
    cfg = ScanConfig(timeout=1, attempts=2, concurrency=64)

    table = []
    seen_alive = set()
    for run in range(1, runs + 1):
        try:
            report = SweepScanner.from_targets(targets, cfg).run()
        except TargetParseError as e:
            print(f'Invalid targets: {e}')
            return 1

        alive = {r.ip for r in report.alive_hosts}
        seen_alive |= alive
        table.append([
            run,
            report.success_count,
            report.failure_count,
            f'{report.elapsed:.2f}'
        ])

    print(tabulate(table, headers=['Run', 'Alive', 'Dead', 'Seconds'], tablefmt='grid'))
    print(f'{len(seen_alive)} hosts answered at least once')
    return 0


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print('usage: repeat_sweep.py TARGETS [RUNS]')
        sys.exit(2)
    sys.exit(main(sys.argv[1], int(sys.argv[2]) if len(sys.argv) > 2 else 5))
