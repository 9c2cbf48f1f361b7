"""Command line arguments for hostsweep."""

import argparse
from dataclasses import dataclass
from typing import List, Optional

from hostsweep.core.scan_config import ScanConfig


@dataclass
class RuntimeArgs:
    """Parsed command line, independent of argparse."""
    command: str = ''
    subcommand: str = ''
    target: str = ''
    timeout: int = 2
    concurrency: int = 100
    count: int = 3
    echo: bool = False
    output: bool = False
    output_dir: str = 'output'
    unordered: bool = False
    loglevel: str = 'INFO'
    logfile: Optional[str] = None

    def scan_config(self) -> ScanConfig:
        """Build the sweep configuration these arguments describe."""
        return ScanConfig(
            timeout=self.timeout,
            attempts=self.count,
            concurrency=self.concurrency,
            echo=self.echo,
            export=self.output,
            sort_results=not self.unordered,
            output_dir=self.output_dir
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hostsweep',
        description='Network toolbox: host liveness sweeps'
    )
    parser.add_argument('--loglevel', default='INFO', help='Log level (default: INFO)')
    parser.add_argument('--logfile', default=None, help='Also write logs to this file')

    commands = parser.add_subparsers(dest='command', metavar='COMMAND')
    commands.required = True

    net = commands.add_parser('net', help='Network testing commands')
    net_commands = net.add_subparsers(dest='subcommand', metavar='SUBCOMMAND')
    net_commands.required = True

    ping = net_commands.add_parser(
        'ping',
        help='Ping sweep for live hosts',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'target examples:\n'
            '  single    192.168.1.1\n'
            '  list      192.168.1.1,192.168.1.2\n'
            '  range     192.168.1.1-10\n'
            '  cidr      192.168.1.0/24'
        )
    )
    ping.add_argument('-t', '--target', required=True,
                      help='IP, comma list, last-octet range or CIDR block')
    ping.add_argument('-T', '--timeout', type=int, default=2, metavar='SECS',
                      help='Timeout per attempt in seconds (default: 2)')
    ping.add_argument('-c', '--concurrency', type=int, default=100, metavar='NUM',
                      help='Maximum concurrent pings (default: 100)')
    ping.add_argument('-n', '--count', type=int, default=3, metavar='COUNT',
                      help='Attempts per address, one reply marks it alive (default: 3)')
    ping.add_argument('-e', '--echo', action='store_true',
                      help='Print every alive host')
    ping.add_argument('-o', '--output', action='store_true',
                      help='Save results to an xlsx file')
    ping.add_argument('--output-dir', default='output',
                      help='Base directory for saved files (default: output)')
    ping.add_argument('--unordered', action='store_true',
                      help='Keep results in completion order instead of target order')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> RuntimeArgs:
    parser = build_parser()
    args = parser.parse_args(argv)
    values = {k: v for k, v in vars(args).items() if k in RuntimeArgs.__dataclass_fields__}
    return RuntimeArgs(**values)
