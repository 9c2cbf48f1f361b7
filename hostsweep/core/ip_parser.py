"""
Target notation parsing.

Expands a target string into the concrete list of IPv4 addresses to probe.
Supported segment formats, separated by commas:

    192.168.1.1          single address
    192.168.1.1-10       range, last octet only
    192.168.1.0/24       CIDR block, network and broadcast excluded
"""

import ipaddress
import re
from typing import List, Tuple

from hostsweep.core.errors import (
    EmptyTargetSet,
    InvalidAddress,
    InvalidCidr,
    InvalidRange,
    NoUsableHosts,
)

_OCTET_RE = re.compile(r'^\d{1,3}$', re.ASCII)
_PREFIX_RE = re.compile(r'^\d{1,2}$', re.ASCII)
_ALL_ONES = 0xFFFFFFFF


def parse_targets(targets: str) -> List[str]:
    """
    Expand a comma separated target string into dotted-quad addresses.

    Segments are expanded in the order given and concatenated; duplicates
    across segments are kept.

    Raises:
        TargetParseError: a subclass describing the first bad segment, or
            EmptyTargetSet if nothing was expanded.
    """
    addresses: List[str] = []

    for segment in targets.split(','):
        segment = segment.strip()
        if not segment:
            continue

        if '/' in segment:
            addresses.extend(parse_cidr(segment))
        elif '-' in segment:
            addresses.extend(parse_ip_range(segment))
        else:
            addresses.append(str(_parse_address(segment, segment)))

    if not addresses:
        raise EmptyTargetSet(f'No valid IP addresses found in target: {targets!r}', targets)

    return addresses


def get_address_count(targets: str) -> int:
    """
    Return the number of addresses the target string expands to.

    Applies the same validation as ``parse_targets`` but counts each segment
    from its bounds, so large CIDR blocks are never materialised.
    """
    count = 0

    for segment in targets.split(','):
        segment = segment.strip()
        if not segment:
            continue

        if '/' in segment:
            network, broadcast = _cidr_bounds(segment)
            count += broadcast - network - 1
        elif '-' in segment:
            _, start, end = _range_bounds(segment)
            count += end - start + 1
        else:
            _parse_address(segment, segment)
            count += 1

    if not count:
        raise EmptyTargetSet(f'No valid IP addresses found in target: {targets!r}', targets)

    return count


def parse_cidr(cidr: str) -> List[str]:
    """Return the usable host addresses of a CIDR block."""
    network, broadcast = _cidr_bounds(cidr)
    return [
        str(ipaddress.IPv4Address(value))
        for value in range(network + 1, broadcast)
    ]


def parse_ip_range(range_str: str) -> List[str]:
    """Return every address from the base address through the end octet."""
    prefix, start, end = _range_bounds(range_str)
    return [f'{prefix}.{last}' for last in range(start, end + 1)]


def _cidr_bounds(cidr: str) -> Tuple[int, int]:
    """Validate a CIDR segment and return its (network, broadcast) as ints."""
    parts = cidr.split('/')
    if len(parts) != 2:
        raise InvalidCidr(f'Invalid CIDR format: {cidr}', cidr)

    ip_str, prefix_str = parts[0].strip(), parts[1].strip()
    try:
        ip = ipaddress.IPv4Address(ip_str)
    except ValueError as exc:
        raise InvalidCidr(f'Invalid address in CIDR {cidr}: {ip_str}', cidr) from exc

    if not _PREFIX_RE.match(prefix_str):
        raise InvalidCidr(f'Invalid prefix length in CIDR {cidr}: {prefix_str}', cidr)
    prefix = int(prefix_str)
    if prefix > 32:
        raise InvalidCidr(f'Prefix length cannot exceed 32: {cidr}', cidr)

    mask = (_ALL_ONES << (32 - prefix)) & _ALL_ONES
    network = int(ip) & mask
    broadcast = network | (~mask & _ALL_ONES)

    # /31 and /32 leave nothing between network and broadcast
    if broadcast - network < 2:
        raise NoUsableHosts(f'CIDR {cidr} has no usable host addresses', cidr)

    return network, broadcast


def _range_bounds(range_str: str) -> Tuple[str, int, int]:
    """Validate a dashed range and return (first three octets, start, end)."""
    base, _, end = range_str.rpartition('-')
    base, end = base.strip(), end.strip()

    base_ip = _parse_address(base, range_str, error=InvalidRange)

    if not _OCTET_RE.match(end) or int(end) > 255:
        raise InvalidRange(f'Invalid range end value in {range_str}: {end!r}', range_str)
    end_octet = int(end)

    octets = base_ip.packed
    if end_octet < octets[3]:
        raise InvalidRange(
            f'Range end ({end_octet}) must be >= start ({octets[3]}): {range_str}',
            range_str
        )

    return '.'.join(str(o) for o in octets[:3]), octets[3], end_octet


def _parse_address(value: str, segment: str, error=InvalidAddress) -> ipaddress.IPv4Address:
    try:
        return ipaddress.IPv4Address(value)
    except ValueError as exc:
        raise error(f'Invalid IP address: {value!r}', segment) from exc
