"""
Tests for target notation expansion: single addresses, last-octet ranges,
CIDR blocks and comma separated mixtures.
"""

import ipaddress
from unittest.mock import patch

import pytest

from hostsweep.core.errors import (
    EmptyTargetSet,
    InvalidAddress,
    InvalidCidr,
    InvalidRange,
    NoUsableHosts,
    TargetParseError,
)
from hostsweep.core.ip_parser import get_address_count, parse_targets
from tests.test_constants import MIXED_EXPECTED, MIXED_TARGETS


def test_single_address():
    assert parse_targets('192.168.1.1') == ['192.168.1.1']


def test_comma_list_keeps_order_and_duplicates():
    result = parse_targets('10.0.0.2,10.0.0.1, 10.0.0.2')
    assert result == ['10.0.0.2', '10.0.0.1', '10.0.0.2']


def test_range_expansion():
    assert parse_targets('10.0.0.1-5') == [
        '10.0.0.1', '10.0.0.2', '10.0.0.3', '10.0.0.4', '10.0.0.5'
    ]


def test_range_single_address():
    assert parse_targets('10.0.0.7-7') == ['10.0.0.7']


def test_range_full_octet():
    result = parse_targets('10.0.0.0-255')
    assert len(result) == 256
    assert result[0] == '10.0.0.0'
    assert result[-1] == '10.0.0.255'


@pytest.mark.parametrize('target', ['10.0.0.5-1', '10.0.0.10-9'])
def test_range_backwards(target):
    with pytest.raises(InvalidRange):
        parse_targets(target)


@pytest.mark.parametrize('target', [
    '10.0.0.1-256',
    '10.0.0.1-abc',
    '10.0.0.1-',
    '-5',
    '10.0.0-5',
    '10.0.0.1-+5',
])
def test_range_malformed(target):
    with pytest.raises(InvalidRange):
        parse_targets(target)


@pytest.mark.parametrize('prefix', [24, 25, 28, 29, 30])
def test_cidr_host_count(prefix):
    network = ipaddress.IPv4Network(f'172.16.0.0/{prefix}')
    result = parse_targets(f'172.16.0.0/{prefix}')

    assert len(result) == 2 ** (32 - prefix) - 2
    assert str(network.network_address) not in result
    assert str(network.broadcast_address) not in result


def test_cidr_uses_network_of_host_address():
    # 192.168.1.77/30 lives in 192.168.1.76/30
    assert parse_targets('192.168.1.77/30') == ['192.168.1.77', '192.168.1.78']


def test_cidr_small_block():
    assert parse_targets('192.168.1.0/30') == ['192.168.1.1', '192.168.1.2']


def test_cidr_crosses_octet_boundary():
    result = parse_targets('10.0.0.0/23')
    assert len(result) == 510
    assert '10.0.0.255' in result
    assert '10.0.1.0' in result
    assert result[-1] == '10.0.1.254'


@pytest.mark.parametrize('target', ['10.0.0.0/31', '10.0.0.1/32'])
def test_cidr_without_usable_hosts(target):
    with pytest.raises(NoUsableHosts):
        parse_targets(target)


@pytest.mark.parametrize('target', [
    '10.0.0.0/33',
    '10.0.0.0/-1',
    '10.0.0.0/abc',
    '10.0.0.0/',
    '10.0.0.0/24/1',
    '10.0.0/24',
])
def test_cidr_malformed(target):
    with pytest.raises(InvalidCidr):
        parse_targets(target)


@pytest.mark.parametrize('target', ['300.1.1.1', 'abc', '10.0.0', '10.0.0.1.2', 'host.local'])
def test_invalid_address(target):
    with pytest.raises(InvalidAddress):
        parse_targets(target)


def test_mixed_targets_in_segment_order():
    assert parse_targets(MIXED_TARGETS) == MIXED_EXPECTED


@pytest.mark.parametrize('target', ['', '   ', ',', ' , ,'])
def test_empty_target_set(target):
    with pytest.raises(EmptyTargetSet):
        parse_targets(target)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_targets('10.0.0.1-0')


def test_error_names_segment():
    with pytest.raises(TargetParseError) as excinfo:
        parse_targets('10.0.0.1, 10.0.0.9-3')
    assert excinfo.value.segment == '10.0.0.9-3'


def test_get_address_count():
    assert get_address_count('10.0.0.0/24,10.0.1.1-10') == 254 + 10


def test_get_address_count_does_not_expand():
    with patch('hostsweep.core.ip_parser.parse_cidr') as mock_cidr, \
            patch('hostsweep.core.ip_parser.parse_ip_range') as mock_range:
        assert get_address_count('10.0.0.0/8, 10.1.0.1') == 2 ** 24 - 2 + 1
        assert get_address_count('0.0.0.0/0') == 2 ** 32 - 2
        assert get_address_count('10.0.0.250-255') == 6
    mock_cidr.assert_not_called()
    mock_range.assert_not_called()


def test_get_address_count_matches_expansion():
    assert get_address_count(MIXED_TARGETS) == len(MIXED_EXPECTED)


@pytest.mark.parametrize('target,error', [
    ('10.0.0.0/32', NoUsableHosts),
    ('10.0.0.0/33', InvalidCidr),
    ('10.0.0.9-3', InvalidRange),
    ('10.0.0.256', InvalidAddress),
    (' , ', EmptyTargetSet),
])
def test_get_address_count_validates(target, error):
    with pytest.raises(error):
        get_address_count(target)
