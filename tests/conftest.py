"""
Shared pytest fixtures for the hostsweep test suite.
Provides fake ping runners, strategies and configs so no real
ping process is ever started.
"""

import pytest

from hostsweep.core.ping_strategy import DecimalTimeoutStrategy, MillisecondTimeoutStrategy
from hostsweep.core.pinger import Pinger
from hostsweep.core.scan_config import ScanConfig
from tests._helpers import ScriptedRunner


@pytest.fixture
def unix_strategy():
    """Strategy for Linux/macOS ping."""
    return DecimalTimeoutStrategy()


@pytest.fixture
def windows_strategy():
    """Strategy for Windows ping."""
    return MillisecondTimeoutStrategy()


@pytest.fixture
def runner():
    """
    Scripted runner where every address times out unless scripted.

    Returns:
        ScriptedRunner: fake replacement for subprocess execution
    """
    return ScriptedRunner()


@pytest.fixture
def sleeps():
    """Record of backoff delays requested by a Pinger."""
    return []


@pytest.fixture
def make_pinger(runner, sleeps, unix_strategy):
    """
    Factory for Pingers wired to the fake runner and a recording sleeper.

    Returns:
        callable: keyword arguments are passed to Pinger
    """
    def _make(**kwargs):
        kwargs.setdefault('strategy', unix_strategy)
        kwargs.setdefault('runner', runner)
        kwargs.setdefault('sleeper', sleeps.append)
        return Pinger(**kwargs)
    return _make


@pytest.fixture
def fast_config():
    """Small config with no retry backoff."""
    return ScanConfig(timeout=1, attempts=2, concurrency=4, retry_delay=0)
