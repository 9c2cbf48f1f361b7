"""
Pydantic models for hostsweep results.
"""

from hostsweep.core.models.enums import HostStatus
from hostsweep.core.models.result import PingResult, ScanErrorInfo, ScanReport

__all__ = [
    'HostStatus',
    'PingResult',
    'ScanErrorInfo',
    'ScanReport',
]
