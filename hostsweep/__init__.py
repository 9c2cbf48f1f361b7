"""
Concurrent ping sweeps over IPv4 target ranges
"""
# Sweep engine
from hostsweep.core.sweep import SweepScanner
from hostsweep.core.pinger import Pinger

# Configuration
from hostsweep.core.scan_config import ScanConfig

# Target parsing
from hostsweep.core.ip_parser import parse_targets, get_address_count

# Platform ping behaviour
from hostsweep.core.ping_strategy import (
    PingStrategy,
    MillisecondTimeoutStrategy,
    DecimalTimeoutStrategy,
    select_strategy
)
from hostsweep.core.ping_output import classify, extract_latency

# Models for structured data
from hostsweep.core.models import (
    HostStatus,
    PingResult,
    ScanErrorInfo,
    ScanReport
)

from hostsweep.core.errors import (
    HostSweepError,
    TargetParseError,
    InvalidAddress,
    InvalidRange,
    InvalidCidr,
    NoUsableHosts,
    EmptyTargetSet,
    ProbeInvocationError,
    ExportError
)
