"""Exception types raised by hostsweep."""


class HostSweepError(Exception):
    """Base class for all hostsweep errors."""


class TargetParseError(HostSweepError, ValueError):
    """Target notation could not be expanded into addresses."""

    def __init__(self, message: str, segment: str = ''):
        super().__init__(message)
        self.segment = segment


class InvalidAddress(TargetParseError):
    """A segment is not a well-formed dotted-quad."""


class InvalidRange(TargetParseError):
    """A dashed range is malformed or runs backwards."""


class InvalidCidr(TargetParseError):
    """A CIDR block is malformed or has a bad prefix length."""


class NoUsableHosts(TargetParseError):
    """A CIDR block has no addresses between network and broadcast."""


class EmptyTargetSet(TargetParseError):
    """Expansion produced no addresses at all."""


class ProbeInvocationError(HostSweepError):
    """The ping utility itself could not be started."""

    def __init__(self, ip: str, cause: Exception):
        super().__init__(f'Failed to run ping for {ip}: {cause}')
        self.ip = ip
        self.cause = cause


class ExportError(HostSweepError):
    """Scan results could not be written to disk."""
