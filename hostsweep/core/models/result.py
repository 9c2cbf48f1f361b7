"""
Pydantic models for sweep results.
"""

import traceback as tb_module
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from hostsweep.core.models.enums import HostStatus


class PingResult(BaseModel):
    """Outcome of the full retry sequence for one address."""
    model_config = ConfigDict(frozen=True)

    ip: str = Field(description="IPv4 address that was probed")
    alive: bool = Field(description="Whether any attempt got a reply")
    latency_ms: Optional[float] = Field(
        default=None, ge=0,
        description="Round trip time of the successful reply, if reported"
    )
    attempts: int = Field(default=0, description="Number of ping invocations made")

    @model_validator(mode="after")
    def _dead_hosts_have_no_latency(self) -> "PingResult":
        if not self.alive and self.latency_ms is not None:
            raise ValueError("latency_ms is only reported for alive hosts")
        return self

    @classmethod
    def success(cls, ip: str, latency_ms: Optional[float] = None, attempts: int = 1) -> "PingResult":
        """Result for an address that replied."""
        return cls(ip=ip, alive=True, latency_ms=latency_ms, attempts=attempts)

    @classmethod
    def failure(cls, ip: str, attempts: int = 0) -> "PingResult":
        """Result for an address that never replied."""
        return cls(ip=ip, alive=False, attempts=attempts)

    @computed_field  # type: ignore[misc]
    @property
    def status(self) -> HostStatus:
        """Alive/dead label for display and export."""
        return HostStatus.ALIVE if self.alive else HostStatus.DEAD


class ScanErrorInfo(BaseModel):
    """A probe task that crashed instead of producing a result."""
    model_config = ConfigDict(frozen=True)

    ip: str = Field(description="Address whose task failed")
    message: str = Field(description="Error message")
    traceback: Optional[str] = Field(default=None, description="Full traceback if available")

    @classmethod
    def from_exception(cls, exc: BaseException, ip: str) -> "ScanErrorInfo":
        """Create from an exception."""
        return cls(
            ip=ip,
            message=str(exc),
            traceback=''.join(
                tb_module.format_exception(type(exc), exc, exc.__traceback__)
            ) if exc.__traceback__ else None
        )


class ScanReport(BaseModel):
    """
    Final results of a sweep.

    ``results`` may be shorter than ``total`` when probe tasks crashed; those
    addresses appear in ``errors`` instead.
    """
    model_config = ConfigDict(frozen=True)

    results: Tuple[PingResult, ...] = Field(default_factory=tuple, description="One result per probed address")
    total: int = Field(description="Number of addresses that were targeted")
    elapsed: float = Field(default=0.0, description="Wall clock duration of the run in seconds")
    errors: Tuple[ScanErrorInfo, ...] = Field(default_factory=tuple, description="Crashed probe tasks")

    @computed_field  # type: ignore[misc]
    @property
    def success_count(self) -> int:
        """Number of alive hosts."""
        return sum(1 for r in self.results if r.alive)

    @computed_field  # type: ignore[misc]
    @property
    def failure_count(self) -> int:
        """Number of hosts that never replied."""
        return sum(1 for r in self.results if not r.alive)

    @computed_field  # type: ignore[misc]
    @property
    def success_percent(self) -> float:
        """Alive hosts as a percentage of targets."""
        return _percent(self.success_count, self.total)

    @computed_field  # type: ignore[misc]
    @property
    def failure_percent(self) -> float:
        """Dead hosts as a percentage of targets."""
        return _percent(self.failure_count, self.total)

    @property
    def alive_hosts(self) -> List[PingResult]:
        """Results for hosts that replied."""
        return [r for r in self.results if r.alive]


def _percent(count: int, total: int) -> float:
    if not total:
        return 0.0
    return count / total * 100
