"""Single-address reachability probe with retries."""

import logging
import subprocess
from time import sleep
from typing import Callable, List, Optional

from hostsweep.core.errors import ProbeInvocationError
from hostsweep.core.models import PingResult
from hostsweep.core.ping_output import classify
from hostsweep.core.ping_strategy import PingStrategy, select_strategy

log = logging.getLogger('Pinger')

# extra seconds the child process gets past its own timeout before we kill it
PROCESS_GRACE = 2.0

Runner = Callable[[List[str], float], subprocess.CompletedProcess]


def run_command(command: List[str], timeout: float) -> subprocess.CompletedProcess:
    """Run ``command`` and capture its output as bytes."""
    return subprocess.run(
        command,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        timeout=timeout,
        check=False
    )


class Pinger:
    """
    Pings one address at a time using the platform ping utility.

    Each call makes up to ``attempts`` single-packet pings and stops at the
    first reply. A failure to start the utility at all ends the address
    immediately; it says nothing about the target.
    """

    def __init__(
        self,
        timeout: int = 2,
        attempts: int = 3,
        strategy: Optional[PingStrategy] = None,
        retry_delay: Optional[float] = None,
        runner: Runner = run_command,
        sleeper: Callable[[float], None] = sleep
    ):
        self.timeout = timeout
        self.attempts = max(1, attempts)
        self.strategy = strategy or select_strategy()
        self.retry_delay = self.strategy.retry_delay if retry_delay is None else retry_delay
        self._runner = runner
        self._sleep = sleeper

    def ping(self, ip: str) -> PingResult:
        """Probe ``ip`` and return the outcome of the whole retry sequence."""
        for attempt in range(1, self.attempts + 1):
            try:
                alive, latency = self._attempt(ip)
            except ProbeInvocationError as e:
                log.warning(str(e))
                return PingResult.failure(ip, attempts=attempt)

            if alive:
                log.debug(f'{ip} replied on attempt {attempt} ({latency}ms)')
                return PingResult.success(ip, latency, attempts=attempt)

            if attempt < self.attempts:
                self._sleep(self.retry_delay)

        log.debug(f'{ip} did not reply after {self.attempts} attempts')
        return PingResult.failure(ip, attempts=self.attempts)

    def _attempt(self, ip: str):
        command = self.strategy.build_command(ip, self.timeout)
        limit = self.strategy.attempt_timeout(self.timeout) + PROCESS_GRACE
        try:
            proc = self._runner(command, limit)
        except subprocess.TimeoutExpired:
            log.debug(f'ping {ip} exceeded {limit:.1f}s, treating as no reply')
            return False, None
        except OSError as e:
            raise ProbeInvocationError(ip, e) from e

        return classify(proc.stdout or b'', self.strategy, proc.returncode)

    def __str__(self):
        return (
            f'Pinger(strategy={self.strategy.name}, timeout={self.timeout}, '
            f'attempts={self.attempts}, retry_delay={self.retry_delay})'
        )
