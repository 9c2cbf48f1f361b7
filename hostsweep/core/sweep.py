"""
Bounded-concurrency reachability sweep.
"""

import logging
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor
from time import time
from typing import Dict, List, Optional

from hostsweep.core.errors import EmptyTargetSet
from hostsweep.core.ip_parser import parse_targets
from hostsweep.core.models import PingResult, ScanErrorInfo, ScanReport
from hostsweep.core.pinger import Pinger
from hostsweep.core.progress import NullProgress
from hostsweep.core.scan_config import ScanConfig

log = logging.getLogger('SweepScanner')


class SweepScanner:
    """
    Pings every address of a target list with at most
    ``config.concurrency`` probes in flight.

    A ticket from a bounded semaphore must be taken before a probe is handed
    to the pool and is given back when that probe's retry sequence ends.
    Results are collected in completion order into one shared list.
    """

    def __init__(
        self,
        addresses: List[str],
        config: Optional[ScanConfig] = None,
        pinger: Optional[Pinger] = None,
        progress=None
    ):
        self.addresses = list(addresses)
        if not self.addresses:
            raise EmptyTargetSet('No addresses to scan')
        self.cfg = config or ScanConfig()
        self.pinger = pinger or Pinger(
            timeout=self.cfg.timeout,
            attempts=self.cfg.attempts,
            retry_delay=self.cfg.retry_delay
        )
        self.progress = progress or NullProgress(len(self.addresses))
        self.uid = str(uuid.uuid4())
        self.running = False

        self.results: List[PingResult] = []
        self.errors: List[ScanErrorInfo] = []
        self.in_flight = 0
        self.peak_in_flight = 0

        self._tickets = threading.BoundedSemaphore(self.cfg.concurrency)
        self._lock = threading.Lock()
        self.start_time = 0.0
        self.end_time = 0.0

    @classmethod
    def from_targets(cls, targets: str, config: Optional[ScanConfig] = None, **kwargs) -> 'SweepScanner':
        """Expand ``targets`` and build a scanner for them."""
        return cls(parse_targets(targets), config, **kwargs)

    def run(self) -> ScanReport:
        """Probe every address and return the finished report."""
        self.running = True
        self.start_time = time()
        log.info(f'Sweep {self.uid} started: {len(self.addresses)} targets, {self.cfg}')

        with ThreadPoolExecutor(max_workers=self.cfg.concurrency) as executor:
            futures = {}
            for ip in self.addresses:
                self._tickets.acquire()
                try:
                    future = executor.submit(self._probe, ip)
                except BaseException:
                    self._tickets.release()
                    raise
                futures[future] = ip

            for future, ip in futures.items():
                exc = future.exception()
                if exc is not None:
                    self._record_error(ip, exc)

        self.end_time = time()
        self.running = False

        report = self.build_report()
        log.info(
            f'Sweep {self.uid} finished in {report.elapsed:.2f}s: '
            f'{report.success_count} alive, {report.failure_count} dead'
        )
        return report

    def build_report(self) -> ScanReport:
        with self._lock:
            results = list(self.results)
            errors = list(self.errors)

        if self.cfg.sort_results:
            results = self._in_target_order(results)

        return ScanReport(
            results=results,
            total=len(self.addresses),
            elapsed=self.get_runtime(),
            errors=errors
        )

    def get_runtime(self) -> float:
        if not self.start_time:
            return 0.0
        end = self.end_time if not self.running else time()
        return end - self.start_time

    def calc_percent_complete(self) -> int:
        with self._lock:
            done = len(self.results) + len(self.errors)
        return int(done / len(self.addresses) * 100)

    def _probe(self, ip: str) -> None:
        try:
            with self._lock:
                self.in_flight += 1
                self.peak_in_flight = max(self.peak_in_flight, self.in_flight)

            result = self.pinger.ping(ip)

            with self._lock:
                self.results.append(result)
            self.progress.increment(1)
        finally:
            with self._lock:
                self.in_flight -= 1
            self._tickets.release()

    def _record_error(self, ip: str, exc: BaseException) -> None:
        info = ScanErrorInfo.from_exception(exc, ip)
        log.error(f'Probe task for {ip} failed: {exc}')
        if info.traceback:
            log.debug(info.traceback)
        with self._lock:
            self.errors.append(info)

    def _in_target_order(self, results: List[PingResult]) -> List[PingResult]:
        # duplicates in the target list share an ip, so hand out positions in turn
        positions: Dict[str, List[int]] = {}
        for index, ip in enumerate(self.addresses):
            positions.setdefault(ip, []).append(index)

        keyed = []
        for arrival, result in enumerate(results):
            slots = positions.get(result.ip)
            key = slots.pop(0) if slots else len(self.addresses) + arrival
            keyed.append((key, result))
        keyed.sort(key=lambda item: item[0])
        return [result for _, result in keyed]
