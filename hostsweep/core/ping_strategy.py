"""
Platform specific ping behaviour.

The native ping utilities differ in argument shape, output encoding and in
how reliably their exit status reports success. Each family is modelled as a
strategy selected once at startup.
"""

import platform
from typing import List


class PingStrategy:
    """Base class for platform ping strategies."""
    name: str = 'base'
    # pause between a failed attempt and the next one
    retry_delay: float = 0.1

    def build_command(self, ip: str, timeout: int) -> List[str]:
        """Return the argv for a single-packet ping of ``ip``."""
        raise NotImplementedError

    def attempt_timeout(self, timeout: int) -> float:
        """Wall-clock seconds a single attempt is expected to take at most."""
        raise NotImplementedError

    def decode(self, output: bytes) -> str:
        """Decode raw utility output and lower-case it for matching."""
        return output.decode('utf-8', errors='replace').lower()

    def is_success(self, text: str, returncode: int) -> bool:
        """Decide whether the decoded output represents a reply."""
        raise NotImplementedError

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class MillisecondTimeoutStrategy(PingStrategy):
    """
    Windows style ping: ``-w`` takes milliseconds.

    The exit status is unreliable (it can be zero for "destination host
    unreachable" replies), so success is keyword based. Localised builds emit
    GBK rather than UTF-8.
    """
    name = 'windows'
    retry_delay = 0.2

    SUCCESS_KEYWORDS = (
        '回复', '来自',
        'reply from', 'ttl=', 'bytes=',
        'time=',
    )
    FALLBACK_ENCODING = 'gbk'
    PAYLOAD_SIZE = 32

    def build_command(self, ip: str, timeout: int) -> List[str]:
        return [
            'ping', '-n', '1',
            '-w', str(self.timeout_ms(timeout)),
            '-4', '-l', str(self.PAYLOAD_SIZE),
            ip
        ]

    def timeout_ms(self, timeout: int) -> int:
        # half of the configured timeout per attempt keeps retries bounded
        return int(timeout * 500)

    def attempt_timeout(self, timeout: int) -> float:
        return self.timeout_ms(timeout) / 1000

    def decode(self, output: bytes) -> str:
        try:
            text = output.decode('utf-8')
        except UnicodeDecodeError:
            text = output.decode(self.FALLBACK_ENCODING, errors='replace')
        return text.lower()

    def is_success(self, text: str, returncode: int) -> bool:
        return any(keyword in text for keyword in self.SUCCESS_KEYWORDS)


class DecimalTimeoutStrategy(PingStrategy):
    """Unix style ping: ``-W`` takes whole seconds, exit status is trusted."""
    name = 'unix'
    retry_delay = 0.1

    def build_command(self, ip: str, timeout: int) -> List[str]:
        return ['ping', '-c', '1', '-W', str(int(timeout)), ip]

    def attempt_timeout(self, timeout: int) -> float:
        return float(int(timeout))

    def is_success(self, text: str, returncode: int) -> bool:
        return returncode == 0


def select_strategy(system: str = '') -> PingStrategy:
    """Pick the strategy for ``system`` (defaults to the running platform)."""
    system = (system or platform.system()).lower()
    if system == 'windows':
        return MillisecondTimeoutStrategy()
    return DecimalTimeoutStrategy()
