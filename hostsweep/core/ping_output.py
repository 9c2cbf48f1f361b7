"""Interpretation of raw ping utility output."""

from typing import Optional, Tuple

from hostsweep.core.ping_strategy import PingStrategy

TIME_MARKERS = ('time=', '时间=', 'latency=')
_NUMERIC_CHARS = frozenset('0123456789.-')


def classify(
    output: bytes,
    strategy: PingStrategy,
    returncode: int = 0
) -> Tuple[bool, Optional[float]]:
    """
    Turn one ping invocation's output into ``(success, latency_ms)``.

    Output that matches no success rule is a failure with no latency;
    it is never surfaced as an error.
    """
    if not output:
        return False, None

    text = strategy.decode(output)
    if not strategy.is_success(text, returncode):
        return False, None
    return True, extract_latency(text)


def extract_latency(text: str) -> Optional[float]:
    """
    Pull the round trip time in milliseconds out of decoded ping output.

    Uses the first time marker present. Negative values are discarded since
    some ping builds report ``time=-1ms`` on error.
    """
    text = text.lower()
    for marker in TIME_MARKERS:
        pos = text.find(marker)
        if pos != -1:
            remainder = text[pos + len(marker):]
            break
    else:
        return None

    start = next(
        (i for i, char in enumerate(remainder) if char in _NUMERIC_CHARS),
        None
    )
    if start is None:
        return None

    end = start
    while end < len(remainder) and remainder[end] in _NUMERIC_CHARS:
        end += 1

    try:
        value = float(remainder[start:end])
    except ValueError:
        return None
    if value < 0:
        return None
    return value
