"""Small formatting helpers."""


def format_duration(seconds: float) -> str:
    """
    Format a duration as ``1h 2m 3s``, dropping leading zero units.

    Durations under a minute keep two decimals.
    """
    if seconds < 60:
        return f'{seconds:.2f}s'

    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f'{hours}h {minutes}m {secs}s'
    return f'{minutes}m {secs}s'


def format_latency(latency_ms, placeholder: str = '-') -> str:
    """Two-decimal latency, or ``placeholder`` when none was reported."""
    if latency_ms is None:
        return placeholder
    return f'{latency_ms:.2f}'
