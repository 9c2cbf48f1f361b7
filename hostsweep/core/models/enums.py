"""Enumerations shared by the result models."""

from enum import Enum


class HostStatus(str, Enum):
    """Reachability verdict for one address."""
    ALIVE = 'alive'
    DEAD = 'dead'
