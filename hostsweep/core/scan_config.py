"""Configuration for a reachability sweep."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    """Immutable parameters for one sweep run."""
    model_config = ConfigDict(frozen=True)

    timeout: int = Field(default=2, ge=0, description="Per-attempt timeout in seconds")
    attempts: int = Field(default=3, ge=1, description="Maximum ping attempts per address")
    concurrency: int = Field(default=100, ge=1, description="Maximum probes in flight")
    echo: bool = Field(default=False, description="Print a line for every alive host")
    export: bool = Field(default=False, description="Save results to an xlsx file")
    retry_delay: Optional[float] = Field(
        default=None, ge=0,
        description="Pause between failed attempts; platform default when unset"
    )
    sort_results: bool = Field(
        default=True,
        description="Order results by target position instead of completion order"
    )
    output_dir: str = Field(default='output', description="Base directory for exported files")

    def to_dict(self) -> dict:
        """Serialize the config to a plain dict."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: dict) -> 'ScanConfig':
        """Build a config from a dict, ignoring keys that are not fields."""
        init_args = {k: v for k, v in data.items() if k in cls.model_fields}
        return cls(**init_args)

    def __str__(self):
        return (
            f'ScanCfg(timeout={self.timeout}, attempts={self.attempts}, '
            f'concurrency={self.concurrency})'
        )
