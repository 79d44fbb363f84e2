# config.py
import os
import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Defaults (override via environment or command line)
DEFAULT_COUNT = 100
DEFAULT_THRESHOLD_MS = 1000.0
DEFAULT_LOAD_REQUESTS = 100
MAX_TIMEOUT_S = 86400.0  # socket timeouts much larger than this overflow in urllib3


class GateMode(str, Enum):
    OFF = "off"          # informational only, nothing printed about the threshold
    WARN = "warn"        # print a warning when p95 is above the threshold, exit 0
    ENFORCE = "enforce"  # p95 above the threshold exits with code 1


DEFAULT_GATE_MODE = GateMode.WARN


def env_defaults() -> dict:
    """Read defaults from the environment, like the demo scripts do with os.getenv."""
    return {
        "url": os.getenv("TARGET_URL"),
        "count": os.getenv("REQUESTS", DEFAULT_COUNT),
        "threshold_ms": os.getenv("THRESHOLD_MS", DEFAULT_THRESHOLD_MS),
        "gate_mode": os.getenv("GATE_MODE", DEFAULT_GATE_MODE.value),
        "requests_count": os.getenv("LOAD_REQUESTS", DEFAULT_LOAD_REQUESTS),
        "concurrency": os.getenv("CONCURRENCY"),
        "timeout": os.getenv("TIMEOUT"),
    }


class Settings(BaseModel):
    """Validated configuration for one run"""
    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    count: int = Field(default=DEFAULT_COUNT, gt=0)
    threshold_ms: float = Field(default=DEFAULT_THRESHOLD_MS, ge=0)
    gate_mode: GateMode = DEFAULT_GATE_MODE
    verbose: bool = False
    emulate_load: bool = False
    requests_count: int = Field(default=DEFAULT_LOAD_REQUESTS, gt=0)
    concurrency: Optional[int] = Field(default=None, gt=0)
    timeout: Optional[float] = Field(default=None, gt=0, le=MAX_TIMEOUT_S, allow_inf_nan=False)
    json_path: Optional[str] = None
    plot_path: Optional[str] = None

    @field_validator("threshold_ms")
    @classmethod
    def threshold_must_be_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("threshold must be a finite number of milliseconds")
        return value

    @property
    def gate_enabled(self) -> bool:
        return self.gate_mode is GateMode.ENFORCE
