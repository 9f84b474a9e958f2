"""
process-wide settings for how producers deliver failures.

producers read the active config when their sequence is created, so a
sequence built inside `configured(...)` keeps those settings after the
block exits.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, replace, asdict
from typing import Iterator, Optional

from .types import ERROR_MODES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceConfig:
    """configuration for failure delivery"""
    error_mode: str = 'tagged'  # tagged, inline, raise
    log_failures: bool = True

    def __post_init__(self):
        if self.error_mode not in ERROR_MODES:
            raise ValueError(f"error_mode must be one of {ERROR_MODES}, got {self.error_mode!r}")


_active = SequenceConfig()


def get_config() -> SequenceConfig:
    """the config producers currently use"""
    return _active


def configure(**changes) -> SequenceConfig:
    """replace the process-wide config, keeping fields not named in changes"""
    global _active
    _active = replace(_active, **changes)
    logger.debug(f"config: {asdict(_active)}")
    return _active


@contextmanager
def configured(**changes) -> Iterator[SequenceConfig]:
    """temporarily override config fields"""
    global _active
    previous = _active
    _active = replace(previous, **changes)
    try:
        yield _active
    finally:
        _active = previous


def resolve_error_mode(error_mode: Optional[str]) -> str:
    """per-call override wins over the active config"""
    if error_mode is None:
        return _active.error_mode
    if error_mode not in ERROR_MODES:
        raise ValueError(f"error_mode must be one of {ERROR_MODES}, got {error_mode!r}")
    return error_mode
