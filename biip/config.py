"""
Configuration for biip, read from environment variables.

Variables:
    BIIP_MATCH_TIMEOUT: Seconds allowed per pattern-matching call
                        (default 5). "0", "none" or "off" disables it.
    BIIP_PATTERNS: Extra user patterns to redact, one per line.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

MATCH_TIMEOUT_ENV = "BIIP_MATCH_TIMEOUT"
PATTERNS_ENV = "BIIP_PATTERNS"

DEFAULT_MATCH_TIMEOUT = 5.0
_DISABLED_VALUES = {"0", "none", "off"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the redaction pipeline."""
    match_timeout: Optional[float] = DEFAULT_MATCH_TIMEOUT
    patterns: tuple[str, ...] = ()


def parse_timeout(value: Optional[str]) -> Optional[float]:
    """
    Parse a timeout value in seconds.

    Returns None when the limit is disabled, and the default when the
    value is missing or not a finite number.
    """
    if value is None or not value.strip():
        return DEFAULT_MATCH_TIMEOUT

    value = value.strip().lower()
    if value in _DISABLED_VALUES:
        return None

    try:
        seconds = float(value)
    except ValueError:
        seconds = math.nan

    if not math.isfinite(seconds):
        logger.warning(f"Invalid {MATCH_TIMEOUT_ENV} '{value}', using {DEFAULT_MATCH_TIMEOUT}s")
        return DEFAULT_MATCH_TIMEOUT

    if seconds <= 0:
        return None
    return seconds


def split_patterns(value: Optional[str]) -> tuple[str, ...]:
    """Split a newline-separated pattern list, dropping blank lines."""
    if not value:
        return ()
    return tuple(line.strip() for line in value.splitlines() if line.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the given mapping, or from os.environ."""
    if environ is None:
        environ = os.environ
    return Settings(
        match_timeout=parse_timeout(environ.get(MATCH_TIMEOUT_ENV)),
        patterns=split_patterns(environ.get(PATTERNS_ENV)),
    )
