"""
Custom Redactors - Rules built from user-supplied patterns.

Patterns come from BIIP_PATTERNS (one per line) or the ``--pattern`` CLI
option. Each one is checked on its own first, so a single bad pattern is
reported and dropped instead of taking the others down with it.
"""

import logging
from typing import Iterable, Mapping, Optional

from ..config import PATTERNS_ENV, split_patterns
from ..redactor import Redactor

logger = logging.getLogger(__name__)

CUSTOM_REPLACEMENT = "••••••"


def custom_patterns_redactor(patterns: Iterable[str]) -> Optional[Redactor]:
    """Combine the valid patterns into one alternation."""
    valid = []
    for pattern in patterns:
        if not pattern:
            continue
        try:
            Redactor.regex("custom", pattern, CUSTOM_REPLACEMENT)
        except ValueError as e:
            logger.warning(f"Ignoring custom pattern {pattern!r}: {e}")
            continue
        valid.append(pattern)

    if not valid:
        return None

    return Redactor.regex(
        name="custom",
        pattern="|".join(f"(?:{pattern})" for pattern in valid),
        replacement=CUSTOM_REPLACEMENT,
        description="User-supplied patterns",
    )


def user_patterns_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Build the custom redactor from BIIP_PATTERNS."""
    return custom_patterns_redactor(split_patterns(environ.get(PATTERNS_ENV)))
