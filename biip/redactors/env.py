"""
Environment Redactors - Rules built from secret values in the environment.

Any variable whose name contains one of SECRET_KEYWORDS (case-insensitive)
contributes its value to a single alternation, so ``MY_API_KEY=abc123...``
means every occurrence of ``abc123...`` is replaced.
"""

import logging
from typing import Iterable, Mapping, Optional

import regex

from ..redactor import Redactor

logger = logging.getLogger(__name__)

SECRET_KEYWORDS = ("password", "secret", "token", "key", "username", "email")
SECRET_REPLACEMENT = "••••••••"

# Values shorter than this are never treated as secrets.
MIN_SECRET_LENGTH = 4


def find_secret_values(environ: Mapping[str, str],
                       keywords: Iterable[str] = SECRET_KEYWORDS) -> list[str]:
    """
    Return the trimmed values of sensitive-looking variables.

    Values are de-duplicated and sorted longest first, so a secret that
    contains another secret is matched as a whole.
    """
    keywords = tuple(keyword.lower() for keyword in keywords)
    values = set()

    for key, value in environ.items():
        if not any(keyword in key.lower() for keyword in keywords):
            continue
        value = value.strip()
        if not value:
            continue
        if len(value) < MIN_SECRET_LENGTH:
            logger.debug(f"Value of {key} is shorter than {MIN_SECRET_LENGTH} characters, not redacting it")
            continue
        values.add(value)

    return sorted(values, key=lambda value: (-len(value), value))


def secrets_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Replace the values of sensitive environment variables with dots."""
    values = find_secret_values(environ)
    if not values:
        logger.debug("No sensitive environment variables found, skipping secrets redactor")
        return None

    return Redactor.regex(
        name="secrets",
        pattern="|".join(regex.escape(value) for value in values),
        replacement=SECRET_REPLACEMENT,
        description="Values of sensitive environment variables",
    )
