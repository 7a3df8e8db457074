"""
User Redactors - Rules built from the current user's identity.

These run first in the pipeline: they are the most specific rules and their
values (a home path, a login name) would otherwise be split up by the
generic patterns further down.
"""

import logging
import os
from typing import Mapping, Optional

from ..redactor import Redactor

logger = logging.getLogger(__name__)

HOME_REPLACEMENT = "~"
USERNAME_REPLACEMENT = "user"


def home_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Replace the user's home directory with ``~``."""
    home = environ.get("HOME", "").rstrip("/" + os.sep)
    if not home:
        # Unset, empty or the filesystem root.
        logger.debug("HOME is not usable, skipping home redactor")
        return None

    return Redactor.literal(
        name="home",
        pattern=home,
        replacement=HOME_REPLACEMENT,
        description="Home directory path",
    )


def username_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Replace the current username with ``user``."""
    username = environ.get("USER") or environ.get("LOGNAME")
    if not username:
        logger.debug("USER and LOGNAME are unset, skipping username redactor")
        return None

    if username in USERNAME_REPLACEMENT:
        logger.debug(f"Username '{username}' is part of its own replacement, skipping")
        return None

    return Redactor.literal(
        name="username",
        pattern=username,
        replacement=USERNAME_REPLACEMENT,
        description="Current username",
    )
