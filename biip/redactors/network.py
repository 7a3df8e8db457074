"""
Network Redactors - Credentials in URLs, emails, MAC and IP addresses.

The IP rules use deliberately broad patterns and hand every candidate to a
parser-based validator, so private and local addresses are left alone.
"""

from typing import Mapping, Optional

from ..redactor import Redactor
from ..validators import is_public_ipv4, is_public_ipv6

EMAIL_REPLACEMENT = "•••@•••"
MAC_REPLACEMENT = "••:••:••:••:••:••"
IPV4_REPLACEMENT = "••.••.••.••"
IPV6_REPLACEMENT = "••:••:••:••:••:••:••:••"


def url_credentials_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Mask ``user:password@`` in URLs, keeping the scheme and host."""
    return Redactor.regex_with_capture(
        name="url_credentials",
        pattern=r"(?P<protocol>https?|ftp)://([^:/\s]+):([^@\s]+)@",
        template=r"\g<protocol>://••••:••••@",
        description="Credentials embedded in a URL",
    )


def email_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    return Redactor.regex(
        name="email",
        pattern=r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
        replacement=EMAIL_REPLACEMENT,
        description="Email address",
    )


def mac_address_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    return Redactor.regex(
        name="mac_address",
        pattern=r"\b(?:[0-9A-Fa-f]{2}[:-]){5}[0-9A-Fa-f]{2}\b",
        replacement=MAC_REPLACEMENT,
        description="MAC address",
    )


def ipv4_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Redact public IPv4 addresses only."""
    return Redactor.validated(
        name="ipv4",
        pattern=r"\b(?:\d{1,3}\.){3}\d{1,3}\b",
        validator=is_public_ipv4,
        replacement=IPV4_REPLACEMENT,
        description="Public IPv4 address",
    )


def ipv6_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """
    Redact public IPv6 addresses only.

    The candidate must contain a colon and end in a hex digit, which already
    skips a bare ``::`` and most ``crate::path`` identifiers.
    """
    return Redactor.validated(
        name="ipv6",
        pattern=r"\b[0-9a-fA-F:]+:[0-9a-fA-F:]*[0-9a-fA-F]\b",
        validator=is_public_ipv6,
        replacement=IPV6_REPLACEMENT,
        description="Public IPv6 address",
    )
