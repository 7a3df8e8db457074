"""
Validators - Pure predicates deciding whether a candidate match is redactable.

Each validator takes only the matched substring. Broad patterns overmatch on
purpose (MAC addresses, timestamps and ``crate::path`` style identifiers all
look a bit like IPv6); the validators parse the candidate and reject anything
that is not a real, public value.
"""

import ipaddress

import phonenumbers

# RFC 1918
_PRIVATE_IPV4_NETWORKS = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)
_BROADCAST_IPV4 = ipaddress.IPv4Address("255.255.255.255")
_UNIQUE_LOCAL_IPV6 = ipaddress.IPv6Network("fc00::/7")

DEFAULT_PHONE_REGION = "US"


def is_public_ipv4(candidate: str) -> bool:
    """
    Return True if the candidate is a public (redactable) IPv4 address.

    Loopback, link-local, private, unspecified, multicast and broadcast
    addresses are local noise rather than PII, so they return False, as
    does anything that fails to parse.
    """
    try:
        address = ipaddress.IPv4Address(candidate)
    except ValueError:
        return False

    return not (
        address.is_loopback
        or address.is_link_local
        or any(address in network for network in _PRIVATE_IPV4_NETWORKS)
        or address.is_unspecified
        or address.is_multicast
        or address == _BROADCAST_IPV4
    )


def is_public_ipv6(candidate: str) -> bool:
    """
    Return True if the candidate is a public (redactable) IPv6 address.

    Loopback (::1), link-local (fe80::/10), unique local (fc00::/7),
    unspecified (::) and multicast addresses return False. IPv4-mapped
    addresses are judged as the IPv4 address they carry.
    """
    try:
        address = ipaddress.IPv6Address(candidate)
    except ValueError:
        return False

    if address.ipv4_mapped is not None:
        return is_public_ipv4(str(address.ipv4_mapped))

    # Not is_private: that also covers documentation ranges like 2001:db8::/32.
    return not (
        address.is_loopback
        or address.is_link_local
        or address in _UNIQUE_LOCAL_IPV6
        or address.is_unspecified
        or address.is_multicast
    )


def is_luhn_valid(candidate: str) -> bool:
    """Return True if the digits in the candidate pass the Luhn checksum."""
    digits = [int(char) for char in candidate if char.isdigit()]
    if not 13 <= len(digits) <= 19:
        return False

    total = 0
    for position, digit in enumerate(reversed(digits)):
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_phone_number(candidate: str, region: str = DEFAULT_PHONE_REGION) -> bool:
    """Return True if phonenumbers considers the candidate a valid number."""
    try:
        number = phonenumbers.parse(candidate, region)
    except phonenumbers.NumberParseException:
        return False
    return phonenumbers.is_valid_number(number)
