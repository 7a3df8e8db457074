"""
Redactor Factories Package

Each factory takes an environment mapping and returns a ready-to-use
Redactor, or None when its precondition is missing (HOME unset, no secret
variables, no valid custom patterns, ...).

DEFAULT_FACTORIES fixes the pipeline order:
    1. User and environment specific values (home, username, secrets, custom)
    2. Network identifiers and credentials (URL credentials, email, MAC, IPs)
    3. Generic tokens and identifiers (JWT, cloud keys, UUID, cards, phones)

Specific rules run before generic ones so that, for example, the MAC rule
claims ``00:1A:2B:3C:4D:5E`` and URL credentials are masked before the email
rule could read ``pass@example.com`` as an address.

To add a new rule:
    1. Write a factory ``def my_redactor(environ) -> Optional[Redactor]``
    2. Insert it into DEFAULT_FACTORIES, or pass your own list to
       Biip.from_factories()
"""

from typing import Callable, Mapping, Optional

from ..redactor import Redactor
from .custom import custom_patterns_redactor, user_patterns_redactor
from .env import secrets_redactor
from .network import (
    email_redactor,
    ipv4_redactor,
    ipv6_redactor,
    mac_address_redactor,
    url_credentials_redactor,
)
from .patterns import (
    cloud_keys_redactor,
    credit_card_redactor,
    jwt_redactor,
    phone_number_redactor,
    uuid_redactor,
)
from .user import home_redactor, username_redactor

RedactorFactory = Callable[[Mapping[str, str]], Optional[Redactor]]

DEFAULT_FACTORIES: tuple[RedactorFactory, ...] = (
    home_redactor,
    username_redactor,
    secrets_redactor,
    user_patterns_redactor,
    url_credentials_redactor,
    email_redactor,
    mac_address_redactor,
    ipv4_redactor,
    ipv6_redactor,
    jwt_redactor,
    cloud_keys_redactor,
    uuid_redactor,
    credit_card_redactor,
    phone_number_redactor,
)

__all__ = [
    "DEFAULT_FACTORIES",
    "RedactorFactory",
    "cloud_keys_redactor",
    "credit_card_redactor",
    "custom_patterns_redactor",
    "email_redactor",
    "home_redactor",
    "ipv4_redactor",
    "ipv6_redactor",
    "jwt_redactor",
    "mac_address_redactor",
    "phone_number_redactor",
    "secrets_redactor",
    "url_credentials_redactor",
    "user_patterns_redactor",
    "username_redactor",
    "uuid_redactor",
]
