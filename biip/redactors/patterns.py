"""
Pattern Redactors - Tokens and identifiers with a recognisable shape.

These are the most generic rules and run last. Credit card and phone
candidates are confirmed by a checksum or by phonenumbers before they are
replaced.
"""

from typing import Mapping, Optional

from ..redactor import Redactor
from ..validators import is_luhn_valid, is_phone_number

JWT_REPLACEMENT = "••••🌐•"
CLOUD_KEY_REPLACEMENT = "••••☁️•"
UUID_REPLACEMENT = "••••••••-••••-••••-••••-••••••••••••"
CREDIT_CARD_REPLACEMENT = "•••• •••• •••• ••••"
PHONE_REPLACEMENT = "(•••) •••-••••"

CLOUD_KEY_PATTERNS = [
    r"\b(?:AKIA|ASIA)[0-9A-Z]{16}\b",  # AWS access key ID
    r"\bsk-[a-zA-Z0-9]{32,48}\b",  # OpenAI
    r"\bAI[a-zA-Z0-9_-]{30,40}\b",  # Gemini
    r"\bgcp_[a-zA-Z0-9_-]{30,40}\b",  # Google Cloud
    r"\bxai-[a-zA-Z0-9]{32,64}\b",  # xAI
    r"\bcsk-[a-zA-Z0-9]{40,50}\b",  # Cerebras
]


def jwt_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    return Redactor.regex(
        name="jwt",
        pattern=r"\bey[a-zA-Z0-9_-]{10,}\.ey[a-zA-Z0-9_-]{10,}\.[a-zA-Z0-9_-]*",
        replacement=JWT_REPLACEMENT,
        description="JSON Web Token",
    )


def cloud_keys_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    return Redactor.regex(
        name="cloud_keys",
        pattern="|".join(CLOUD_KEY_PATTERNS),
        replacement=CLOUD_KEY_REPLACEMENT,
        description="Cloud provider API key",
    )


def uuid_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    return Redactor.regex(
        name="uuid",
        pattern=r"\b[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\b",
        replacement=UUID_REPLACEMENT,
        description="UUID",
    )


def credit_card_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Redact 13-19 digit card numbers that pass the Luhn check."""
    return Redactor.validated(
        name="credit_card",
        pattern=r"\b\d(?:[ -]?\d){12,18}\b",
        validator=is_luhn_valid,
        replacement=CREDIT_CARD_REPLACEMENT,
        description="Credit card number",
    )


def phone_number_redactor(environ: Mapping[str, str]) -> Optional[Redactor]:
    """Redact North American style phone numbers that phonenumbers accepts."""
    return Redactor.validated(
        name="phone_number",
        pattern=r"(?:\(\d{3}\)|\b\d{3})[ .-]?\d{3}[ .-]?\d{4}\b",
        validator=is_phone_number,
        replacement=PHONE_REPLACEMENT,
        description="Phone number",
    )
