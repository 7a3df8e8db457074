"""
biip - Scrub personally identifying information from text.

Text is run through an ordered pipeline of redaction rules. The rules cover
the home directory, the username, secret environment values, credentials
in URLs, emails, MAC and public IP addresses, JWTs, cloud keys, UUIDs,
credit cards and phone numbers.

Architecture:
    - Redactor: One rule (literal, regex, regex-with-capture or validated)
    - Biip: The pipeline, applying rules in a fixed order
    - redactors/: Factories that build the default rules from the environment
    - validators: Parser-based checks used by the validated rules

Example:
    from biip import Biip

    biip = Biip()
    safe_text, was_redacted = biip.redact("DNS: 8.8.8.8, gateway: 192.168.1.1")
    # safe_text: "DNS: ••.••.••.••, gateway: 192.168.1.1"
    # was_redacted: True
"""

from .engine import Biip, get_default_engine
from .redactor import RedactionError, Redactor, RedactorKind

__all__ = ["Biip", "Redactor", "RedactorKind", "RedactionError", "get_default_engine"]
