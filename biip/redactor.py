"""
Redactor - A single matching-and-replacement rule.

A Redactor is one of a closed set of strategies, selected by ``RedactorKind``:

    - LITERAL: exact substring, replaced unconditionally
    - REGEX: regular expression, every match replaced by a fixed token
    - REGEX_WITH_CAPTURE: regular expression, replaced by a template that
      may reference capture groups (``\\g<name>``, ``\\g<1>``, ``\\1``)
    - VALIDATED: broad regular expression; each match is handed to a
      validator and only accepted matches are replaced

Rules are fully checked when they are built. Applying a rule never fails,
except when a pattern-matching call exceeds its time budget, which raises
RedactionError.

Example:
    rule = Redactor.regex("email", r"\\b\\S+@\\S+\\.\\w{2,}\\b", "•••@•••")
    text, changed = rule.redact("mail me: foo@bar.com")
    # text: "mail me: •••@•••"
    # changed: True
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

import regex

Validator = Callable[[str], bool]


class RedactionError(RuntimeError):
    """Raised when a rule cannot finish scanning the text it was given."""


class RedactorKind(Enum):
    """The matching strategy used by a Redactor."""
    LITERAL = "literal"
    REGEX = "regex"
    REGEX_WITH_CAPTURE = "regex_with_capture"
    VALIDATED = "validated"


@dataclass(frozen=True)
class Redactor:
    """
    An immutable redaction rule.

    Prefer the named constructors (``literal``, ``regex``,
    ``regex_with_capture``, ``validated``) over calling this directly.

    Raises:
        ValueError: If the pattern is empty or does not compile, the
                    replacement template is malformed or references an
                    unknown group, a validated rule has no validator, or
                    the replacement would itself be matched by the rule.
    """
    name: str
    kind: RedactorKind
    pattern: str
    replacement: str
    validator: Optional[Validator] = None
    description: str = ""
    _compiled: Any = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError(f"Redactor '{self.name}' has an empty pattern")

        if self.kind is RedactorKind.LITERAL:
            if self.pattern in self.replacement:
                raise ValueError(
                    f"Redactor '{self.name}': replacement contains the pattern"
                )
            return

        try:
            compiled = regex.compile(self.pattern)
        except regex.error as e:
            raise ValueError(
                f"Redactor '{self.name}' has an invalid pattern: {e}"
            ) from e
        object.__setattr__(self, "_compiled", compiled)

        if self.kind is RedactorKind.REGEX_WITH_CAPTURE:
            self._check_template()
            return

        if self.kind is RedactorKind.VALIDATED and not callable(self.validator):
            raise ValueError(f"Redactor '{self.name}' needs a callable validator")

        for match in compiled.finditer(self.replacement):
            if self._accepts(match.group()):
                raise ValueError(
                    f"Redactor '{self.name}': replacement is matched by its own pattern"
                )

    # Named constructors

    @classmethod
    def literal(cls, name: str, pattern: str, replacement: str,
                description: str = "") -> "Redactor":
        return cls(name, RedactorKind.LITERAL, pattern, replacement,
                   description=description)

    @classmethod
    def regex(cls, name: str, pattern: str, replacement: str,
              description: str = "") -> "Redactor":
        return cls(name, RedactorKind.REGEX, pattern, replacement,
                   description=description)

    @classmethod
    def regex_with_capture(cls, name: str, pattern: str, template: str,
                           description: str = "") -> "Redactor":
        return cls(name, RedactorKind.REGEX_WITH_CAPTURE, pattern, template,
                   description=description)

    @classmethod
    def validated(cls, name: str, pattern: str, validator: Validator,
                  replacement: str, description: str = "") -> "Redactor":
        return cls(name, RedactorKind.VALIDATED, pattern, replacement,
                   validator=validator, description=description)

    def redact(self, text: str, timeout: Optional[float] = None) -> tuple[str, bool]:
        """
        Apply this rule to the given text once.

        Args:
            text: The input text.
            timeout: Seconds allowed for a single pattern-matching call.
                     None means no limit.

        Returns:
            A tuple of (result, changed). When nothing qualified for
            redaction, changed is False and result is the very same
            object that was passed in.

        Raises:
            RedactionError: If pattern matching timed out.
        """
        if not text:
            return text, False

        if self.kind is RedactorKind.LITERAL:
            if self.pattern not in text:
                return text, False
            return text.replace(self.pattern, self.replacement), True

        try:
            if self.kind is RedactorKind.VALIDATED:
                return self._redact_validated(text, timeout)
            if self.kind is RedactorKind.REGEX:
                # A callable keeps backslashes in the token literal.
                redacted, count = self._compiled.subn(
                    lambda _match: self.replacement, text, timeout=timeout
                )
            else:
                redacted, count = self._compiled.subn(
                    self.replacement, text, timeout=timeout
                )
        except TimeoutError as e:
            raise RedactionError(
                f"Redactor '{self.name}' timed out after {timeout}s"
            ) from e

        if count == 0:
            return text, False
        return redacted, True

    def _redact_validated(self, text: str, timeout: Optional[float]) -> tuple[str, bool]:
        pieces: list[str] = []
        last_end = 0
        accepted = 0

        for match in self._compiled.finditer(text, timeout=timeout):
            start, end = match.span()
            pieces.append(text[last_end:start])
            if self.validator(match.group()):
                pieces.append(self.replacement)
                accepted += 1
            else:
                pieces.append(match.group())
            last_end = end

        if accepted == 0:
            return text, False

        pieces.append(text[last_end:])
        return "".join(pieces), True

    def _accepts(self, candidate: str) -> bool:
        if self.kind is RedactorKind.VALIDATED:
            return bool(self.validator(candidate))
        return True

    def _check_template(self) -> None:
        # The trailing empty branch always matches "", so the template is
        # expanded once against the real group table.
        try:
            expander = regex.compile(f"(?:{self.pattern})|")
            expander.sub(self.replacement, "", count=1)
        except (regex.error, IndexError) as e:
            raise ValueError(
                f"Redactor '{self.name}' has an invalid replacement template: {e}"
            ) from e

    def __repr__(self) -> str:
        return f"<Redactor: {self.name} ({self.kind.value})>"
