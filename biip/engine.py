"""
Biip - The redaction pipeline.

The pipeline holds an ordered, fixed tuple of Redactors and threads the
output of each one into the next. Rules are built once, up front, by
factories; a factory that declines (or fails) simply leaves its rule out.

The engine holds no mutable state after construction, so one instance can
be shared by concurrent callers.
"""

import logging
import os
from typing import Iterable, Mapping, Optional

from .config import DEFAULT_MATCH_TIMEOUT, PATTERNS_ENV, load_settings
from .redactor import Redactor
from .redactors import DEFAULT_FACTORIES, RedactorFactory

logger = logging.getLogger(__name__)


def build_redactors(factories: Iterable[RedactorFactory],
                    environ: Mapping[str, str]) -> list[Redactor]:
    """
    Run each factory against the environment and keep the rules it produces.

    Factories returning None are skipped. A factory raising ValueError
    (bad pattern, unsafe replacement) is logged and skipped; it never stops
    the remaining factories from running.
    """
    redactors = []
    for factory in factories:
        name = getattr(factory, "__name__", repr(factory))
        try:
            redactor = factory(environ)
        except ValueError as e:
            logger.warning(f"Redactor factory '{name}' failed: {e}")
            continue
        if redactor is None:
            logger.debug(f"Redactor factory '{name}' produced no rule")
            continue
        redactors.append(redactor)
    return redactors


class Biip:
    """
    Ordered pipeline of redaction rules.

    Example:
        biip = Biip()
        biip.process("Email: john@example.com")
        # "Email: •••@•••"

        # With an explicit rule list
        biip = Biip([Redactor.literal("name", "Alice", "<name>")])
        safe, was_redacted = biip.redact("Hi Alice")
        # safe: "Hi <name>"
        # was_redacted: True
    """

    def __init__(self, redactors: Optional[Iterable[Redactor]] = None,
                 match_timeout: Optional[float] = DEFAULT_MATCH_TIMEOUT):
        """
        Initialize the pipeline.

        Args:
            redactors: Rules to apply, in order. If None, the default rules
                       are built from os.environ.
            match_timeout: Seconds allowed per pattern-matching call, or
                           None for no limit.
        """
        if redactors is None:
            redactors = build_redactors(DEFAULT_FACTORIES, os.environ)
        self._redactors: tuple[Redactor, ...] = tuple(redactors)
        self._match_timeout = match_timeout
        logger.info(f"Built pipeline with {len(self._redactors)} redactors: {', '.join(self.names)}")

    @classmethod
    def from_factories(cls, factories: Iterable[RedactorFactory] = DEFAULT_FACTORIES,
                       environ: Optional[Mapping[str, str]] = None,
                       match_timeout: Optional[float] = DEFAULT_MATCH_TIMEOUT) -> "Biip":
        """Build a pipeline from factories, evaluated against environ."""
        if environ is None:
            environ = os.environ
        return cls(build_redactors(factories, environ), match_timeout=match_timeout)

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None,
                         extra_patterns: Iterable[str] = ()) -> "Biip":
        """
        Build the default pipeline using settings from the environment.

        Args:
            environ: Mapping to read settings and secrets from. Defaults to
                     os.environ.
            extra_patterns: Additional user patterns, appended to those in
                            BIIP_PATTERNS.
        """
        environ = dict(os.environ if environ is None else environ)
        settings = load_settings(environ)

        patterns = settings.patterns + tuple(extra_patterns)
        if patterns:
            environ[PATTERNS_ENV] = "\n".join(patterns)

        return cls.from_factories(DEFAULT_FACTORIES, environ, settings.match_timeout)

    @property
    def redactors(self) -> tuple[Redactor, ...]:
        return self._redactors

    @property
    def names(self) -> list[str]:
        """Return the names of the configured rules, in order."""
        return [redactor.name for redactor in self._redactors]

    @property
    def match_timeout(self) -> Optional[float]:
        return self._match_timeout

    def redact(self, text: str) -> tuple[str, bool]:
        """
        Apply every rule, in order, to the given text.

        Args:
            text: The input text to sanitize.

        Returns:
            A tuple of (redacted_text, was_redacted). If no rule matched,
            redacted_text is the input object itself.

        Raises:
            RedactionError: If a rule could not finish. No partially
                            redacted text is returned in that case.
        """
        if not text:
            return text, False

        was_redacted = False
        for redactor in self._redactors:
            text, changed = redactor.redact(text, timeout=self._match_timeout)
            was_redacted = was_redacted or changed

        return text, was_redacted

    def process(self, text: str) -> str:
        """Return the text with every rule applied."""
        return self.redact(text)[0]

    def process_batch(self, texts: Iterable[str]) -> tuple[list[str], bool]:
        """
        Redact several independent texts.

        Returns:
            A tuple of (redacted_texts, any_redacted).
        """
        results = []
        any_redacted = False

        for text in texts:
            redacted_text, was_redacted = self.redact(text)
            results.append(redacted_text)
            if was_redacted:
                any_redacted = True

        return results, any_redacted

    def __repr__(self) -> str:
        return f"<Biip: {len(self._redactors)} redactors>"


# Singleton instance for convenience
_default_engine: Optional[Biip] = None


def get_default_engine() -> Biip:
    """
    Get the default Biip instance, built from the process environment.

    For more control, use Biip.from_environment() or Biip.from_factories().
    """
    global _default_engine
    if _default_engine is None:
        _default_engine = Biip.from_environment()
    return _default_engine
