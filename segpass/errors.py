"""
Exceptions raised by the password generator.
"""

from __future__ import annotations

from typing import Sequence


class PasswordGeneratorError(Exception):
    """Generic generator error."""


class ConfigurationError(PasswordGeneratorError, ValueError):
    """The configuration cannot produce a valid password."""


class GenerationExhaustedError(PasswordGeneratorError):
    """
    Raised when no candidate covering every enabled charset was drawn
    within the allowed number of attempts.
    """

    def __init__(self, attempts: int, missing: Sequence[str] = ()) -> None:
        self.attempts = attempts
        self.missing = tuple(missing)
        detail = ", ".join(self.missing) or "unknown"
        super().__init__(
            f"No password covering every enabled charset after "
            f"{attempts} attempt(s); last candidate was missing: {detail}"
        )


class RandomSourceError(PasswordGeneratorError, RuntimeError):
    """A random source could not be created or produced no data."""
