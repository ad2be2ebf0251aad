"""
Segmented password generation.

A password is made of `parts.amount` segments of `parts.length`
characters joined by `parts.delimiter`. Characters are drawn uniformly
from the union of the enabled charsets, and candidates are redrawn
until every enabled charset appears at least once.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from .charsets import CHARSETS, EXTENDED, SPECIAL
from .config import DEFAULT_CONFIG, GeneratorConfig
from .entropy import estimate_entropy_bits
from .errors import ConfigurationError, GenerationExhaustedError
from .random_source import RandomSource, SystemRandomSource
from .scoring import score_password

logger = logging.getLogger(__name__)

# Large enough that exhaustion only happens for pathological configs.
DEFAULT_MAX_ATTEMPTS = 1_000_000

_SPECIAL_SET = frozenset(SPECIAL)
_EXTENDED_SET = frozenset(EXTENDED)


@dataclass(frozen=True)
class GeneratedPassword:
    value: str

    # Size of the alphabet the value was drawn from.
    charset_length: int

    @property
    def entropy_bits(self) -> float:
        return estimate_entropy_bits(len(self.value), self.charset_length)


def count_active_charsets(config: GeneratorConfig) -> int:
    """
    Number of enabled charsets (0-5).
    """
    return sum(1 for enabled in config.enabled_flags() if enabled)


def total_length(config: GeneratorConfig) -> int:
    """
    Full password length, delimiters included. Delimiters go between
    parts only, so a single part has none.
    """
    amount, length = config.parts.amount, config.parts.length
    return amount * length + (amount - 1) * len(config.parts.delimiter)


def build_alphabet(config: GeneratorConfig) -> List[str]:
    """
    Concatenate the enabled charsets in generation order.
    Duplicates across charsets are kept.
    """
    alphabet: List[str] = []
    for enabled, charset in zip(config.enabled_flags(), CHARSETS.values()):
        if enabled:
            alphabet.extend(charset)
    return alphabet


def _has_lowercase(password: str) -> bool:
    return any("a" <= c <= "z" for c in password)


def _has_uppercase(password: str) -> bool:
    return any("A" <= c <= "Z" for c in password)


def _has_number(password: str) -> bool:
    return any("0" <= c <= "9" for c in password)


def _has_special(password: str) -> bool:
    return any(c in _SPECIAL_SET for c in password)


def _has_extended(password: str) -> bool:
    return any(c in _EXTENDED_SET for c in password)


_COVERAGE_CHECKS = (
    ("lowercase", _has_lowercase),
    ("uppercase", _has_uppercase),
    ("numbers", _has_number),
    ("special", _has_special),
    ("extended", _has_extended),
)


def missing_charsets(password: str, config: GeneratorConfig) -> List[str]:
    """
    Names of the enabled charsets that have no character in `password`.
    """
    return [
        name
        for enabled, (name, check) in zip(config.enabled_flags(), _COVERAGE_CHECKS)
        if enabled and not check(password)
    ]


def _draw_candidate(
    config: GeneratorConfig,
    alphabet: List[str],
    random_source: RandomSource,
) -> str:
    amount, length, delimiter = (
        config.parts.amount,
        config.parts.length,
        config.parts.delimiter,
    )
    size = len(alphabet)

    parts: list[str] = []
    for _ in range(amount):
        chars: list[str] = []
        while len(chars) < length:
            index = math.floor(random_source.random() * size)
            # Keep misbehaving sources (1.0, negatives) inside the alphabet.
            chars.append(alphabet[max(0, min(index, size - 1))])
        parts.append("".join(chars))

    return delimiter.join(parts)


def generate(
    config: Optional[GeneratorConfig] = None,
    random_source: Optional[RandomSource] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GeneratedPassword:
    """
    Generate a password for `config`.

    - A part length <= 0 returns an empty password right away, without
      touching the random source.
    - Raises ConfigurationError, before any random draw, when the full
      length cannot hold one character of every enabled charset or when
      no charset is enabled.
    - Candidates missing an enabled charset are discarded and redrawn, at
      most `max_attempts` times; GenerationExhaustedError follows.
    """
    cfg = config or DEFAULT_CONFIG
    source = random_source if random_source is not None else SystemRandomSource()

    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    if cfg.parts.length <= 0:
        return GeneratedPassword(value="", charset_length=len(build_alphabet(cfg)))

    if total_length(cfg) < count_active_charsets(cfg):
        raise ConfigurationError(
            "Cannot satisfy all enabled charset constraints within requested "
            f"length ({total_length(cfg)} < {count_active_charsets(cfg)})"
        )

    if count_active_charsets(cfg) == 0:
        raise ConfigurationError("No charset enabled; nothing to draw from")

    missing: List[str] = []
    for attempt in range(1, max_attempts + 1):
        alphabet = build_alphabet(cfg)
        candidate = _draw_candidate(cfg, alphabet, source)

        missing = missing_charsets(candidate, cfg)
        if not missing:
            if attempt > 1:
                logger.debug("Password generated after %d attempts", attempt)
            return GeneratedPassword(value=candidate, charset_length=len(alphabet))

        logger.debug(
            "Attempt %d missing charsets %s; redrawing", attempt, ", ".join(missing)
        )

    logger.warning(
        "Giving up after %d attempts (total length %d, %d charsets)",
        max_attempts,
        total_length(cfg),
        count_active_charsets(cfg),
    )
    raise GenerationExhaustedError(max_attempts, missing)


class PasswordGenerator:
    """
    Convenience wrapper binding a configuration and a random source.
    Holds no state beyond what it is given.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        random_source: Optional[RandomSource] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.random_source = (
            random_source if random_source is not None else SystemRandomSource()
        )
        self.max_attempts = max_attempts

    def count_active_charsets(self) -> int:
        return count_active_charsets(self.config)

    @property
    def password_length(self) -> int:
        return total_length(self.config)

    def generate(self) -> GeneratedPassword:
        return generate(self.config, self.random_source, self.max_attempts)

    @staticmethod
    def score_password(password: Optional[str]) -> int:
        return score_password(password)
