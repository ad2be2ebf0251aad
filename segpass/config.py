"""
Configuration for the segmented password generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Tuple

from .charsets import CHARSET_NAMES
from .errors import ConfigurationError


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a valid count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name} must be an integer, got {type(value).__name__} {value!r}"
        )


@dataclass(frozen=True)
class PartsConfig:
    # How many segments the password is made of. Must be >= 1.
    amount: int = 1

    # Characters per segment. A value <= 0 yields an empty password.
    length: int = 30

    # Inserted between segments, never after the last one.
    delimiter: str = "-"

    def __post_init__(self) -> None:
        _require_int("parts.amount", self.amount)
        _require_int("parts.length", self.length)
        if not isinstance(self.delimiter, str):
            raise ConfigurationError(
                f"parts.delimiter must be a string, got "
                f"{type(self.delimiter).__name__} {self.delimiter!r}"
            )
        if self.amount < 1:
            raise ConfigurationError(
                f"parts.amount must be at least 1, got {self.amount}"
            )


@dataclass(frozen=True)
class GeneratorConfig:
    # Which charsets are drawn from.
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    special: bool = True
    extended: bool = False

    parts: PartsConfig = field(default_factory=PartsConfig)

    def __post_init__(self) -> None:
        for name in CHARSET_NAMES:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be true or false, got {type(value).__name__} {value!r}"
                )
        if not isinstance(self.parts, PartsConfig):
            raise ConfigurationError(
                f"parts must be a PartsConfig, got {type(self.parts).__name__}"
            )

    def enabled_flags(self) -> Tuple[bool, bool, bool, bool, bool]:
        """
        The five charset toggles in generation order.
        """
        return (
            self.lowercase,
            self.uppercase,
            self.numbers,
            self.special,
            self.extended,
        )


# Immutable default instance; derive variants with dataclasses.replace().
DEFAULT_CONFIG = GeneratorConfig()


def config_from_mapping(data: Mapping[str, Any]) -> GeneratorConfig:
    """
    Build a GeneratorConfig from a plain mapping, e.g. decoded JSON:

        {"numbers": false, "parts": {"amount": 3, "length": 5}}

    Missing keys keep their defaults. Unknown keys and wrongly typed
    values (e.g. the string "false") raise ConfigurationError.
    """
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    allowed = {f.name for f in fields(GeneratorConfig)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    values = dict(data)
    parts = values.pop("parts", None)

    if parts is None:
        parts_cfg = PartsConfig()
    elif isinstance(parts, PartsConfig):
        parts_cfg = parts
    elif isinstance(parts, Mapping):
        allowed_parts = {f.name for f in fields(PartsConfig)}
        unknown = sorted(set(parts) - allowed_parts)
        if unknown:
            raise ConfigurationError(
                f"Unknown parts configuration keys: {', '.join(unknown)}"
            )
        parts_cfg = PartsConfig(**parts)
    else:
        raise ConfigurationError(
            f"parts must be a mapping, got {type(parts).__name__} {parts!r}"
        )

    return GeneratorConfig(parts=parts_cfg, **values)
