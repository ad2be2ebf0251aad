"""
Segmented password generator package.
"""

from .config import DEFAULT_CONFIG, GeneratorConfig, PartsConfig, config_from_mapping
from .errors import (
    ConfigurationError,
    GenerationExhaustedError,
    PasswordGeneratorError,
    RandomSourceError,
)
from .generator import (
    DEFAULT_MAX_ATTEMPTS,
    GeneratedPassword,
    PasswordGenerator,
    build_alphabet,
    count_active_charsets,
    generate,
    missing_charsets,
    total_length,
)
from .random_source import RandomSource, SequenceRandomSource, SystemRandomSource
from .scoring import score_password, strength_label

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_ATTEMPTS",
    "ConfigurationError",
    "GeneratedPassword",
    "GenerationExhaustedError",
    "GeneratorConfig",
    "PartsConfig",
    "PasswordGenerator",
    "PasswordGeneratorError",
    "RandomSource",
    "RandomSourceError",
    "SequenceRandomSource",
    "SystemRandomSource",
    "build_alphabet",
    "config_from_mapping",
    "count_active_charsets",
    "generate",
    "missing_charsets",
    "score_password",
    "strength_label",
    "total_length",
]
