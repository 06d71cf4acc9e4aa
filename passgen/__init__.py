"""
Structured password generator package.
"""

from .config import GenerationConfig, QuantumSourceConfig, DEFAULT_CONFIG
from .cli import assess_strength, generate_password, generate_password_with_meta
from .builder import PasswordBuilder
from .errors import InvalidRangeError, PasswordEngineError, RandomSourceError
from .mapping import CharacterClass, IndexSampler
from .random_source import (
    CallableRandomSource,
    RandomSource,
    SeededRandomSource,
    SequenceRandomSource,
    SystemRandomSource,
)
from .strength import StrengthLabel, score

__all__ = [
    "GenerationConfig",
    "QuantumSourceConfig",
    "DEFAULT_CONFIG",
    "assess_strength",
    "generate_password",
    "generate_password_with_meta",
    "PasswordBuilder",
    "InvalidRangeError",
    "PasswordEngineError",
    "RandomSourceError",
    "CharacterClass",
    "IndexSampler",
    "CallableRandomSource",
    "RandomSource",
    "SeededRandomSource",
    "SequenceRandomSource",
    "SystemRandomSource",
    "StrengthLabel",
    "score",
]
