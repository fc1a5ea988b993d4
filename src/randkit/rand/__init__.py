"""Randomness primitives and the synthetic text generator."""

from .lexicon import DEFAULT_LEXICON, load_lexicon
from .lorem import GenerationRequest, GenerationSettings, generate_text, random_text
from .selection import DEFAULT_CHARSET, pick_one, random_digits, random_hex, random_string
from .source import FastSource, RandomnessSource, SecureSource, next_int, source_for

__all__ = [
    "DEFAULT_CHARSET",
    "DEFAULT_LEXICON",
    "FastSource",
    "GenerationRequest",
    "GenerationSettings",
    "RandomnessSource",
    "SecureSource",
    "generate_text",
    "load_lexicon",
    "next_int",
    "pick_one",
    "random_digits",
    "random_hex",
    "random_string",
    "random_text",
    "source_for",
]
