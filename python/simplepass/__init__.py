"""
simplepass - randomized password generation with entropy estimates.
"""

from .utils.password_generator import (
    GenerationOptions,
    build_alphabet,
    count_entropy_bits,
    generate_password,
)
from .utils.strength import classify_strength

__version__ = "1.0.0"

__all__ = [
    'GenerationOptions',
    'build_alphabet',
    'classify_strength',
    'count_entropy_bits',
    'generate_password',
]
