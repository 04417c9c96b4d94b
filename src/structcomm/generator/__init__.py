"""Generator — случайные коды с корректной контрольной парой."""

from .generator import BASE_UPPER_BOUND, CodeGenerator
from .random_source import RandomSource, SequenceRandomSource, SystemRandomSource

__all__ = [
    "BASE_UPPER_BOUND",
    "CodeGenerator",
    "RandomSource",
    "SystemRandomSource",
    "SequenceRandomSource",
]
