"""
Contract Validation Module

Модуль для валидации JSON контрактов structcomm.
"""

from .validators import (
    SchemaLoader,
    ValidationResponseValidator,
    validate_validation_response,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ValidationResponseValidator",
    # Functions
    "validate_validation_response",
]
