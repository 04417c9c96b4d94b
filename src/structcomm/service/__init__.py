"""Service — фасад операций ядра для request-слоя."""

from .facade import NOT_FOUND_REASONS, StructCommService, utc_now

__all__ = [
    "NOT_FOUND_REASONS",
    "StructCommService",
    "utc_now",
]
