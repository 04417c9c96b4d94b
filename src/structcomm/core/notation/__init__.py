"""
Notations — разбор, рендеринг и поиск кодов в тексте.
"""

from structcomm.core.notation.codec import (
    NUMERIC_FORMAT_REASON,
    STRUCTURED_FORMAT_REASON,
    STRUCTURED_TEMPLATE,
    digits_only,
    parse_numeric,
    parse_structured,
    render,
    validate,
)
from structcomm.core.notation.extractor import (
    BLANK_INPUT_REASON,
    ExtractionWindow,
    extract,
    find_numeric12,
    find_structured,
)

__all__ = [
    # Codec
    "STRUCTURED_TEMPLATE",
    "STRUCTURED_FORMAT_REASON",
    "NUMERIC_FORMAT_REASON",
    "parse_numeric",
    "parse_structured",
    "digits_only",
    "render",
    "validate",
    # Extractor
    "BLANK_INPUT_REASON",
    "ExtractionWindow",
    "extract",
    "find_structured",
    "find_numeric12",
]
