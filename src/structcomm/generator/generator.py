"""Генератор случайных валидных кодов.

base10 равномерно в [0, 10^10), zero-padded; контрольная пара вычисляется,
поэтому результат валиден по построению.
"""

import logging
from typing import Final, Optional

from structcomm.core.domain.code import Code
from structcomm.core.math.checksum import BASE_LENGTH, compute_check
from structcomm.generator.random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)

BASE_UPPER_BOUND: Final[int] = 10**BASE_LENGTH


class CodeGenerator:
    """Генератор кодов поверх RandomSource."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Args:
            random_source: источник случайности (default: SystemRandomSource)
        """
        self.random_source = random_source or SystemRandomSource()

    def generate(self) -> Code:
        """Новый случайный код с корректной контрольной парой."""
        base10 = f"{self.random_source.randbelow(BASE_UPPER_BOUND):0{BASE_LENGTH}d}"
        code = Code(digits=base10 + compute_check(base10))
        logger.debug("Generated code %s", code.digits)
        return code
