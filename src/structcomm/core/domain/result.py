"""
CheckResult — результат проверки кода

Результат моделируется как tagged variant (discriminator `status`):
- CheckOk: код валиден, обе записи присутствуют
- CheckMismatch: код синтаксически корректен, контрольная пара неверна;
  записи присутствуют, чтобы вызывающий мог показать нормализованную форму
- CheckErr: ничего разобрать не удалось (формат / не найдено / пустой ввод)

Временная метка прикрепляется отдельно в CheckResult.
"""

from datetime import datetime
from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, Field

from structcomm.core.domain.code import Code, ErrorKind


# =============================================================================
# OUTCOME VARIANTS
# =============================================================================


class CheckOk(BaseModel):
    """Код валиден."""

    status: Literal["ok"] = "ok"
    code: Code

    model_config = {"frozen": True}


class CheckMismatch(BaseModel):
    """Контрольная пара не совпадает с вычисленной для base10."""

    status: Literal["mismatch"] = "mismatch"
    code: Code
    expected_check: str = Field(..., pattern=r"^[0-9]{2}$")
    reason: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class CheckErr(BaseModel):
    """Ввод не разобран: FORMAT_ERROR, NOT_FOUND или BLANK_INPUT."""

    status: Literal["error"] = "error"
    kind: ErrorKind
    reason: str = Field(..., min_length=1)

    model_config = {"frozen": True}


Outcome = Union[CheckOk, CheckMismatch, CheckErr]


# =============================================================================
# CHECK RESULT
# =============================================================================


class CheckResult(BaseModel):
    """
    Результат одной операции проверки.

    Создаётся заново на каждый вызов и не изменяется.
    Плоские свойства (structured, numeric, valid, reason) соответствуют
    внешнему контракту validation_response.
    """

    outcome: Outcome = Field(..., discriminator="status")
    captured_at: datetime = Field(..., description="Время проверки (UTC)")

    model_config = {"frozen": True}

    @property
    def valid(self) -> bool:
        return isinstance(self.outcome, CheckOk)

    @property
    def code(self) -> Optional[Code]:
        if isinstance(self.outcome, CheckErr):
            return None
        return self.outcome.code

    @property
    def structured(self) -> Optional[str]:
        code = self.code
        return code.structured if code is not None else None

    @property
    def numeric(self) -> Optional[str]:
        code = self.code
        return code.digits if code is not None else None

    @property
    def reason(self) -> Optional[str]:
        if isinstance(self.outcome, CheckOk):
            return None
        return self.outcome.reason

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Тип отказа; None для валидного результата."""
        if isinstance(self.outcome, CheckOk):
            return None
        if isinstance(self.outcome, CheckMismatch):
            return ErrorKind.CHECKSUM_MISMATCH
        return self.outcome.kind

    def to_response(self) -> Dict[str, Any]:
        """
        Плоское представление для внешнего слоя.

        Returns:
            dict {structured, numeric, valid, reason, timestamp}, timestamp в ISO-8601
        """
        return {
            "structured": self.structured,
            "numeric": self.numeric,
            "valid": self.valid,
            "reason": self.reason,
            "timestamp": self.captured_at.isoformat(),
        }
