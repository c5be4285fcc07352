"""
Input error taxonomy for the insulin dose calculator.

All of these are detected by the calling layer before the dose
function is invoked; the dose function itself never raises them.
"""

from typing import Optional, Sequence


class DoseInputError(Exception):
    """입력 검증 오류의 기본 클래스"""

    kind = "invalid_input"
    default_title = "Invalid Input"

    def __init__(self, description: str, *, fields: Sequence[str] = (), title: Optional[str] = None):
        super().__init__(description)
        self.description = description
        self.fields = tuple(fields)
        self.title = title or self.default_title

    def to_dict(self) -> dict:
        """HTTP 응답용 딕셔너리로 변환합니다."""
        return {
            "error": self.kind,
            "title": self.title,
            "description": self.description,
            "fields": list(self.fields),
        }


class MissingFieldError(DoseInputError):
    """필수 입력이 비어 있음"""

    kind = "missing_field"
    default_title = "Missing Information"


class InvalidMagnitudeError(DoseInputError):
    """양수여야 하는 값이 0 이하이거나 탄수화물이 음수임"""

    kind = "invalid_magnitude"
    default_title = "Invalid Values"


class UnconfiguredRatiosError(DoseInputError):
    """ICR/ISF 설정이 저장되어 있지 않음"""

    kind = "unconfigured_ratios"
    default_title = "Settings Required"
