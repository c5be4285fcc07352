"""
Core domain models for the insulin dose calculator.

This module defines the core domain models using Pydantic v2.
Range checks live in the validation module so the dose function
stays a plain transform.
"""

from typing import Optional, Union
from pydantic import BaseModel, StrictBool

# 폼 입력 원시값 (텍스트 또는 JSON 숫자)
# JSON true/false 는 숫자로 바뀌지 않고 bool 로 남아 검증에서 거부된다
RawValue = Optional[Union[StrictBool, str, int, float]]

class DoseInputs(BaseModel):
    """용량 계산 입력 모델 (mg/dL, g)"""
    current_bg: float
    target_bg: float
    carbs: float
    icr: float
    isf: float

class DoseResult(BaseModel):
    """용량 계산 결과 모델 (단위: U)"""
    meal_dose: float
    correction_dose: float
    total_dose: float

class DoseForm(BaseModel):
    """사용자가 입력한 폼 원시값"""
    current_bg: RawValue = None
    target_bg: RawValue = None
    carbs: RawValue = None

class RatioSettings(BaseModel):
    """저장된 ICR/ISF 값 (입력한 문자열 그대로)"""
    icr: Optional[str] = None
    isf: Optional[str] = None

    @property
    def configured(self) -> bool:
        return bool(self.icr) and bool(self.isf)
