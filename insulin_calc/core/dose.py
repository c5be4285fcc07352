"""
Dose calculation for the insulin dose calculator.

This module contains the pure function that maps a validated
parameter set to a meal/correction/total dose breakdown.
"""

from .models import DoseInputs, DoseResult

def compute_dose(inputs: DoseInputs) -> DoseResult:
    """
    입력값으로 인슐린 용량을 계산합니다.

    호출 전에 current_bg, target_bg, icr, isf > 0 이고 carbs >= 0 임이
    보장되어야 합니다. icr 또는 isf 가 0이면 ZeroDivisionError 가 발생합니다.

    Args:
        inputs: 검증된 계산 입력

    Returns:
        식사/교정/총 용량
    """
    # 식사 용량: 탄수화물(g) / ICR
    meal_dose = inputs.carbs / inputs.icr

    # 교정 용량: (현재 - 목표) / ISF, 목표 미만이면 음수
    bg_difference = inputs.current_bg - inputs.target_bg
    correction_dose = bg_difference / inputs.isf

    total_dose = meal_dose + correction_dose

    return DoseResult(
        meal_dose=max(0.0, meal_dose),
        correction_dose=correction_dose,
        total_dose=max(0.0, total_dose),
    )
