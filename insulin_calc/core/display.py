"""
Display formatting for dose results.

This module renders DoseResult and ratio settings into the
strings shown next to the calculator form.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List

from .models import DoseResult, RatioSettings

DISCLAIMER = "Please verify these calculations with your healthcare provider."

def format_units(value: float, decimals: int = 1) -> str:
    """
    용량을 "6.0 units" 형식으로 변환합니다.

    부동소수점 값을 정확한 십진수로 보고 0에서 멀어지는 방향으로 반올림
    (1.25 -> 1.3, -0.75 -> -0.8, 1.005 -> 1.00).
    """
    if math.isnan(value):
        return "NaN units"
    if math.isinf(value):
        return f"{'-' if value < 0 else ''}Infinity units"
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # 큰 값도 quantize 가능하도록 정밀도 확보
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    if rounded == 0:
        # "-0.0" 표시 방지
        rounded = abs(rounded)
    return f"{rounded} units"

def format_result(result: DoseResult, decimals: int = 1) -> Dict[str, str]:
    """결과 카드에 표시할 문자열을 만듭니다."""
    return {
        "meal_dose": format_units(result.meal_dose, decimals),
        "correction_dose": format_units(result.correction_dose, decimals),
        "total_dose": format_units(result.total_dose, decimals),
    }

def ratio_labels(ratios: RatioSettings) -> List[str]:
    """설정된 비율만 "ICR: 1:10" 형식으로 반환합니다."""
    labels = []
    if ratios.icr:
        labels.append(f"ICR: 1:{ratios.icr}")
    if ratios.isf:
        labels.append(f"ISF: 1:{ratios.isf}")
    return labels
