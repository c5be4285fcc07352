"""
Input validation for the insulin dose calculator.

This module turns raw form text and stored ratio strings into
DoseInputs, and enforces the preconditions of compute_dose.
Checks run in a fixed order: ratios configured, required fields
present, values parse as decimals, magnitudes in range.
"""

import math
import re
from typing import Dict, List, Optional, Tuple

from .errors import InvalidMagnitudeError, MissingFieldError, UnconfiguredRatiosError
from .models import DoseForm, DoseInputs, RatioSettings, RawValue

# 부호 허용 십진수 (입력 단계 정규식보다 넓게 받고 크기 검사에서 거른다)
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")

# 0보다 커야 하는 필드 (carbs 는 0 이상)
POSITIVE_FIELDS = ("current_bg", "target_bg", "icr", "isf")

UNCONFIGURED_MESSAGE = "Please configure your ICR and ISF values in settings first."
MISSING_MESSAGE = "Please fill in Current BG and Target BG fields to calculate insulin dose."
INVALID_MESSAGE = (
    "Current BG, Target BG, ICR, and ISF must be greater than 0, "
    "and Carbs cannot be negative."
)
RATIOS_MISSING_MESSAGE = "Please provide both ICR and ISF values."
RATIOS_INVALID_MESSAGE = "Values must be greater than 0."


def is_blank(value: RawValue) -> bool:
    """값이 비어 있는지 확인합니다."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def parse_decimal(value: RawValue) -> Optional[float]:
    """
    원시값을 유한한 실수로 변환합니다.

    Args:
        value: 문자열 또는 숫자

    Returns:
        변환된 값, 십진수가 아니면 None
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = value.strip()
        if not DECIMAL_PATTERN.match(text):
            return None
        number = float(text)
    return number if math.isfinite(number) else None


def _magnitude_violations(values: Dict[str, float]) -> List[str]:
    bad = [name for name in POSITIVE_FIELDS if not values[name] > 0]
    if not values["carbs"] >= 0:
        bad.append("carbs")
    return bad


def check_preconditions(inputs: DoseInputs) -> None:
    """
    compute_dose 호출 전 전제 조건을 재확인합니다.

    Raises:
        InvalidMagnitudeError: 범위를 벗어난 값이 있을 때
    """
    bad = _magnitude_violations(inputs.model_dump())
    if bad:
        raise InvalidMagnitudeError(INVALID_MESSAGE, fields=bad)


def validate_form(form: DoseForm, ratios: RatioSettings) -> DoseInputs:
    """
    폼 입력과 저장된 비율을 검증하여 DoseInputs 를 만듭니다.

    Args:
        form: 사용자 입력
        ratios: 설정 저장소에서 읽은 ICR/ISF

    Returns:
        검증된 계산 입력

    Raises:
        UnconfiguredRatiosError: ICR 또는 ISF 미설정
        MissingFieldError: 현재/목표 혈당 미입력
        InvalidMagnitudeError: 숫자가 아니거나 범위를 벗어남
    """
    unset = [name for name in ("icr", "isf") if is_blank(getattr(ratios, name))]
    if unset:
        raise UnconfiguredRatiosError(UNCONFIGURED_MESSAGE, fields=unset)

    missing = [name for name in ("current_bg", "target_bg") if is_blank(getattr(form, name))]
    if missing:
        raise MissingFieldError(MISSING_MESSAGE, fields=missing)

    raw = {
        "current_bg": form.current_bg,
        "target_bg": form.target_bg,
        # 탄수화물 미입력은 0g
        "carbs": 0 if is_blank(form.carbs) else form.carbs,
        "icr": ratios.icr,
        "isf": ratios.isf,
    }

    values: Dict[str, float] = {}
    unparsable: List[str] = []
    for name, value in raw.items():
        number = parse_decimal(value)
        if number is None:
            unparsable.append(name)
        else:
            values[name] = number
    if unparsable:
        raise InvalidMagnitudeError(INVALID_MESSAGE, fields=unparsable)

    inputs = DoseInputs(**values)
    check_preconditions(inputs)
    return inputs


def validate_ratios(icr: RawValue, isf: RawValue) -> Tuple[str, str]:
    """
    설정 화면에서 저장할 ICR/ISF 를 검증합니다.

    Returns:
        저장할 (icr, isf) 문자열

    Raises:
        MissingFieldError: 둘 중 하나라도 비어 있을 때
        InvalidMagnitudeError: 숫자가 아니거나 0 이하일 때
    """
    blank = [name for name, value in (("icr", icr), ("isf", isf)) if is_blank(value)]
    if blank:
        raise MissingFieldError(RATIOS_MISSING_MESSAGE, fields=blank, title="Invalid Values")

    bad = []
    for name, value in (("icr", icr), ("isf", isf)):
        number = parse_decimal(value)
        if number is None or number <= 0:
            bad.append(name)
    if bad:
        raise InvalidMagnitudeError(RATIOS_INVALID_MESSAGE, fields=bad)

    return _as_text(icr), _as_text(isf)


def _as_text(value: RawValue) -> str:
    if isinstance(value, str):
        return value.strip()
    # 숫자는 repr 로 저장하여 정밀도 유지
    return repr(value) if isinstance(value, float) else str(value)
