"""
Calculator orchestrator for the insulin dose calculator.

This module connects the settings store, form validation,
dose calculation and result display into one request flow.
"""

import time
from typing import Dict, List
from pydantic import BaseModel

from insulin_calc.core import display as fmt
from insulin_calc.core.dose import compute_dose
from insulin_calc.core.errors import DoseInputError
from insulin_calc.core.models import DoseForm, DoseResult
from insulin_calc.core.validation import validate_form
from insulin_calc.services.settings_store import SettingsStore
from insulin_calc.observability import metrics
from insulin_calc.observability.logging_setup import get_logger

log = get_logger("insulin_calc.calculator")

class CalculationView(BaseModel):
    """결과 카드에 표시할 내용"""
    result: DoseResult
    display: Dict[str, str]
    ratio_labels: List[str]
    disclaimer: str = fmt.DISCLAIMER

class CalculatorOrchestrator:
    """설정 조회 -> 검증 -> 계산 -> 표시 흐름을 조율"""

    def __init__(self, store: SettingsStore, *, display_decimals: int = 1):
        """
        초기화합니다.

        Args:
            store: ICR/ISF 설정 저장소
            display_decimals: 표시 소수 자릿수
        """
        self.store = store
        self.display_decimals = display_decimals

    async def calculate(self, form: DoseForm) -> CalculationView:
        """
        폼 입력으로 인슐린 용량을 계산합니다.

        검증에 실패하면 계산하지 않고 예외를 그대로 전달합니다.

        Raises:
            DoseInputError: 설정 미비, 필수값 누락, 잘못된 값
        """
        started = time.perf_counter()
        ratios = await self.store.load()

        try:
            inputs = validate_form(form, ratios)
        except DoseInputError as e:
            metrics.dose_rejections.labels(kind=e.kind).inc()
            log.warning(f"계산 거부: {e.kind} fields={list(e.fields)}")
            raise

        result = compute_dose(inputs)
        metrics.dose_calculations.inc()
        metrics.calculation_seconds.observe(time.perf_counter() - started)
        log.info("용량 계산 완료")
        log.debug(f"계산 결과 meal:{result.meal_dose} correction:{result.correction_dose} total:{result.total_dose}")

        return CalculationView(
            result=result,
            display=fmt.format_result(result, self.display_decimals),
            ratio_labels=fmt.ratio_labels(ratios),
        )

