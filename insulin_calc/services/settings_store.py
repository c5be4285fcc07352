"""
Ratio settings store for the insulin dose calculator.

This module keeps the insulin-to-carb ratio and insulin sensitivity
factor in a key-value store, exactly as the user entered them.
"""

from insulin_calc.core.models import RatioSettings, RawValue
from insulin_calc.core.validation import validate_ratios
from insulin_calc.core.errors import DoseInputError
from insulin_calc.ports.kvstore import KVStorePort
from insulin_calc.observability import metrics
from insulin_calc.observability.logging_setup import get_logger

log = get_logger("insulin_calc.settings_store")

SAVED_TITLE = "Settings Saved"
SAVED_MESSAGE = "Your ICR and ISF values have been updated."

class SettingsStore:
    """ICR/ISF 설정 저장소"""

    def __init__(self, kv: KVStorePort, *, icr_key: str = "icr", isf_key: str = "isf"):
        """
        초기화합니다.

        Args:
            kv: 키-값 저장소 포트
            icr_key: ICR 저장 키
            isf_key: ISF 저장 키
        """
        self.kv = kv
        self.icr_key = icr_key
        self.isf_key = isf_key

    async def load(self) -> RatioSettings:
        """저장된 ICR/ISF 를 읽습니다. 빈 문자열은 미설정으로 취급합니다."""
        icr = await self.kv.get(self.icr_key)
        isf = await self.kv.get(self.isf_key)
        ratios = RatioSettings(icr=icr or None, isf=isf or None)
        metrics.ratios_configured.set(1 if ratios.configured else 0)
        return ratios

    async def save(self, icr: RawValue, isf: RawValue) -> RatioSettings:
        """
        ICR/ISF 를 검증한 뒤 저장합니다.

        Args:
            icr: 탄수화물 g / 인슐린 1U
            isf: 인슐린 1U 당 혈당 하강 mg/dL

        Returns:
            저장된 설정

        Raises:
            MissingFieldError: 값이 비어 있을 때
            InvalidMagnitudeError: 숫자가 아니거나 0 이하일 때
        """
        try:
            icr_text, isf_text = validate_ratios(icr, isf)
        except DoseInputError as e:
            metrics.settings_saves.labels(outcome=e.kind).inc()
            log.warning(f"설정 저장 거부: {e.kind} fields={list(e.fields)}")
            raise

        await self.kv.set(self.icr_key, icr_text)
        await self.kv.set(self.isf_key, isf_text)
        metrics.settings_saves.labels(outcome="saved").inc()
        metrics.ratios_configured.set(1)
        log.info(f"설정 저장 완료 ICR:1:{icr_text} ISF:1:{isf_text}")
        return RatioSettings(icr=icr_text, isf=isf_text)

    async def clear(self) -> None:
        """저장된 설정을 모두 삭제합니다."""
        await self.kv.delete(self.icr_key)
        await self.kv.delete(self.isf_key)
        metrics.ratios_configured.set(0)
        log.info("설정 삭제 완료")
