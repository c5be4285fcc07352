"""
HTTP endpoints for the insulin dose calculator.

This module implements the calculator and settings endpoints
together with health, readiness, metrics, and info endpoints
for monitoring and operational visibility.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response, JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from pydantic import BaseModel
import time
from insulin_calc.settings import Settings
from insulin_calc.core import display
from insulin_calc.core.errors import DoseInputError
from insulin_calc.core.models import DoseForm, RawValue
from insulin_calc.ports.kvstore import KVStorePort
from insulin_calc.adapters.storage import build_kv_store
from insulin_calc.services.settings_store import SettingsStore, SAVED_TITLE, SAVED_MESSAGE
from insulin_calc.orchestrators.calculator import CalculatorOrchestrator
from insulin_calc.observability import metrics
from insulin_calc.observability.logging_setup import get_logger

log = get_logger("insulin_calc.http")

class RatioUpdate(BaseModel):
    """설정 저장 요청 본문"""
    icr: RawValue = None
    isf: RawValue = None

def create_app(settings: Settings, kv: Optional[KVStorePort] = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    if kv is None:
        kv = build_kv_store(settings.storage.backend, settings.storage.path)

    store = SettingsStore(kv, icr_key=settings.storage.icr_key, isf_key=settings.storage.isf_key)
    calculator = CalculatorOrchestrator(store, display_decimals=settings.calculator.display_decimals)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await kv.init()
        log.info(f"설정 저장소 준비 완료 backend:{settings.storage.backend}")
        yield

    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Insulin Dose Calculator",
        lifespan=lifespan
    )
    app.state.store = store
    app.state.calculator = calculator

    start_time = time.time()

    @app.exception_handler(DoseInputError)
    async def dose_input_error(request: Request, exc: DoseInputError):
        """입력 검증 오류를 422 로 변환합니다."""
        return JSONResponse(status_code=422, content=exc.to_dict())

    @app.get("/health")
    async def health():
        """헬스 체크 엔드포인트"""
        return JSONResponse({
            "status": "ok",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/ready")
    async def ready():
        """레디니스 체크 엔드포인트 (저장소 접근 가능 여부)"""
        if not await kv.ping():
            return JSONResponse(status_code=503, content={
                "status": "not_ready",
                "service": settings.observability.service_name,
                "timestamp": time.time()
            })
        return JSONResponse({
            "status": "ready",
            "service": settings.observability.service_name,
            "timestamp": time.time()
        })

    @app.get("/metrics")
    async def metrics_endpoint():
        """Prometheus 메트릭 엔드포인트"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")

        metrics.uptime_seconds.set(time.time() - start_time)
        try:
            return Response(
                generate_latest(),
                media_type=CONTENT_TYPE_LATEST
            )
        except Exception as e:
            log.error(f"메트릭 생성 오류: {e}")
            raise HTTPException(status_code=500, detail="Metrics generation failed")

    @app.get("/info")
    async def info():
        """서비스 정보 엔드포인트"""
        uptime = time.time() - start_time
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "build_date": settings.observability.build_date,
            "uptime_seconds": int(uptime),
            "metrics_enabled": settings.observability.metrics_enabled,
            "log_level": settings.observability.log_level,
            "storage_backend": settings.storage.backend
        })

    @app.get("/settings")
    async def get_settings():
        """저장된 ICR/ISF 조회"""
        ratios = await store.load()
        return {
            "icr": ratios.icr,
            "isf": ratios.isf,
            "configured": ratios.configured,
            "labels": display.ratio_labels(ratios)
        }

    @app.put("/settings")
    async def put_settings(payload: RatioUpdate):
        """ICR/ISF 저장 (검증 실패 시 422)"""
        ratios = await store.save(payload.icr, payload.isf)
        return {
            "title": SAVED_TITLE,
            "description": SAVED_MESSAGE,
            "icr": ratios.icr,
            "isf": ratios.isf,
            "labels": display.ratio_labels(ratios)
        }

    @app.delete("/settings")
    async def delete_settings():
        """저장된 ICR/ISF 삭제"""
        await store.clear()
        ratios = await store.load()
        return {
            "icr": ratios.icr,
            "isf": ratios.isf,
            "configured": ratios.configured,
            "labels": display.ratio_labels(ratios)
        }

    @app.post("/calculate")
    async def calculate(form: DoseForm):
        """인슐린 용량 계산 (검증 실패 시 422, 부분 결과 없음)"""
        try:
            view = await calculator.calculate(form)
        except DoseInputError:
            raise
        except Exception as e:
            log.error(f"용량 계산 오류: {e}")
            raise HTTPException(status_code=500, detail="Calculation Error")

        return {
            "meal_dose": view.result.meal_dose,
            "correction_dose": view.result.correction_dose,
            "total_dose": view.result.total_dose,
            "display": view.display,
            "ratio_labels": view.ratio_labels,
            "disclaimer": view.disclaimer
        }

    @app.get("/")
    async def root():
        """루트 엔드포인트"""
        return JSONResponse({
            "service": settings.observability.service_name,
            "version": settings.observability.build_version,
            "endpoints": {
                "health": "/health",
                "ready": "/ready",
                "metrics": "/metrics",
                "info": "/info",
                "settings": "/settings",
                "calculate": "/calculate"
            }
        })

    return app
