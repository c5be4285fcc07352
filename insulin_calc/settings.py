# insulin_calc/settings.py
from __future__ import annotations
from pydantic import BaseModel, Field

class Storage(BaseModel):
    backend: str = "sqlite"                   # sqlite | memory
    path: str = "/data/insulin_calc.db"
    icr_key: str = "icr"
    isf_key: str = "isf"

class Observability(BaseModel):
    http_host: str = "0.0.0.0"
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "insulin-calc"
    build_version: str = "0.1.0"
    build_date: str = "2026-10-18"
    log_level: str = "INFO"
    log_json: bool = False

class Calculator(BaseModel):
    display_decimals: int = 1

class Settings(BaseModel):
    # 하위 섹션 (기본값/팩토리로 누락 방지)
    storage: Storage = Field(default_factory=Storage)
    observability: Observability = Field(default_factory=Observability)
    calculator: Calculator = Field(default_factory=Calculator)
