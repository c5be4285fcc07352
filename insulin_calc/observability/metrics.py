"""
Metrics definitions for the insulin dose calculator.

This module defines Prometheus metrics for monitoring
calculation requests and settings changes.
"""

from prometheus_client import Counter, Histogram, Gauge

# 카운터 메트릭
dose_calculations = Counter(
    "dose_calculations_total",
    "Number of dose calculations that produced a result"
)

dose_rejections = Counter(
    "dose_rejections_total",
    "Number of calculation requests rejected by validation",
    ["kind"]
)

settings_saves = Counter(
    "settings_saves_total",
    "Number of ratio settings save attempts",
    ["outcome"]
)

# 히스토그램 메트릭
calculation_seconds = Histogram(
    "calculation_duration_seconds",
    "Time spent validating and computing a dose",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
)

# 게이지 메트릭
ratios_configured = Gauge(
    "ratios_configured",
    "1 when both ICR and ISF are stored, 0 otherwise"
)

uptime_seconds = Gauge(
    "uptime_seconds",
    "Service uptime in seconds"
)
