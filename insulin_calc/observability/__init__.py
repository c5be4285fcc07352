"""
Observability for the insulin dose calculator.

HTTP endpoints, Prometheus metrics and loguru logging setup.
"""
