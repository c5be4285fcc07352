"""
Orchestrators for the insulin dose calculator.

This module contains the orchestrators that coordinate
the flow between ports and adapters.
"""
from .calculator import CalculatorOrchestrator, CalculationView

__all__ = ["CalculatorOrchestrator", "CalculationView"]
