"""
Insulin dose calculator.

Computes meal, correction and total bolus doses from blood glucose,
carbohydrates and the user's stored ICR/ISF ratios.
"""

__version__ = "0.1.0"
