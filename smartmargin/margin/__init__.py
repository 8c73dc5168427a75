"""Margin calculation on historic scenarios."""

from .calculator import MarginCalculator
from .valuation import ContractValuation

__all__ = ["MarginCalculator", "ContractValuation"]
