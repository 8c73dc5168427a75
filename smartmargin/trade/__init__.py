"""Trade document parsing."""

from .fpml import FpmlSwapParser, ParsedTrade

__all__ = ["FpmlSwapParser", "ParsedTrade"]
