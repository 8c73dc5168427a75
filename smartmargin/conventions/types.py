"""
Basic types and enums used across the scheduling and pricing code.
"""

from __future__ import annotations

from enum import Enum


class Frequency(Enum):
    """Payment frequencies, valued in months. TERM pays once at maturity."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1
    TERM = 0

    def months(self) -> int:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "Frequency":
        """Parse "1Y", "6M", "annual", "semiannual", "quarterly", "tenor"..."""
        text = label.strip().upper()
        named = {
            "ANNUAL": cls.ANNUAL,
            "SEMIANNUAL": cls.SEMIANNUAL,
            "QUARTERLY": cls.QUARTERLY,
            "MONTHLY": cls.MONTHLY,
            "TENOR": cls.TERM,
            "TERM": cls.TERM,
            "1T": cls.TERM,
        }
        if text in named:
            return named[text]
        if text[:-1].isdigit() and text[-1] in ("M", "Y"):
            months = int(text[:-1]) * (12 if text[-1] == "Y" else 1)
            for member in cls:
                if member.value == months:
                    return member
        raise ValueError(f"Unsupported frequency: {label}")


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    @classmethod
    def from_label(cls, label: str) -> "BusinessDayAdjustment":
        """Parse labels such as "modified_following" or FpML "MODFOLLOWING"."""
        text = label.strip().upper().replace(" ", "_")
        aliases = {
            "NONE": cls.NO_ADJUSTMENT,
            "UNADJUSTED": cls.NO_ADJUSTMENT,
            "MODFOLLOWING": cls.MODIFIED_FOLLOWING,
            "MODPRECEDING": cls.MODIFIED_PRECEDING,
        }
        if text in aliases:
            return aliases[text]
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown business day adjustment: {label}") from None


class StubType(Enum):
    """Where the short period of a schedule sits."""

    SHORT_INITIAL = "SHORT_INITIAL"
    SHORT_FINAL = "SHORT_FINAL"

    @classmethod
    def from_label(cls, label: str) -> "StubType":
        """"first" puts the short period at the start, "last" at the end."""
        text = label.strip().upper()
        if text in ("FIRST", "SHORT_INITIAL"):
            return cls.SHORT_INITIAL
        if text in ("LAST", "SHORT_FINAL"):
            return cls.SHORT_FINAL
        raise ValueError(f"Unsupported stub type: {label}")


class LegType(Enum):
    FLOATING = "FLOATING"
    FIXED = "FIXED"
