"""FpML swap confirmation parser.

Reads the interest rate swap subset of an FpML 5.x document (namespaced or
not) into a :class:`TradeDescriptor` and an
:class:`InterestRateSwapProductDescriptor` seen from the owning party.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List, Optional, Union
from xml.etree import ElementTree as ET

from smartmargin.config import DEFAULT_DISCOUNT_CURVE, DEFAULT_FORWARD_CURVE
from smartmargin.conventions.calendars import get_calendar
from smartmargin.conventions.daycount import get_day_count_convention
from smartmargin.conventions.types import BusinessDayAdjustment, Frequency
from smartmargin.errors import ParseFailure
from smartmargin.valuation.descriptors import (
    InterestRateSwapLegProductDescriptor,
    InterestRateSwapProductDescriptor,
    ScheduleDescriptor,
    TradeDescriptor,
)

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    """Tag name without its ``{namespace}`` prefix."""
    return tag.rsplit("}", 1)[-1]


def _find(element: ET.Element, path: str) -> Optional[ET.Element]:
    """Follow a slash separated path of local names."""
    current = element
    for name in path.split("/"):
        current = next((c for c in current if _local(c.tag) == name), None)
        if current is None:
            return None
    return current


def _iter_local(element: ET.Element, name: str) -> List[ET.Element]:
    return [e for e in element.iter() if _local(e.tag) == name]


def _get_text(element: ET.Element, path: str, required: bool = True) -> Optional[str]:
    found = _find(element, path)
    if found is None or found.text is None or not found.text.strip():
        if required:
            raise ParseFailure(f"Required element not found: {path}")
        return None
    return found.text.strip()


def _parse_date(text: str) -> date:
    try:
        return datetime.strptime(text[:10], "%Y-%m-%d").date()
    except ValueError:
        raise ParseFailure(f"Invalid date format: {text}") from None


def _parse_float(text: str, what: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ParseFailure(f"Invalid {what}: {text}") from None


@dataclass(frozen=True)
class ParsedTrade:
    trade: TradeDescriptor
    product: InterestRateSwapProductDescriptor


class FpmlSwapParser:
    """Parser for plain vanilla interest rate swaps in FpML.

    The leg whose ``receiverPartyReference`` is ``own_party`` becomes the
    receiver leg. Floating legs project on ``forward_curve_name``, both legs
    discount on ``discount_curve_name``.
    """

    def __init__(
        self,
        own_party: str = "party1",
        discount_curve_name: str = DEFAULT_DISCOUNT_CURVE,
        forward_curve_name: str = DEFAULT_FORWARD_CURVE,
    ):
        self.own_party = own_party
        self.discount_curve_name = discount_curve_name
        self.forward_curve_name = forward_curve_name

    def parse_file(self, path: Union[str, Path]) -> ParsedTrade:
        return self.parse(Path(path).read_text(encoding="utf-8"))

    def parse(self, xml_content: str) -> ParsedTrade:
        """Parse an FpML document holding one swap trade.

        Raises:
            ParseFailure: If the XML is malformed or the swap is incomplete
        """
        try:
            root = ET.fromstring(xml_content)
        except ET.ParseError as e:
            raise ParseFailure(f"Invalid XML: {e}") from e

        trades = _iter_local(root, "trade")
        if not trades:
            raise ParseFailure("No trade element found in document")
        trade = trades[0]

        swap = _find(trade, "swap")
        if swap is None:
            raise ParseFailure("Trade does not contain a swap")

        streams = [c for c in swap if _local(c.tag) == "swapStream"]
        if len(streams) != 2:
            raise ParseFailure(f"Expected two swap streams, found {len(streams)}")

        receiver_stream = None
        payer_stream = None
        for stream in streams:
            receiver = _find(stream, "receiverPartyReference")
            if receiver is not None and receiver.get("href") == self.own_party:
                receiver_stream = stream
            else:
                payer_stream = stream
        if receiver_stream is None or payer_stream is None:
            raise ParseFailure(
                f"Party {self.own_party!r} does not receive exactly one swap stream"
            )

        leg_receiver = self._parse_leg(receiver_stream)
        leg_payer = self._parse_leg(payer_stream)
        references, names = self._parse_parties(root)

        trade_descriptor = TradeDescriptor(
            trade_date=_parse_date(_get_text(trade, "tradeHeader/tradeDate")),
            start_date=min(leg_receiver.schedule.start_date, leg_payer.schedule.start_date),
            maturity_date=max(
                leg_receiver.schedule.maturity_date, leg_payer.schedule.maturity_date
            ),
            notional=leg_receiver.notional,
            currency=self._currency(receiver_stream),
            legal_entities_external_references=references,
            legal_entities_names=names,
        )
        logger.info(
            "Parsed swap traded %s: %s to %s, notional %s %s",
            trade_descriptor.trade_date,
            trade_descriptor.start_date,
            trade_descriptor.maturity_date,
            trade_descriptor.notional,
            trade_descriptor.currency,
        )
        return ParsedTrade(
            trade=trade_descriptor,
            product=InterestRateSwapProductDescriptor(leg_receiver, leg_payer),
        )

    def _parse_leg(self, stream: ET.Element) -> InterestRateSwapLegProductDescriptor:
        calc_dates = _find(stream, "calculationPeriodDates")
        calculation = _find(stream, "calculationPeriodAmount/calculation")
        if calc_dates is None or calculation is None:
            raise ParseFailure(f"Swap stream {stream.get('id')!r} lacks dates or calculation")

        frequency_elem = _find(stream, "paymentDates/paymentFrequency")
        if frequency_elem is None:
            frequency_elem = _find(calc_dates, "calculationPeriodFrequency")
        if frequency_elem is None:
            raise ParseFailure("Required element not found: paymentFrequency")
        frequency = _get_text(frequency_elem, "periodMultiplier") + _get_text(
            frequency_elem, "period"
        )

        convention = (
            _get_text(
                calc_dates,
                "calculationPeriodDatesAdjustments/businessDayConvention",
                required=False,
            )
            or "MODFOLLOWING"
        )
        calendar = (
            _get_text(
                calc_dates,
                "calculationPeriodDatesAdjustments/businessCenters/businessCenter",
                required=False,
            )
            or "TARGET"
        )

        try:
            schedule = ScheduleDescriptor(
                start_date=_parse_date(
                    _get_text(calc_dates, "effectiveDate/unadjustedDate")
                ),
                maturity_date=_parse_date(
                    _get_text(calc_dates, "terminationDate/unadjustedDate")
                ),
                frequency=frequency,
                day_count=_get_text(calculation, "dayCountFraction"),
                business_day_adjustment=BusinessDayAdjustment.from_label(convention),
                calendar=calendar,
                fixing_offset_days=abs(
                    int(
                        _get_text(
                            stream, "resetDates/fixingDates/periodMultiplier", required=False
                        )
                        or 0
                    )
                ),
                payment_offset_days=int(
                    _get_text(
                        stream, "paymentDates/paymentDaysOffset/periodMultiplier", required=False
                    )
                    or 0
                ),
            )
            get_day_count_convention(schedule.day_count)
            get_calendar(schedule.calendar)
            Frequency.from_label(schedule.frequency)
        except ValueError as e:
            if isinstance(e, ParseFailure):
                raise
            raise ParseFailure(f"Swap stream {stream.get('id')!r}: {e}") from e

        notional = _parse_float(
            _get_text(calculation, "notionalSchedule/notionalStepSchedule/initialValue"),
            "notional",
        )

        fixed_rate = _get_text(calculation, "fixedRateSchedule/initialValue", required=False)
        floating = _find(calculation, "floatingRateCalculation")
        if fixed_rate is not None:
            forward_curve = None
            spread = _parse_float(fixed_rate, "fixed rate")
        elif floating is not None:
            forward_curve = self.forward_curve_name
            spread = _parse_float(
                _get_text(floating, "spreadSchedule/initialValue", required=False) or "0",
                "spread",
            )
        else:
            raise ParseFailure(
                f"Swap stream {stream.get('id')!r} is neither fixed nor floating"
            )

        return InterestRateSwapLegProductDescriptor(
            schedule=schedule,
            forward_curve_name=forward_curve,
            discount_curve_name=self.discount_curve_name,
            spread=spread,
            notional=notional,
        )

    def _currency(self, stream: ET.Element) -> str:
        return (
            _get_text(
                stream,
                "calculationPeriodAmount/calculation/notionalSchedule/notionalStepSchedule/currency",
                required=False,
            )
            or "EUR"
        )

    def _parse_parties(self, root: ET.Element):
        references: Dict[str, str] = {}
        names: Dict[str, Dict[str, str]] = {}
        for party in _iter_local(root, "party"):
            party_ref = party.get("id")
            if not party_ref:
                continue
            party_id = _get_text(party, "partyId", required=False) or party_ref
            references[party_ref] = party_id
            names[party_ref] = {
                "name": _get_text(party, "partyName", required=False) or party_ref,
                "id": party_id,
                "role": "own" if party_ref == self.own_party else "counterparty",
            }
        return references, names
