"""Tests for the FpML swap parser."""

from datetime import date

import pytest

from smartmargin.conventions.types import BusinessDayAdjustment, LegType
from smartmargin.errors import ParseFailure
from smartmargin.trade import FpmlSwapParser


class TestFpmlSwapParser:
    def test_trade_descriptor(self, fpml_swap):
        trade = FpmlSwapParser().parse(fpml_swap).trade

        assert trade.trade_date == date(2020, 1, 13)
        assert trade.start_date == date(2020, 1, 15)
        assert trade.maturity_date == date(2025, 1, 15)
        assert trade.notional == 10_000_000
        assert trade.currency == "EUR"

    def test_own_party_receives_fixed(self, fpml_swap):
        product = FpmlSwapParser(own_party="party1").parse(fpml_swap).product

        receiver = product.leg_receiver
        assert receiver.leg_type == LegType.FIXED
        assert receiver.forward_curve_name is None
        assert receiver.spread == pytest.approx(0.0005)
        assert receiver.discount_curve_name == "discount-EUR-OIS"
        assert receiver.schedule.frequency == "1Y"
        assert receiver.schedule.day_count == "30/360"
        assert receiver.schedule.calendar == "EUTA"
        assert receiver.schedule.business_day_adjustment == BusinessDayAdjustment.MODIFIED_FOLLOWING

        payer = product.leg_payer
        assert payer.leg_type == LegType.FLOATING
        assert payer.forward_curve_name == "forward-EUR-6M"
        assert payer.spread == 0.0
        assert payer.schedule.frequency == "6M"
        assert payer.schedule.fixing_offset_days == 2

    def test_counterparty_view_swaps_legs(self, fpml_swap):
        product = FpmlSwapParser(own_party="party2").parse(fpml_swap).product

        assert product.leg_receiver.leg_type == LegType.FLOATING
        assert product.leg_payer.leg_type == LegType.FIXED

    def test_configured_curve_names(self, fpml_swap):
        parser = FpmlSwapParser(
            discount_curve_name="discount-EUR-ESTR", forward_curve_name="forward-EUR-3M"
        )

        product = parser.parse(fpml_swap).product

        assert product.leg_payer.forward_curve_name == "forward-EUR-3M"
        assert product.leg_payer.discount_curve_name == "discount-EUR-ESTR"
        assert product.leg_receiver.discount_curve_name == "discount-EUR-ESTR"

    def test_parties(self, fpml_swap):
        trade = FpmlSwapParser().parse(fpml_swap).trade

        assert trade.legal_entities_external_references == {
            "party1": "BANKAAAA",
            "party2": "BANKBBBB",
        }
        assert trade.legal_entities_names["party1"] == {
            "name": "Bank A",
            "id": "BANKAAAA",
            "role": "own",
        }
        assert trade.legal_entities_names["party2"]["role"] == "counterparty"

    def test_schedules_can_be_generated(self, fpml_swap):
        product = FpmlSwapParser().parse(fpml_swap).product

        fixed = product.leg_receiver.schedule.get_schedule(date(2020, 1, 13))
        floating = product.leg_payer.schedule.get_schedule(date(2020, 1, 13))

        assert len(fixed) == 5
        assert len(floating) == 10
        # 15 January 2022 is a Saturday
        assert fixed[1].end_date == date(2022, 1, 17)

    def test_parse_file(self, tmp_path, fpml_swap):
        path = tmp_path / "swap.xml"
        path.write_text(fpml_swap, encoding="utf-8")

        assert FpmlSwapParser().parse_file(path).trade.notional == 10_000_000

    def test_document_without_namespace(self, fpml_swap):
        plain = fpml_swap.replace(' xmlns="http://www.fpml.org/FpML-5/confirmation"', "")

        assert FpmlSwapParser().parse(plain).trade.trade_date == date(2020, 1, 13)


class TestFpmlParseFailures:
    def test_malformed_xml(self):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse("<dataDocument><trade>")

    def test_no_trade(self):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse("<dataDocument/>")

    def test_not_a_swap(self):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(
                "<dataDocument><trade><tradeHeader><tradeDate>2020-01-13</tradeDate>"
                "</tradeHeader><fra/></trade></dataDocument>"
            )

    def test_unknown_own_party(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser(own_party="party3").parse(fpml_swap)

    def test_unknown_day_count(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(fpml_swap.replace("30/360", "BUS/252"))

    def test_unknown_business_center(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(fpml_swap.replace("EUTA", "USNY", 1))

    def test_missing_termination_date(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(
                fpml_swap.replace("<unadjustedDate>2025-01-15</unadjustedDate>", "", 1)
            )

    def test_invalid_date(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(fpml_swap.replace("2020-01-13", "13/01/2020"))

    def test_invalid_notional(self, fpml_swap):
        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(fpml_swap.replace("10000000", "ten million", 1))

    def test_single_stream(self, fpml_swap):
        start = fpml_swap.index('<swapStream id="floatingLeg">')
        end = fpml_swap.index("</swapStream>", start) + len("</swapStream>")

        with pytest.raises(ParseFailure):
            FpmlSwapParser().parse(fpml_swap[:start] + fpml_swap[end:])
