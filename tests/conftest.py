"""Hypothesis profiles and shared fixtures for the margining tests."""

import json
from datetime import datetime

import pytest
from hypothesis import HealthCheck, settings


# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Market data
# ---------------------------------------------------------------------------

ESTR_QUOTES = {"1Y": -0.0050, "2Y": -0.0046, "5Y": -0.0035, "10Y": -0.0012}
EURIBOR6M_QUOTES = {"1Y": -0.0030, "2Y": -0.0026, "5Y": -0.0014, "10Y": 0.0010}


def shifted(quotes, shift):
    return {tenor: rate + shift for tenor, rate in quotes.items()}


@pytest.fixture
def scenario_json_t1():
    """Snapshot with one date before the contract and the opening date."""
    return json.dumps(
        {
            "20200110": {"ESTR": ESTR_QUOTES, "EURIBOR6M": EURIBOR6M_QUOTES},
            "20200115": {"ESTR": ESTR_QUOTES, "EURIBOR6M": EURIBOR6M_QUOTES},
        }
    )


@pytest.fixture
def scenario_json_t2():
    """Snapshot of the following day, rates 5bp higher."""
    return json.dumps(
        {
            "20200116": {
                "ESTR": shifted(ESTR_QUOTES, 0.0005),
                "EURIBOR6M": shifted(EURIBOR6M_QUOTES, 0.0005),
                "USDLIBOR3M": {"1Y": 0.018},
            },
        }
    )


# ---------------------------------------------------------------------------
# Trades
# ---------------------------------------------------------------------------

FPML_SWAP = """<?xml version="1.0" encoding="utf-8"?>
<dataDocument xmlns="http://www.fpml.org/FpML-5/confirmation" fpmlVersion="5-10">
  <trade>
    <tradeHeader>
      <partyTradeIdentifier>
        <partyReference href="party1"/>
        <tradeId tradeIdScheme="http://www.bank-a.com/swaps/trade-id">SDC-0001</tradeId>
      </partyTradeIdentifier>
      <tradeDate>2020-01-13</tradeDate>
    </tradeHeader>
    <swap>
      <swapStream id="fixedLeg">
        <payerPartyReference href="party2"/>
        <receiverPartyReference href="party1"/>
        <calculationPeriodDates id="fixedLegCalcPeriodDates">
          <effectiveDate>
            <unadjustedDate>2020-01-15</unadjustedDate>
          </effectiveDate>
          <terminationDate>
            <unadjustedDate>2025-01-15</unadjustedDate>
          </terminationDate>
          <calculationPeriodDatesAdjustments>
            <businessDayConvention>MODFOLLOWING</businessDayConvention>
            <businessCenters>
              <businessCenter>EUTA</businessCenter>
            </businessCenters>
          </calculationPeriodDatesAdjustments>
          <calculationPeriodFrequency>
            <periodMultiplier>1</periodMultiplier>
            <period>Y</period>
          </calculationPeriodFrequency>
        </calculationPeriodDates>
        <paymentDates>
          <paymentFrequency>
            <periodMultiplier>1</periodMultiplier>
            <period>Y</period>
          </paymentFrequency>
        </paymentDates>
        <calculationPeriodAmount>
          <calculation>
            <notionalSchedule>
              <notionalStepSchedule>
                <initialValue>10000000</initialValue>
                <currency>EUR</currency>
              </notionalStepSchedule>
            </notionalSchedule>
            <fixedRateSchedule>
              <initialValue>0.0005</initialValue>
            </fixedRateSchedule>
            <dayCountFraction>30/360</dayCountFraction>
          </calculation>
        </calculationPeriodAmount>
      </swapStream>
      <swapStream id="floatingLeg">
        <payerPartyReference href="party1"/>
        <receiverPartyReference href="party2"/>
        <calculationPeriodDates id="floatingLegCalcPeriodDates">
          <effectiveDate>
            <unadjustedDate>2020-01-15</unadjustedDate>
          </effectiveDate>
          <terminationDate>
            <unadjustedDate>2025-01-15</unadjustedDate>
          </terminationDate>
          <calculationPeriodDatesAdjustments>
            <businessDayConvention>MODFOLLOWING</businessDayConvention>
            <businessCenters>
              <businessCenter>EUTA</businessCenter>
            </businessCenters>
          </calculationPeriodDatesAdjustments>
          <calculationPeriodFrequency>
            <periodMultiplier>6</periodMultiplier>
            <period>M</period>
          </calculationPeriodFrequency>
        </calculationPeriodDates>
        <paymentDates>
          <paymentFrequency>
            <periodMultiplier>6</periodMultiplier>
            <period>M</period>
          </paymentFrequency>
        </paymentDates>
        <resetDates>
          <fixingDates>
            <periodMultiplier>-2</periodMultiplier>
            <period>D</period>
          </fixingDates>
        </resetDates>
        <calculationPeriodAmount>
          <calculation>
            <notionalSchedule>
              <notionalStepSchedule>
                <initialValue>10000000</initialValue>
                <currency>EUR</currency>
              </notionalStepSchedule>
            </notionalSchedule>
            <floatingRateCalculation>
              <floatingRateIndex>EUR-EURIBOR-Telerate</floatingRateIndex>
              <indexTenor>
                <periodMultiplier>6</periodMultiplier>
                <period>M</period>
              </indexTenor>
            </floatingRateCalculation>
            <dayCountFraction>ACT/360</dayCountFraction>
          </calculation>
        </calculationPeriodAmount>
      </swapStream>
    </swap>
  </trade>
  <party id="party1">
    <partyId>BANKAAAA</partyId>
    <partyName>Bank A</partyName>
  </party>
  <party id="party2">
    <partyId>BANKBBBB</partyId>
    <partyName>Bank B</partyName>
  </party>
</dataDocument>
"""


@pytest.fixture
def fpml_swap():
    return FPML_SWAP


@pytest.fixture
def margin_period():
    return datetime(2020, 1, 15), datetime(2020, 1, 16)
