"""
Margin of a swap confirmation between two historic market data snapshots.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from smartmargin.config import MarginConfig
from smartmargin.contract.margining import SmartDerivativeContractMargining
from smartmargin.curves.calibration import ScenarioCurveCalibrator
from smartmargin.errors import InsufficientScenarioData
from smartmargin.oracle.historic import PlainSwapHistoricScenarioOracle
from smartmargin.scenarios import DateWindowFilter, JSONScenarioSource, merge_scenarios
from smartmargin.scenarios.types import MarketDataScenario
from smartmargin.trade.fpml import FpmlSwapParser, ParsedTrade
from smartmargin.valuation.factory import AnalyticProductFactory

from .valuation import ContractValuation

logger = logging.getLogger(__name__)


class MarginCalculator:
    """
    Margin of a swap from two scenario snapshots.

    Scenarios dated within the contract's life are merged and sorted; with
    d0 and d1 the first two dates,

    - ``value_t1`` = value at d0 on the curves of d0
    - ``value_t2`` = value at d0 on the curves of d1
    - ``margin`` = value at d1 on the curves of d1 minus value at d1 on the
      curves of d0

    ``margin`` is the result; the two values are kept for diagnostics.
    """

    def __init__(self, config: Optional[MarginConfig] = None):
        self.config = config or MarginConfig()
        self.parser = FpmlSwapParser(
            own_party=self.config.own_party,
            discount_curve_name=self.config.discount_curve_name,
            forward_curve_name=self.config.forward_curve_name,
        )
        self._contract_valuation: Optional[ContractValuation] = None

    @property
    def contract_valuation(self) -> Optional[ContractValuation]:
        """Result of the last calculation, None before the first."""
        return self._contract_valuation

    def contract_valuation_as_json(self) -> str:
        if self._contract_valuation is None:
            raise RuntimeError("No margin has been calculated yet")
        return self._contract_valuation.to_json()

    def get_value(self, json_string_1: str, json_string_2: str, fpml_string: str) -> float:
        """
        Margin between the first two scenario dates of two JSON snapshots.

        Args:
            json_string_1: Scenario snapshot at t1
            json_string_2: Scenario snapshot at t2
            fpml_string: Trade confirmation

        Returns:
            The margin

        Raises:
            ParseFailure: If the trade or a snapshot cannot be read
            CalibrationFailure: If curves cannot be calibrated
            InsufficientScenarioData: If fewer than two dates remain
        """
        parsed = self.parser.parse(fpml_string)
        sources = [
            JSONScenarioSource(text=json_string_1, date_pattern=self.config.date_pattern),
            JSONScenarioSource(text=json_string_2, date_pattern=self.config.date_pattern),
        ]
        return self._calculate_from_sources(parsed, sources).margin

    def get_value_from_files(
        self,
        json_file_1: Union[str, Path],
        json_file_2: Union[str, Path],
        fpml_file: Union[str, Path],
    ) -> float:
        """As :meth:`get_value`, reading the three inputs from files."""
        parsed = self.parser.parse_file(fpml_file)
        sources = [
            JSONScenarioSource(path=json_file_1, date_pattern=self.config.date_pattern),
            JSONScenarioSource(path=json_file_2, date_pattern=self.config.date_pattern),
        ]
        return self._calculate_from_sources(parsed, sources).margin

    def _calculate_from_sources(
        self, parsed: ParsedTrade, sources: List[JSONScenarioSource]
    ) -> ContractValuation:
        window = DateWindowFilter.for_contract(
            parsed.trade.start_date, parsed.trade.maturity_date
        )
        for source in sources:
            source.add_filter(window)
        scenarios = merge_scenarios(*(source.load() for source in sources))
        return self.calculate(parsed, scenarios)

    def calculate(
        self, parsed: ParsedTrade, scenarios: List[MarketDataScenario]
    ) -> ContractValuation:
        """Margin for already filtered scenarios (sorted here, one per date)."""
        scenarios = merge_scenarios(scenarios)
        if len(scenarios) < 2:
            raise InsufficientScenarioData(
                f"Need scenarios on at least two dates, got {len(scenarios)}"
            )

        trade = parsed.trade
        factory = AnalyticProductFactory(trade.trade_date)
        swap = factory.get_product_from_descriptor(parsed.product)

        oracle = PlainSwapHistoricScenarioOracle(
            swap, trade.notional, scenarios, ScenarioCurveCalibrator(self.config)
        )
        d0, d1 = oracle.scenario_dates[:2]
        oracle.calibrate_all(self.config.calibration_workers, dates=[d0, d1])

        value_t1 = oracle.value(d0, d0)
        value_t2 = oracle.value(d0, d1)
        margin = SmartDerivativeContractMargining(oracle).get_margin(d0, d1)

        self._contract_valuation = ContractValuation(
            market_data_time=d1,
            external_references=dict(trade.legal_entities_external_references),
            counterparty_names={
                party: dict(attributes)
                for party, attributes in trade.legal_entities_names.items()
            },
            value_t1=value_t1,
            value_t2=value_t2,
            margin=margin,
        )
        logger.info("Margin %s -> %s: %.6f", d0.date(), d1.date(), margin)
        return self._contract_valuation
