"""
Scenario loaders.

Snapshots are JSON objects keyed by date string::

    {"20200115": {"ESTR": {"1W": -0.0047, "1Y": -0.0049, "10Y": -0.0021}}}
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from smartmargin.conventions.tenor import parse_tenor
from smartmargin.errors import ParseFailure

from .filters import ScenarioFilter
from .types import MarketDataScenario

logger = logging.getLogger(__name__)

DEFAULT_DATE_PATTERN = "%Y%m%d"


def _parse_rate(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseFailure(f"{where}: rate must be a number, got {value!r}")
    return float(value)


def parse_scenarios(
    data: Mapping[str, Any], date_pattern: str = DEFAULT_DATE_PATTERN
) -> List[MarketDataScenario]:
    """
    Build scenarios from decoded snapshot JSON.

    Args:
        data: Date string to {curve label: {tenor: rate}}
        date_pattern: ``strptime`` pattern of the date keys

    Returns:
        Scenarios sorted by date

    Raises:
        ParseFailure: If dates, tenors or rates are malformed
    """
    if not isinstance(data, Mapping):
        raise ParseFailure("Scenario snapshot must be a JSON object keyed by date")

    scenarios = []
    for date_key, curves in data.items():
        try:
            scenario_date = datetime.strptime(date_key, date_pattern)
        except ValueError as e:
            raise ParseFailure(
                f"Scenario date {date_key!r} does not match {date_pattern!r}"
            ) from e

        if not isinstance(curves, Mapping):
            raise ParseFailure(f"{date_key}: curves must be a JSON object")

        parsed_curves = {}
        for label, points in curves.items():
            if not isinstance(points, Mapping):
                raise ParseFailure(f"{date_key}/{label}: quotes must be a JSON object")
            parsed_points = {}
            for tenor, rate in points.items():
                try:
                    parse_tenor(tenor)
                except ValueError as e:
                    raise ParseFailure(f"{date_key}/{label}: {e}") from e
                parsed_points[tenor] = _parse_rate(rate, f"{date_key}/{label}/{tenor}")
            parsed_curves[label] = parsed_points

        scenarios.append(MarketDataScenario(date=scenario_date, curves=parsed_curves))

    scenarios.sort(key=lambda s: s.date)
    return scenarios


def scenarios_from_json_string(
    text: str, date_pattern: str = DEFAULT_DATE_PATTERN
) -> List[MarketDataScenario]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Invalid scenario JSON: {e}") from e
    return parse_scenarios(data, date_pattern)


def scenarios_from_json_file(
    path: Union[str, Path], date_pattern: str = DEFAULT_DATE_PATTERN
) -> List[MarketDataScenario]:
    path = Path(path)
    logger.debug("Loading scenarios from %s", path)
    return scenarios_from_json_string(path.read_text(encoding="utf-8"), date_pattern)


class JSONScenarioSource:
    """
    Scenario snapshot held as a JSON file or string, with optional filters.

    Exactly one of ``path`` and ``text`` must be given.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        text: Optional[str] = None,
        date_pattern: str = DEFAULT_DATE_PATTERN,
    ):
        if (path is None) == (text is None):
            raise ValueError("Give exactly one of path and text")
        self.path = Path(path) if path is not None else None
        self.text = text
        self.date_pattern = date_pattern
        self._filters: List[ScenarioFilter] = []

    def add_filter(self, filter_instance: ScenarioFilter) -> None:
        self._filters.append(filter_instance)

    def load(self) -> List[MarketDataScenario]:
        """Load the snapshot and apply all registered filters."""
        if self.path is not None:
            scenarios = scenarios_from_json_file(self.path, self.date_pattern)
        else:
            scenarios = scenarios_from_json_string(self.text, self.date_pattern)

        loaded = len(scenarios)
        for filter_instance in self._filters:
            scenarios = filter_instance.filter(scenarios)
        logger.info(
            "Loaded %d scenario(s) from %s, %d after filtering",
            loaded,
            self.path or "string",
            len(scenarios),
        )
        return scenarios
