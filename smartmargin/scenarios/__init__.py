"""
Market data scenarios: loading, filtering and merging of dated curve snapshots.
"""

from .filters import (
    BaseFilter,
    CompositeFilter,
    CurveLabelFilter,
    CustomFilter,
    DateWindowFilter,
    ScenarioFilter,
    merge_scenarios,
)
from .loaders import (
    JSONScenarioSource,
    parse_scenarios,
    scenarios_from_json_file,
    scenarios_from_json_string,
)
from .types import MarketDataScenario

__all__ = [
    "MarketDataScenario",
    # Loading
    "JSONScenarioSource",
    "parse_scenarios",
    "scenarios_from_json_file",
    "scenarios_from_json_string",
    # Filters
    "ScenarioFilter",
    "BaseFilter",
    "DateWindowFilter",
    "CurveLabelFilter",
    "CustomFilter",
    "CompositeFilter",
    "merge_scenarios",
]
