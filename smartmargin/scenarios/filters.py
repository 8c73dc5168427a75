"""
Scenario filtering strategies and merging of scenario lists.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Protocol, Set, Union, runtime_checkable

from dateutil.relativedelta import relativedelta

from .types import MarketDataScenario

logger = logging.getLogger(__name__)


@runtime_checkable
class ScenarioFilter(Protocol):
    """Anything that narrows a list of scenarios."""

    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        ...


class BaseFilter(ABC):
    """Base class for scenario filters."""

    @abstractmethod
    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        """Return the scenarios that pass this filter, order preserved."""


class DateWindowFilter(BaseFilter):
    """
    Keep scenarios dated strictly between two dates.

    Only the date part of a scenario's timestamp is compared.
    """

    def __init__(self, after: Union[date, datetime], before: Union[date, datetime]):
        """
        Args:
            after: Exclusive lower bound
            before: Exclusive upper bound
        """
        self.after = after.date() if isinstance(after, datetime) else after
        self.before = before.date() if isinstance(before, datetime) else before

    @classmethod
    def for_contract(cls, start_date: date, maturity_date: date) -> "DateWindowFilter":
        """Window covering a contract's life: start and maturity are both kept."""
        return cls(start_date - relativedelta(days=1), maturity_date + relativedelta(days=1))

    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        return [s for s in scenarios if self.after < s.day < self.before]

    def __repr__(self) -> str:
        return f"DateWindowFilter(after={self.after}, before={self.before})"


class CurveLabelFilter(BaseFilter):
    """
    Restrict scenarios to the given curve labels.

    Scenarios holding none of the labels are dropped.
    """

    def __init__(self, labels: Set[str]):
        self.labels = {label.upper() for label in labels}

    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        result = []
        for scenario in scenarios:
            curves = {
                label: points
                for label, points in scenario.curves.items()
                if label.upper() in self.labels
            }
            if curves:
                result.append(MarketDataScenario(date=scenario.date, curves=curves))
        return result


class CustomFilter(BaseFilter):
    """Keep scenarios for which ``predicate`` returns True."""

    def __init__(self, predicate: Callable[[MarketDataScenario], bool]):
        self.predicate = predicate

    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        return [s for s in scenarios if self.predicate(s)]


class CompositeFilter(BaseFilter):
    """
    Combine multiple filters using AND logic.
    """

    def __init__(self, filters: List[ScenarioFilter]):
        self.filters = list(filters)

    def add_filter(self, filter_instance: ScenarioFilter) -> None:
        self.filters.append(filter_instance)

    def filter(self, scenarios: List[MarketDataScenario]) -> List[MarketDataScenario]:
        result = scenarios
        for f in self.filters:
            result = f.filter(result)
        return result


def merge_scenarios(*scenario_lists: Iterable[MarketDataScenario]) -> List[MarketDataScenario]:
    """
    Concatenate scenario lists into one list sorted by date, one scenario per date.

    When two lists hold the same date, the scenario from the later list wins.
    """
    by_day: Dict[date, MarketDataScenario] = {}
    for scenarios in scenario_lists:
        for scenario in scenarios:
            if scenario.day in by_day:
                logger.warning(
                    "Duplicate scenario for %s; keeping the later snapshot", scenario.day
                )
            by_day[scenario.day] = scenario
    return [by_day[day] for day in sorted(by_day)]
