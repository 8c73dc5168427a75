"""Result record of a margin calculation."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class ContractValuation:
    """Margin of a contract for one margin period.

    Attributes:
        market_data_time: Market data time closing the margin period
        external_references: Party reference to external party id
        counterparty_names: Party reference to party attributes
        value_t1: Diagnostic contract value on the opening market data
        value_t2: Diagnostic contract value on the closing market data
        margin: Collateral adjustment for the period (authoritative)
    """

    market_data_time: datetime
    value_t1: float
    value_t2: float
    margin: float
    external_references: Dict[str, str] = field(default_factory=dict)
    counterparty_names: Dict[str, Dict[str, str]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "marketDataTime": self.market_data_time.isoformat(),
            "externalReferences": dict(self.external_references),
            "counterpartyNames": {k: dict(v) for k, v in self.counterparty_names.items()},
            "value_t1": self.value_t1,
            "value_t2": self.value_t2,
            "margin": self.margin,
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)
