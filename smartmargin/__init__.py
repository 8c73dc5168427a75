"""Smart derivative contract margining.

Values an interest rate swap through a valuation oracle at two market data
times and derives the collateral adjustment (margin) between them.

Key modules:
- margin: MarginCalculator and ContractValuation
- contract: the margining formula
- oracle: historic-scenario and geometric Brownian motion oracles
- curves: discount curves and their calibration
- valuation: swap descriptors, products and pricing
- scenarios: loading and filtering of market data snapshots
- trade: FpML parsing
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "margin",
    "contract",
    "oracle",
    "curves",
    "valuation",
    "scenarios",
    "trade",
]
