from .margining import SmartDerivativeContractMargining

__all__ = ["SmartDerivativeContractMargining"]
