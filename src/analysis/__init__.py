from .analyst import HeadcountAnalyst
from .correlation import CorrelationEngine

__all__ = ["HeadcountAnalyst", "CorrelationEngine"]
