"""Infrastructure layer - cut list optimization and formatters."""

from .cut_list_optimizer import (
    CutListError,
    CutListOptimizer,
    CuttingPlan,
    InvalidCutListError,
    StockAssignment,
    UnsatisfiablePieceError,
)
from .formatters import (
    CuttingPlanFormatter,
    JsonFormatter,
    LayoutFormatter,
    PieceListFormatter,
)

__all__ = [
    # Cut list optimization
    "CutListError",
    "CutListOptimizer",
    "CuttingPlan",
    "InvalidCutListError",
    "StockAssignment",
    "UnsatisfiablePieceError",
    # Formatters
    "CuttingPlanFormatter",
    "JsonFormatter",
    "LayoutFormatter",
    "PieceListFormatter",
]
