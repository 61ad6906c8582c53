"""
===============================================================================
USE CASES PACKAGE (Public API / Exports)
===============================================================================
"""

from .stock import (
    ListLowStockProductsResult,
    ListLowStockProductsUseCase,
    MovementError,
    MovementErrorCode,
    RecordStockMovementResult,
    RecordStockMovementUseCase,
)

__all__ = [
    "RecordStockMovementUseCase",
    "RecordStockMovementResult",
    "ListLowStockProductsUseCase",
    "ListLowStockProductsResult",
    "MovementError",
    "MovementErrorCode",
]
