"""
===============================================================================
STOCK USE CASES PACKAGE (Public API / Exports)
===============================================================================

Responsibilities:
    - Re-exportar los casos de uso de stock y sus resultados/errores.
===============================================================================
"""

from __future__ import annotations

from .list_low_stock_products import ListLowStockProductsUseCase
from .movement_results import (
    ListLowStockProductsResult,
    MovementError,
    MovementErrorCode,
    RecordStockMovementResult,
)
from .record_stock_movement import REQUIRED_ROLE, RecordStockMovementUseCase

__all__ = [
    "RecordStockMovementUseCase",
    "ListLowStockProductsUseCase",
    "RecordStockMovementResult",
    "ListLowStockProductsResult",
    "MovementError",
    "MovementErrorCode",
    "REQUIRED_ROLE",
]
