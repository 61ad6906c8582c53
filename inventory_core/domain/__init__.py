"""
===============================================================================
TARJETA CRC — domain/__init__.py
===============================================================================

Módulo:
    Exportaciones de la Capa de Dominio (API pública del dominio)

Responsabilidades:
    - Centralizar exports para imports limpios en application/tests.
    - Mantener estable el "surface area" del dominio.

Reglas:
    - Solo re-exporta contratos/entidades del dominio.
    - No importar infraestructura aquí.
===============================================================================
"""

from .entities import (
    MOVEMENT_TYPE_UNSET,
    MovementType,
    Product,
    StockMovement,
    StockMovementFormData,
)
from .movement_validation import (
    ValidationErrors,
    has_validation_errors,
    validate,
    validate_movement_form,
)
from .repositories import ProductRepository, StockMovementRepository
from .stock_policy import StockAvailability, apply_movement, check_stock_availability

__all__ = [
    # Entities
    "MOVEMENT_TYPE_UNSET",
    "MovementType",
    "Product",
    "StockMovement",
    "StockMovementFormData",
    # Validation
    "ValidationErrors",
    "validate",
    "validate_movement_form",
    "has_validation_errors",
    # Stock policy
    "StockAvailability",
    "check_stock_availability",
    "apply_movement",
    # Repository Interfaces (Ports)
    "ProductRepository",
    "StockMovementRepository",
]
