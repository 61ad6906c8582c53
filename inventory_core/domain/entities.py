"""
===============================================================================
TARJETA CRC — domain/entities.py
===============================================================================

Módulo:
    Entidades del Dominio (Product, StockMovement, StockMovementFormData)

Responsabilidades:
    - Definir estructuras centrales del inventario (sin infraestructura).
    - Brindar helpers mínimos (propiedades) para invariantes simples.
    - Mantener tipos claros para casos de uso y repositorios.

Colaboradores:
    - domain.movement_validation: valida StockMovementFormData.
    - domain.stock_policy: disponibilidad de stock por tipo de movimiento.
    - domain.repositories: persisten/recuperan Product y StockMovement.

Principios:
    - Sin dependencias a DB/FastAPI.
    - StockMovementFormData es transitorio: se descarta al confirmar o abandonar.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

# Tipo "sin elegir" del formulario.
MOVEMENT_TYPE_UNSET = ""


class MovementType(str, Enum):
    """Dirección del movimiento: entrada o salida de stock."""

    IN = "in"
    OUT = "out"


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


@dataclass
class Product:
    """Producto con su stock actual."""

    id: UUID
    name: str
    quantity: int = 0
    price: float = 0.0
    description: str = ""
    category: Optional[str] = None
    minimum_stock: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_low_stock(self) -> bool:
        """True si el producto define minimum_stock y está por debajo."""
        return self.minimum_stock is not None and self.quantity < self.minimum_stock


# ---------------------------------------------------------------------------
# Stock movements
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StockMovementFormData:
    """
    Movimiento propuesto (todavía no confirmado).

    Notas:
      - type acepta "in", "out" o "" (sin elegir); llega crudo desde la UI.
      - product_id no se valida acá: existe o no según el repositorio.
    """

    type: str
    quantity: int
    product_id: UUID
    notes: Optional[str] = None
    supplier_id: Optional[UUID] = None


@dataclass(frozen=True)
class StockMovement:
    """Movimiento confirmado."""

    id: UUID
    product_id: UUID
    type: MovementType
    quantity: int
    date: datetime
    notes: Optional[str] = None
    user_id: Optional[UUID] = None
    supplier_id: Optional[UUID] = None

    @property
    def signed_quantity(self) -> int:
        """+quantity para entradas, -quantity para salidas."""
        return self.quantity if self.type == MovementType.IN else -self.quantity
