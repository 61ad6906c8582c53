"""
===============================================================================
STOCK USE CASE RESULTS (Shared Result / Error Models)
===============================================================================

Name:
    Stock Use Case Results

Business Goal:
    Proveer tipos consistentes de resultados y errores para los casos de uso
    de stock (registrar movimiento, listar stock bajo).

Why (Context / Intención):
    - Los use cases devuelven resultados tipados en lugar de propagar excepciones.
    - Validación y permisos son resultados esperables, no fallas.

-------------------------------------------------------------------------------
CRC CARD (Module-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Component:
    movement_results models (module)

Responsibilities:
    - Definir MovementErrorCode como conjunto estable de categorías de error.
    - Definir MovementError como contrato mínimo de error.
    - Definir DTOs de resultados por caso de uso.

Collaborators:
    - domain.entities: Product, StockMovement
    - domain.movement_validation: ValidationErrors
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import Product, StockMovement
from ....domain.movement_validation import ValidationErrors


class MovementErrorCode(str, Enum):
    """
    Categorías de error para casos de uso de stock.

    Códigos:
      - VALIDATION_ERROR: formulario inválido (ver field_errors).
      - FORBIDDEN: actor no autorizado para la operación.
      - NOT_FOUND: producto inexistente.
      - CONFLICT: stock insuficiente para la salida.
      - SERVICE_UNAVAILABLE: la persistencia falló.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


@dataclass(frozen=True)
class MovementError:
    """
    Error de caso de uso de stock.

    Campos:
      - code: MovementErrorCode (categoría estable)
      - message: mensaje humano (UI/logs)
      - resource: nombre del recurso afectado (opcional)
    """

    code: MovementErrorCode
    message: str
    resource: str | None = None


@dataclass
class RecordStockMovementResult:
    """
    Resultado de registrar un movimiento.

    Contrato:
      - Éxito: movement != None, error == None, new_quantity = stock resultante
      - Falla: movement == None, error != None
      - field_errors: vacío salvo VALIDATION_ERROR
    """

    movement: StockMovement | None = None
    new_quantity: int | None = None
    error: MovementError | None = None
    field_errors: ValidationErrors = field(default_factory=dict)  # type: ignore[assignment]

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ListLowStockProductsResult:
    """Productos bajo su stock mínimo, más críticos primero (o error)."""

    products: List[Product] = field(default_factory=list)
    error: MovementError | None = None
