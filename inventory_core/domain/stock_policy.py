"""
===============================================================================
TARJETA CRC — domain/stock_policy.py
===============================================================================

Módulo:
    Política de Disponibilidad de Stock

Responsabilidades:
    - Decidir si un movimiento es posible contra el stock actual.
    - Calcular el stock resultante de aplicar un movimiento.
    - Ser 100% testeable: funciones puras, inputs explícitos.

Colaboradores:
    - domain.entities: MovementType.
    - application.usecases.stock: rechaza con CONFLICT si no hay stock.
    - infrastructure.repositories: aplica apply_movement al persistir.

Reglas:
    - Entradas siempre son posibles.
    - Salidas sin stock (0) o mayores al stock disponible se rechazan.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass

from .entities import MovementType


@dataclass(frozen=True, slots=True)
class StockAvailability:
    """Resultado del chequeo de disponibilidad (current_stock siempre presente)."""

    valid: bool
    current_stock: int
    message: str | None = None


def check_stock_availability(
    current_stock: int, movement_type: MovementType | str, quantity: int
) -> StockAvailability:
    """Evalúa si el movimiento puede aplicarse sobre current_stock."""
    if movement_type != MovementType.OUT:
        return StockAvailability(valid=True, current_stock=current_stock)

    if current_stock <= 0:
        return StockAvailability(
            valid=False,
            current_stock=current_stock,
            message="Producto sin stock disponible.",
        )

    if current_stock < quantity:
        return StockAvailability(
            valid=False,
            current_stock=current_stock,
            message=(
                f"Stock insuficiente. Disponible: {current_stock}, "
                f"solicitado: {quantity}."
            ),
        )

    return StockAvailability(valid=True, current_stock=current_stock)


def apply_movement(
    current_stock: int, movement_type: MovementType | str, quantity: int
) -> int:
    """Stock resultante (puede ser negativo: quien persiste decide si lo acepta)."""
    if movement_type == MovementType.OUT:
        return current_stock - quantity
    return current_stock + quantity
