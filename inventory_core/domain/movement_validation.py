"""
===============================================================================
TARJETA CRC — domain/movement_validation.py
===============================================================================

Módulo:
    Validación de Movimientos de Stock (reglas puras de formulario)

Responsabilidades:
    - validate(type, quantity): reglas base, devuelve ValidationErrors.
    - has_validation_errors(errors): chequeo estructural (hay alguna clave).
    - validate_movement_form(form, current_stock=None): reglas completas del
      formulario (entero, tope de stock en salidas).

Colaboradores:
    - domain.entities: MovementType, StockMovementFormData.
    - application.usecases.stock: valida antes de persistir.
    - crosscutting.error_responses: ValidationErrors -> errors[] (HTTP).

Reglas:
    - Las fallas de validación son DATOS, no excepciones.
    - Las reglas se evalúan todas (sin short-circuit): type y quantity pueden
      fallar juntas.
    - Una clave presente siempre tiene mensaje no vacío.
    - "notes" no tiene reglas hoy; nunca aparece en la salida.
    - Funciones puras e idempotentes: sin profile, sin repositorios.
===============================================================================
"""

from __future__ import annotations

from typing import Mapping, TypedDict

from .entities import MovementType, StockMovementFormData

MSG_TYPE_REQUIRED = "Seleccioná el tipo de movimiento."
MSG_QUANTITY_NOT_POSITIVE = "La cantidad debe ser mayor que 0."
MSG_QUANTITY_NOT_INTEGER = "La cantidad debe ser un número entero."

FIELD_QUANTITY = "quantity"


class ValidationErrors(TypedDict, total=False):
    """
    Errores por campo (sparse).

    Clave presente => ese campo es inválido (valor = mensaje).
    Dict vacío => formulario válido.
    """

    type: str
    quantity: str
    notes: str


def quantity_exceeds_stock_message(current_stock: int) -> str:
    return (
        "La cantidad no puede ser mayor que el stock disponible "
        f"({current_stock})."
    )


def is_movement_type(value: object) -> bool:
    """True solo para "in" / "out" (o sus MovementType)."""
    return isinstance(value, str) and value in (
        MovementType.IN.value,
        MovementType.OUT.value,
    )


def _is_positive(quantity: object) -> bool:
    if not quantity:
        return False
    try:
        return quantity > 0  # type: ignore[operator]
    except TypeError:
        return False


def _is_integer(quantity: object) -> bool:
    if isinstance(quantity, bool):
        return False
    if isinstance(quantity, int):
        return True
    return isinstance(quantity, float) and quantity.is_integer()


def validate(type: str, quantity: int) -> ValidationErrors:
    """
    Reglas base de un movimiento propuesto.

    - type vacío (o fuera de {in, out}) => errors["type"]
    - quantity 0 / None / <= 0         => errors["quantity"] (sin tope superior)
    """
    errors: ValidationErrors = {}

    if not is_movement_type(type):
        errors["type"] = MSG_TYPE_REQUIRED

    if not _is_positive(quantity):
        errors["quantity"] = MSG_QUANTITY_NOT_POSITIVE

    return errors


def has_validation_errors(errors: Mapping[str, str]) -> bool:
    """True si hay al menos una clave. No re-valida valores."""
    return len(errors) > 0


def validate_movement_form(
    form: StockMovementFormData, *, current_stock: int | None = None
) -> ValidationErrors:
    """
    Validación completa del formulario.

    Sobre validate() agrega, solo si la cantidad ya es positiva:
      1) debe ser entera;
      2) en salidas, no puede superar current_stock (si se conoce).
    Gana la primera regla de quantity que falla.
    """
    errors = validate(form.type, form.quantity)

    if FIELD_QUANTITY in errors:
        return errors

    if not _is_integer(form.quantity):
        errors["quantity"] = MSG_QUANTITY_NOT_INTEGER
    elif (
        current_stock is not None
        and form.type == MovementType.OUT.value
        and form.quantity > current_stock
    ):
        errors["quantity"] = quantity_exceeds_stock_message(current_stock)

    return errors
