"""
===============================================================================
TARJETA CRC — error_mapping.py (MovementError -> HTTP RFC7807)
===============================================================================

Responsabilidades:
  - Traducir MovementErrorCode de los casos de uso de stock a HTTP Exceptions
    RFC7807.
  - Llevar los ValidationErrors del formulario a errors[].
  - Mantener el dominio y los casos de uso libres de HTTP.

Reglas:
  - Los use cases devuelven errores tipados (code + message [+ resource]).
  - La API traduce a RFC7807 (crosscutting.error_responses).

Colaboradores:
  - application.usecases.stock (MovementError, MovementErrorCode)
  - crosscutting.error_responses (validation_error, forbidden, etc.)
===============================================================================
"""

from __future__ import annotations

from typing import Mapping
from uuid import UUID

from ....application.usecases.stock import MovementError, MovementErrorCode
from ....crosscutting.error_responses import (
    conflict,
    field_errors_to_problem_errors,
    forbidden,
    not_found,
    service_unavailable,
    validation_error,
)


def raise_movement_error(
    error: MovementError,
    *,
    field_errors: Mapping[str, str] | None = None,
    product_id: UUID | None = None,
) -> None:
    """
    Traduce MovementError -> HTTP.

    Nota:
      - product_id se usa para NOT_FOUND consistente.
    """
    code = error.code
    if code == MovementErrorCode.FORBIDDEN:
        raise forbidden(error.message)
    if code == MovementErrorCode.CONFLICT:
        raise conflict(error.message)
    if code == MovementErrorCode.SERVICE_UNAVAILABLE:
        # 503 (persistencia caída / degradada)
        raise service_unavailable(error.message)
    if code == MovementErrorCode.NOT_FOUND:
        raise not_found(error.resource or "Product", str(product_id or "unknown"))
    if code == MovementErrorCode.VALIDATION_ERROR:
        raise validation_error(
            error.message,
            field_errors_to_problem_errors(field_errors) if field_errors else None,
        )

    # Fallback seguro: un código nuevo se trata como 422
    raise validation_error(error.message)
