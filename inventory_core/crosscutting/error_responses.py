# inventory_core/crosscutting/error_responses.py
"""
===============================================================================
MÓDULO: Respuestas de error estándar (RFC 7807 / Problem Details)
===============================================================================

Objetivo
--------
Uniformar los errores HTTP de los guards y handlers para que:
- El frontend pueda manejar por "code"
- Los errores de campo (ValidationErrors) lleguen como errors[]

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  AppHTTPException + handlers

Responsabilidades:
  - Definir catálogo de códigos de error (ErrorCode)
  - Construir payload RFC7807 (ErrorDetail)
  - Proveer factories de errores frecuentes
  - Proveer handlers (FastAPI) para devolver JSON problem+json

Colaboradores:
  - identity/access_control.py (401/403 de route guards)
  - interfaces/api/http/error_mapping.py (MovementError -> 4xx/5xx)
  - domain/movement_validation.py (ValidationErrors -> errors[])
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .exceptions import InsufficientStockError, InventoryError, RepositoryError
from .logger import logger


class ErrorCode(str, Enum):
    # 4xx
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


class ErrorDetail(BaseModel):
    """
    Modelo RFC 7807 (Problem Details).

    Campos extra:
    - code: error code estable para clientes
    - errors: lista opcional de detalles (ej: [{"field":"quantity","msg":"..."}])
    """

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"


class AppHTTPException(HTTPException):
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      AppHTTPException

    Responsabilidades:
      - Adjuntar un ErrorCode estable
      - Transportar errores de validación (errors[])

    Colaboradores:
      - app_exception_handler()
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code
        self.errors = errors


# ---------------------------------------------------------------------------
# Factories de error (helpers)
# ---------------------------------------------------------------------------
def field_errors_to_problem_errors(
    field_errors: Mapping[str, str],
) -> list[dict[str, Any]]:
    """Convierte ValidationErrors ({campo: mensaje}) al formato errors[]."""
    return [{"field": field, "msg": msg} for field, msg in field_errors.items()]


def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(422, ErrorCode.VALIDATION_ERROR, detail, errors)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' no encontrado"
    )


def conflict(detail: str) -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.CONFLICT, detail)


def unauthorized(detail: str = "Autenticación requerida") -> AppHTTPException:
    return AppHTTPException(401, ErrorCode.UNAUTHORIZED, detail)


def forbidden(detail: str = "Acceso denegado") -> AppHTTPException:
    return AppHTTPException(403, ErrorCode.FORBIDDEN, detail)


def service_unavailable(service: str) -> AppHTTPException:
    return AppHTTPException(
        503,
        ErrorCode.SERVICE_UNAVAILABLE,
        f"Servicio no disponible temporalmente: {service}",
    )


# ---------------------------------------------------------------------------
# Handlers FastAPI
# ---------------------------------------------------------------------------
def _problem_response(
    request: Request,
    *,
    status_code: int,
    code: ErrorCode,
    detail: str,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    error = ErrorDetail(
        type=f"about:blank/{code.value.lower()}",
        title=code.value.replace("_", " ").title(),
        status=status_code,
        detail=detail,
        code=code,
        instance=str(request.url),
        errors=errors or None,
    )
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(exclude_none=True),
        headers=headers,
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """Handler para AppHTTPException."""
    return _problem_response(
        request,
        status_code=exc.status_code,
        code=exc.code,
        detail=str(exc.detail),
        errors=exc.errors,
        headers=getattr(exc, "headers", None),
    )


async def inventory_error_handler(
    request: Request, exc: InventoryError
) -> JSONResponse:
    """
    Handler para errores internos tipados.

    InsufficientStockError -> 409; RepositoryError -> 503; el resto -> 500.
    Siempre se loguea con error_id.
    """
    if isinstance(exc, InsufficientStockError):
        status_code, code = 409, ErrorCode.CONFLICT
    elif isinstance(exc, RepositoryError):
        status_code, code = 503, ErrorCode.SERVICE_UNAVAILABLE
    else:
        status_code, code = 500, ErrorCode.INTERNAL_ERROR

    logger.error(
        "Error de servicio",
        extra={
            "code": code.value,
            "error_code": exc.error_code,
            "error_id": exc.error_id,
            "error_message": exc.message,
        },
    )

    return _problem_response(
        request,
        status_code=status_code,
        code=code,
        detail=exc.message,
        errors=[{"error_id": exc.error_id}],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers RFC7807 en la app."""
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(InventoryError, inventory_error_handler)
