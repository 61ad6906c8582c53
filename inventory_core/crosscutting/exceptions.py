# inventory_core/crosscutting/exceptions.py
"""
===============================================================================
MÓDULO: Excepciones tipadas del backend (errores internos)
===============================================================================

Objetivo
--------
Tener excepciones internas coherentes, con:
- error_code estable
- error_id para correlación con logs
- message "humana" (sin filtrar secretos)

Importante: las validaciones de formulario y las denegaciones de permisos NO
son excepciones; viajan como datos (ValidationErrors / bool / resultados).

-------------------------------------------------------------------------------
CRC (Component Card)
-------------------------------------------------------------------------------
Componente:
  InventoryError + subclases

Responsabilidades:
  - Estandarizar fallas de colaboradores externos (persistencia)
  - Distinguir stock insuficiente (conflicto) de una falla de persistencia
  - Generar error_id para rastreo

Colaboradores:
  - infrastructure/repositories (lanzan RepositoryError)
  - application/usecases/stock (RepositoryError -> SERVICE_UNAVAILABLE,
    InsufficientStockError -> CONFLICT)
===============================================================================
"""

from __future__ import annotations

from uuid import uuid4


class InventoryError(Exception):
    """Base para errores internos del sistema."""

    error_code: str = "INVENTORY_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class RepositoryError(InventoryError):
    """Errores de persistencia (producto inexistente, I/O)."""

    error_code: str = "REPOSITORY_ERROR"


class InsufficientStockError(InventoryError):
    """La salida dejaría el stock negativo (chequeado bajo el lock del repo)."""

    error_code: str = "INSUFFICIENT_STOCK"

    def __init__(
        self,
        message: str,
        *,
        current_stock: int,
        requested: int,
        error_id: str | None = None,
    ):
        super().__init__(message, error_id=error_id)
        self.current_stock = current_stock
        self.requested = requested
