"""
===============================================================================
USE CASE: Record Stock Movement (authorize -> validate -> apply)
===============================================================================

Name:
    Record Stock Movement Use Case

Business Goal:
    Registrar una entrada o salida de stock de un producto, aplicando:
      - autorización del actor (antes que cualquier otra cosa)
      - validación del formulario (type/quantity)
      - existencia del producto y disponibilidad de stock
      - persistencia atómica del movimiento + nuevo stock

Why (Context / Intención):
    - Validación exitosa NO autoriza; autorización exitosa NO valida datos.
      El orden fijo de este caso de uso hace cumplir ambas cosas.
    - Es el único camino que muta cantidades de inventario.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    RecordStockMovementUseCase

Responsibilities:
    - Chequear has_permission(EMPLOYEE) (admin escala).
    - Validar el formulario (validate_movement_form).
    - Resolver el producto y chequear disponibilidad.
    - Persistir vía StockMovementRepository.
    - Devolver RecordStockMovementResult tipado.

Collaborators:
    - identity.authorization.AuthorizationEvaluator
    - domain.movement_validation / domain.stock_policy
    - domain.repositories.ProductRepository / StockMovementRepository
    - crosscutting.exceptions.RepositoryError / InsufficientStockError
===============================================================================
"""

from __future__ import annotations

from typing import Final

from ....crosscutting.exceptions import InsufficientStockError, RepositoryError
from ....crosscutting.logger import logger
from ....domain.entities import MovementType, StockMovementFormData
from ....domain.movement_validation import (
    has_validation_errors,
    validate_movement_form,
)
from ....domain.repositories import ProductRepository, StockMovementRepository
from ....domain.stock_policy import check_stock_availability
from ....identity.authorization import AuthorizationEvaluator
from ....identity.users import UserRole
from .movement_results import (
    MovementError,
    MovementErrorCode,
    RecordStockMovementResult,
)

_RESOURCE_PRODUCT: Final[str] = "Product"
_RESOURCE_MOVEMENT: Final[str] = "StockMovement"

_MSG_FORBIDDEN: Final[str] = "No tenés permiso para registrar movimientos de stock."
_MSG_INVALID_FORM: Final[str] = "El movimiento tiene campos inválidos."
_MSG_PRODUCT_NOT_FOUND: Final[str] = "Producto no encontrado."
_MSG_PERSISTENCE_FAILED: Final[str] = "No se pudo registrar el movimiento."

# Rol mínimo para mover stock.
REQUIRED_ROLE: Final[UserRole] = UserRole.EMPLOYEE


class RecordStockMovementUseCase:
    """
    Use Case (Application Service / Command):
        Registrar un movimiento de stock autorizado y válido.
    """

    def __init__(
        self,
        product_repository: ProductRepository,
        movement_repository: StockMovementRepository,
        *,
        enforce_stock_availability: bool = True,
    ) -> None:
        self._products = product_repository
        self._movements = movement_repository
        self._enforce_stock_availability = enforce_stock_availability

    def execute(
        self,
        *,
        form: StockMovementFormData,
        authorization: AuthorizationEvaluator,
    ) -> RecordStockMovementResult:
        # ---------------------------------------------------------------------
        # 1) Autorización (siempre primero).
        # ---------------------------------------------------------------------
        if not authorization.has_permission(REQUIRED_ROLE):
            return RecordStockMovementResult(
                error=MovementError(
                    code=MovementErrorCode.FORBIDDEN,
                    message=_MSG_FORBIDDEN,
                    resource=_RESOURCE_MOVEMENT,
                )
            )

        # ---------------------------------------------------------------------
        # 2) Validación del formulario.
        # ---------------------------------------------------------------------
        field_errors = validate_movement_form(form)
        if has_validation_errors(field_errors):
            return RecordStockMovementResult(
                error=MovementError(
                    code=MovementErrorCode.VALIDATION_ERROR,
                    message=_MSG_INVALID_FORM,
                    resource=_RESOURCE_MOVEMENT,
                ),
                field_errors=field_errors,
            )

        movement_type = MovementType(form.type)
        quantity = int(form.quantity)

        # ---------------------------------------------------------------------
        # 3) Producto + disponibilidad.
        # ---------------------------------------------------------------------
        product = self._products.get_product(form.product_id)
        if product is None:
            return RecordStockMovementResult(
                error=MovementError(
                    code=MovementErrorCode.NOT_FOUND,
                    message=_MSG_PRODUCT_NOT_FOUND,
                    resource=_RESOURCE_PRODUCT,
                )
            )

        if self._enforce_stock_availability:
            availability = check_stock_availability(
                product.quantity, movement_type, quantity
            )
            if not availability.valid:
                return RecordStockMovementResult(
                    error=MovementError(
                        code=MovementErrorCode.CONFLICT,
                        message=availability.message or _MSG_PERSISTENCE_FAILED,
                        resource=_RESOURCE_PRODUCT,
                    )
                )

        # ---------------------------------------------------------------------
        # 4) Persistir.
        # ---------------------------------------------------------------------
        profile = authorization.profile
        try:
            movement = self._movements.record_movement(
                product_id=product.id,
                movement_type=movement_type,
                quantity=quantity,
                notes=form.notes,
                user_id=profile.id if profile else None,
                supplier_id=form.supplier_id,
            )
        except InsufficientStockError as exc:
            # Stock insuficiente al commit (salida concurrente o chequeo previo apagado).
            return RecordStockMovementResult(
                error=MovementError(
                    code=MovementErrorCode.CONFLICT,
                    message=exc.message,
                    resource=_RESOURCE_PRODUCT,
                )
            )
        except RepositoryError as exc:
            logger.error(
                "Falló el registro del movimiento",
                extra={
                    "error_id": exc.error_id,
                    "error_message": exc.message,
                    "product_id": str(product.id),
                },
            )
            return RecordStockMovementResult(
                error=MovementError(
                    code=MovementErrorCode.SERVICE_UNAVAILABLE,
                    message=_MSG_PERSISTENCE_FAILED,
                    resource=_RESOURCE_MOVEMENT,
                )
            )

        updated = self._products.get_product(product.id)
        return RecordStockMovementResult(
            movement=movement,
            new_quantity=updated.quantity if updated else None,
        )
