"""
===============================================================================
USE CASE: List Low Stock Products
===============================================================================

Business Goal:
    Alimentar la alerta de stock bajo: productos con stock mínimo definido
    y cantidad por debajo de él, los más críticos primero.

CRC:
    Class: ListLowStockProductsUseCase
    Responsibilities:
      - Requerir has_permission(EMPLOYEE).
      - Consultar ProductRepository.list_low_stock_products.
    Collaborators:
      - identity.authorization.AuthorizationEvaluator
      - domain.repositories.ProductRepository
===============================================================================
"""

from __future__ import annotations

from ....domain.repositories import ProductRepository
from ....identity.authorization import AuthorizationEvaluator
from ....identity.users import UserRole
from .movement_results import (
    ListLowStockProductsResult,
    MovementError,
    MovementErrorCode,
)


class ListLowStockProductsUseCase:
    def __init__(self, product_repository: ProductRepository) -> None:
        self._products = product_repository

    def execute(
        self, *, authorization: AuthorizationEvaluator
    ) -> ListLowStockProductsResult:
        if not authorization.has_permission(UserRole.EMPLOYEE):
            return ListLowStockProductsResult(
                error=MovementError(
                    code=MovementErrorCode.FORBIDDEN,
                    message="No tenés permiso para ver el stock.",
                    resource="Product",
                )
            )

        return ListLowStockProductsResult(
            products=self._products.list_low_stock_products()
        )
