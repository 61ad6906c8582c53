"""
===============================================================================
TARJETA CRC — inventory_core/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer repositorios y casos de uso siguiendo DIP.
  - Mantener singletons con caching (lru_cache).
  - Centralizar decisiones runtime basadas en Settings (config).

Colaboradores:
  - crosscutting.config.get_settings
  - domain.repositories.* (puertos)
  - infrastructure.repositories.in_memory (implementación local)
  - application.usecases.stock (casos de uso)

Notas:
  - Este archivo NO contiene lógica de negocio.
  - Este archivo NO depende de FastAPI (solo expone factories).
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases.stock import (
    ListLowStockProductsUseCase,
    RecordStockMovementUseCase,
)
from .crosscutting.config import get_settings
from .infrastructure.repositories.in_memory import InMemoryInventoryRepository


@lru_cache(maxsize=1)
def get_inventory_repository() -> InMemoryInventoryRepository:
    return InMemoryInventoryRepository()


def get_record_stock_movement_use_case() -> RecordStockMovementUseCase:
    repository = get_inventory_repository()
    return RecordStockMovementUseCase(
        product_repository=repository,
        movement_repository=repository,
        enforce_stock_availability=get_settings().enforce_stock_availability,
    )


def get_list_low_stock_products_use_case() -> ListLowStockProductsUseCase:
    return ListLowStockProductsUseCase(product_repository=get_inventory_repository())
