"""
============================================================
TARJETA CRC — infrastructure/repositories/in_memory/inventory.py
============================================================
Class: InMemoryInventoryRepository

Responsibilities:
  - Almacenar productos y movimientos en memoria (tests / local dev).
  - Aplicar cada movimiento al stock del producto de forma atómica.
  - Rechazar stock negativo con InsufficientStockError (bajo el lock).

Collaborators:
  - domain.repositories.ProductRepository / StockMovementRepository (contratos)
  - domain.stock_policy.check_stock_availability / apply_movement
  - crosscutting.exceptions.RepositoryError / InsufficientStockError

Constraints / Notes:
  - Thread-safe: Lock protege los diccionarios internos.
  - Repo puro: NO decide permisos ni valida formularios.
  - Copias defensivas: el caller nunca recibe el Product interno.
============================================================
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID, uuid4

from ....crosscutting.exceptions import InsufficientStockError, RepositoryError
from ....crosscutting.logger import logger
from ....domain.entities import MovementType, Product, StockMovement
from ....domain.repositories import ProductRepository, StockMovementRepository
from ....domain.stock_policy import apply_movement, check_stock_availability


class InMemoryInventoryRepository(ProductRepository, StockMovementRepository):
    """
    Repositorio in-memory, thread-safe, para productos + movimientos.

    Modelo mental:
    - _products actúa como tabla products (id -> Product)
    - _movements actúa como tabla stock_movements (append-only)
    """

    def __init__(self, products: Optional[List[Product]] = None) -> None:
        self._lock = Lock()
        self._products: Dict[UUID, Product] = {}
        self._movements: List[StockMovement] = []
        for product in products or []:
            self._products[product.id] = replace(product)

    # =========================================================
    # Products
    # =========================================================
    def get_product(self, product_id: UUID) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            return replace(product) if product else None

    def save_product(self, product: Product) -> None:
        with self._lock:
            self._products[product.id] = replace(product)

    def list_low_stock_products(self) -> List[Product]:
        with self._lock:
            low = [replace(p) for p in self._products.values() if p.is_low_stock()]
        # Más crítico primero; el nombre desempata.
        low.sort(key=lambda p: (p.quantity, p.name))
        return low

    # =========================================================
    # Movements
    # =========================================================
    def record_movement(
        self,
        *,
        product_id: UUID,
        movement_type: MovementType,
        quantity: int,
        notes: Optional[str] = None,
        user_id: Optional[UUID] = None,
        supplier_id: Optional[UUID] = None,
    ) -> StockMovement:
        now = datetime.now(timezone.utc)

        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                raise RepositoryError(f"Producto '{product_id}' inexistente.")

            availability = check_stock_availability(
                product.quantity, movement_type, quantity
            )
            if not availability.valid:
                raise InsufficientStockError(
                    availability.message or "Stock insuficiente.",
                    current_stock=product.quantity,
                    requested=quantity,
                )

            new_quantity = apply_movement(product.quantity, movement_type, quantity)

            movement = StockMovement(
                id=uuid4(),
                product_id=product_id,
                type=MovementType(movement_type),
                quantity=quantity,
                date=now,
                notes=notes,
                user_id=user_id,
                supplier_id=supplier_id,
            )
            product.quantity = new_quantity
            product.updated_at = now
            self._movements.append(movement)

        logger.info(
            "Movimiento de stock registrado",
            extra={
                "product_id": str(product_id),
                "movement_type": movement.type.value,
                "quantity": quantity,
                "new_quantity": new_quantity,
            },
        )
        return movement

    def list_movements(self, product_id: Optional[UUID] = None) -> List[StockMovement]:
        with self._lock:
            movements = [
                m
                for m in self._movements
                if product_id is None or m.product_id == product_id
            ]
        # Orden de inserción invertido: el más nuevo primero aun con fechas iguales.
        movements.reverse()
        return movements
