"""
CRC — domain/repositories.py

Name
- Domain Repository Interfaces (Protocols)

Responsibilities
- Define persistence contracts for the domain layer (ports).
- Keep the application/domain independent from the storage backend.
- Enable dependency inversion and straightforward unit testing.

Collaborators
- domain.entities: Product, StockMovement, MovementType
- infrastructure.repositories.in_memory: InMemoryInventoryRepository

Constraints
- Pure interfaces only: no side effects, no infrastructure imports.
- Implementations raise crosscutting.exceptions.RepositoryError on storage
  failures; "not found" is a None return, not an error.

Notes
- We use typing.Protocol for structural subtyping ("duck typing").
"""

from typing import List, Optional, Protocol
from uuid import UUID

from .entities import MovementType, Product, StockMovement


class ProductRepository(Protocol):
    """R: Interface for product persistence."""

    def get_product(self, product_id: UUID) -> Optional[Product]:
        """R: Return the product (a copy) or None."""
        ...

    def save_product(self, product: Product) -> None:
        """R: Insert or replace a product."""
        ...

    def list_low_stock_products(self) -> List[Product]:
        """R: Products below their own minimum stock, lowest quantity first."""
        ...


class StockMovementRepository(Protocol):
    """
    R: Interface for committing stock movements.

    record_movement must apply the signed quantity to the product and store
    the movement atomically. An outgoing movement larger than the stock held
    at commit time raises InsufficientStockError; other persistence failures
    raise RepositoryError.
    """

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
        """R: Persist the movement and return it."""
        ...

    def list_movements(self, product_id: Optional[UUID] = None) -> List[StockMovement]:
        """R: Movements, newest first; optionally filtered by product."""
        ...
