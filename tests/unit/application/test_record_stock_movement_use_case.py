"""
Name: Record Stock Movement Use Case Tests

Responsibilities:
  - Verify ordering: authorization before validation before persistence
  - Verify typed errors (FORBIDDEN, VALIDATION_ERROR, NOT_FOUND, CONFLICT,
    SERVICE_UNAVAILABLE)
  - Verify a successful movement updates stock and records the actor

Collaborators:
  - InMemoryInventoryRepository (real adapter)
  - unittest.mock for failing / spy repositories
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from inventory_core.application.usecases.stock import (
    MovementErrorCode,
    RecordStockMovementUseCase,
)
from inventory_core.crosscutting.exceptions import (
    InsufficientStockError,
    RepositoryError,
)
from inventory_core.domain.entities import MovementType, StockMovementFormData
from inventory_core.identity.authorization import AuthorizationEvaluator

pytestmark = pytest.mark.unit


def _form(product_id, type_="out", quantity=4, **kwargs) -> StockMovementFormData:
    return StockMovementFormData(
        type=type_, quantity=quantity, product_id=product_id, **kwargs
    )


@pytest.fixture
def use_case(inventory_repository) -> RecordStockMovementUseCase:
    return RecordStockMovementUseCase(inventory_repository, inventory_repository)


def test_employee_records_outgoing_movement(
    use_case, inventory_repository, sample_product, employee_profile
):
    result = use_case.execute(
        form=_form(sample_product.id, notes="Venta mostrador"),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.ok
    assert result.error is None
    assert result.field_errors == {}
    assert result.new_quantity == 6
    assert result.movement.type is MovementType.OUT
    assert result.movement.user_id == employee_profile.id
    assert result.movement.notes == "Venta mostrador"
    assert inventory_repository.get_product(sample_product.id).quantity == 6
    assert inventory_repository.list_movements(sample_product.id) == [result.movement]


def test_admin_is_allowed(use_case, sample_product, admin_profile):
    result = use_case.execute(
        form=_form(sample_product.id, type_="in", quantity=5),
        authorization=AuthorizationEvaluator(admin_profile),
    )

    assert result.ok
    assert result.new_quantity == 15


def test_unauthenticated_is_forbidden_before_touching_repositories(sample_product):
    products = MagicMock()
    movements = MagicMock()
    use_case = RecordStockMovementUseCase(products, movements)

    result = use_case.execute(
        form=_form(sample_product.id, type_="", quantity=0),
        authorization=AuthorizationEvaluator(None),
    )

    assert result.error.code == MovementErrorCode.FORBIDDEN
    assert result.field_errors == {}
    assert result.movement is None
    products.get_product.assert_not_called()
    movements.record_movement.assert_not_called()


def test_developer_is_forbidden(use_case, sample_product, developer_profile):
    result = use_case.execute(
        form=_form(sample_product.id),
        authorization=AuthorizationEvaluator(developer_profile),
    )

    assert result.error.code == MovementErrorCode.FORBIDDEN


def test_invalid_form_reports_field_errors(
    use_case, inventory_repository, sample_product, employee_profile
):
    result = use_case.execute(
        form=_form(sample_product.id, type_="", quantity=0),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.VALIDATION_ERROR
    assert set(result.field_errors) == {"type", "quantity"}
    assert inventory_repository.list_movements() == []


def test_unknown_product_is_not_found(use_case, employee_profile):
    result = use_case.execute(
        form=_form(uuid4()),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.NOT_FOUND
    assert result.error.resource == "Product"


def test_insufficient_stock_is_conflict(
    use_case, inventory_repository, sample_product, employee_profile
):
    result = use_case.execute(
        form=_form(sample_product.id, quantity=11),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.CONFLICT
    assert "Disponible: 10" in result.error.message
    assert inventory_repository.get_product(sample_product.id).quantity == 10


def test_persistence_failure_is_service_unavailable(sample_product, employee_profile):
    products = MagicMock()
    products.get_product.return_value = sample_product
    movements = MagicMock()
    movements.record_movement.side_effect = RepositoryError("db down")
    use_case = RecordStockMovementUseCase(products, movements)

    result = use_case.execute(
        form=_form(sample_product.id, quantity=1),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.SERVICE_UNAVAILABLE
    assert result.movement is None


def test_disabled_availability_defers_to_repository(
    inventory_repository, sample_product, employee_profile
):
    use_case = RecordStockMovementUseCase(
        inventory_repository,
        inventory_repository,
        enforce_stock_availability=False,
    )

    result = use_case.execute(
        form=_form(sample_product.id, quantity=11),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    # El repositorio igual rechaza stock negativo, como conflicto.
    assert result.error.code == MovementErrorCode.CONFLICT
    assert "Disponible: 10" in result.error.message
    assert inventory_repository.get_product(sample_product.id).quantity == 10


def test_stock_consumed_before_commit_is_conflict(
    inventory_repository, sample_product, employee_profile
):
    # El chequeo ve 10 unidades; otra salida las consume antes del commit.
    stale_products = MagicMock()
    stale_products.get_product.return_value = sample_product
    inventory_repository.record_movement(
        product_id=sample_product.id, movement_type=MovementType.OUT, quantity=10
    )
    use_case = RecordStockMovementUseCase(stale_products, inventory_repository)

    result = use_case.execute(
        form=_form(sample_product.id, quantity=4),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.CONFLICT
    assert result.movement is None
    assert inventory_repository.get_product(sample_product.id).quantity == 0


def test_insufficient_stock_from_repository_is_conflict(
    sample_product, employee_profile
):
    products = MagicMock()
    products.get_product.return_value = sample_product
    movements = MagicMock()
    movements.record_movement.side_effect = InsufficientStockError(
        "Stock insuficiente.", current_stock=0, requested=1
    )
    use_case = RecordStockMovementUseCase(products, movements)

    result = use_case.execute(
        form=_form(sample_product.id, quantity=1),
        authorization=AuthorizationEvaluator(employee_profile),
    )

    assert result.error.code == MovementErrorCode.CONFLICT
    assert result.error.message == "Stock insuficiente."
