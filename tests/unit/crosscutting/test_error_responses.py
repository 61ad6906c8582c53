"""
Name: RFC 7807 Error Response Tests

Responsibilities:
  - Verify problem+json payloads for AppHTTPException
  - Verify ValidationErrors map to errors[]
  - Verify InventoryError handling (InsufficientStockError -> 409,
    RepositoryError -> 503)
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from inventory_core.crosscutting.error_responses import (
    ErrorCode,
    field_errors_to_problem_errors,
    register_exception_handlers,
    validation_error,
)
from inventory_core.crosscutting.exceptions import (
    InsufficientStockError,
    InventoryError,
    RepositoryError,
)
from inventory_core.domain.movement_validation import validate

pytestmark = pytest.mark.unit


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/movements")
    def invalid():
        errors = validate("", 0)
        raise validation_error(
            "Movimiento inválido", field_errors_to_problem_errors(errors)
        )

    @app.get("/repository")
    def repository_down():
        raise RepositoryError("db down", error_id="err-1")

    @app.get("/stock")
    def out_of_stock():
        raise InsufficientStockError(
            "Stock insuficiente.", current_stock=1, requested=3, error_id="err-4"
        )

    @app.get("/internal")
    def internal():
        raise InventoryError("boom", error_id="err-2")

    return app


def test_field_errors_to_problem_errors():
    assert field_errors_to_problem_errors({"quantity": "x"}) == [
        {"field": "quantity", "msg": "x"}
    ]


def test_validation_error_payload():
    response = TestClient(_build_app()).post("/movements")

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == ErrorCode.VALIDATION_ERROR.value
    assert body["detail"] == "Movimiento inválido"
    assert {e["field"] for e in body["errors"]} == {"type", "quantity"}


def test_repository_error_is_503():
    response = TestClient(_build_app()).get("/repository")

    assert response.status_code == 503
    body = response.json()
    assert body["code"] == "SERVICE_UNAVAILABLE"
    assert body["errors"] == [{"error_id": "err-1"}]


def test_other_inventory_errors_are_500():
    response = TestClient(_build_app()).get("/internal")

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"


def test_insufficient_stock_is_409():
    response = TestClient(_build_app()).get("/stock")

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "CONFLICT"
    assert body["detail"] == "Stock insuficiente."
    assert body["errors"] == [{"error_id": "err-4"}]
