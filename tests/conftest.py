"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures (profiles, products, repositories)
  - Configure test environment (no .env file, APP_ENV=test)

Collaborators:
  - pytest: Test framework
  - inventory_core.identity / inventory_core.domain: entities under test

Notes:
  - Fixtures are auto-discovered by pytest
  - Use @pytest.fixture(scope="function") for per-test isolation
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable
from uuid import uuid4

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("APP_ENV", "test")

from inventory_core.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from inventory_core.domain.entities import Product  # noqa: E402
from inventory_core.identity.users import Profile, UserRole  # noqa: E402
from inventory_core.infrastructure.repositories.in_memory import (  # noqa: E402
    InMemoryInventoryRepository,
)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


@pytest.fixture(autouse=True)
def _fresh_settings():
    """R: Settings are cached; every test starts from the environment."""
    app_config.get_settings.cache_clear()
    yield
    app_config.get_settings.cache_clear()


# ============================================================================
# Identity Fixtures
# ============================================================================


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    """R: Factory for profiles with a given role."""

    def _make(role: UserRole = UserRole.EMPLOYEE, **overrides) -> Profile:
        now = datetime.now(timezone.utc)
        data = {
            "id": uuid4(),
            "full_name": "Test User",
            "role": role,
            "created_at": now,
            "updated_at": now,
        }
        data.update(overrides)
        return Profile(**data)

    return _make


@pytest.fixture
def admin_profile(make_profile) -> Profile:
    return make_profile(UserRole.ADMIN, full_name="Admin")


@pytest.fixture
def employee_profile(make_profile) -> Profile:
    return make_profile(UserRole.EMPLOYEE, full_name="Employee")


@pytest.fixture
def developer_profile(make_profile) -> Profile:
    return make_profile(UserRole.DEVELOPER, full_name="Developer")


# ============================================================================
# Inventory Fixtures
# ============================================================================


@pytest.fixture
def sample_product() -> Product:
    """R: Product with 10 units and a minimum stock of 3."""
    return Product(
        id=uuid4(),
        name="Coffee beans 1kg",
        quantity=10,
        price=12.5,
        minimum_stock=3,
    )


@pytest.fixture
def inventory_repository(sample_product: Product) -> InMemoryInventoryRepository:
    return InMemoryInventoryRepository(products=[sample_product])
