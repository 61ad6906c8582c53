"""
Name: Route Guard Tests

Responsibilities:
  - Verify 401 without a profile, 403 without permission, 200 otherwise
  - Verify require_any_role keeps strict membership
  - Verify the observer choice follows settings
"""

import logging

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient
from inventory_core.crosscutting.error_responses import register_exception_handlers
from inventory_core.identity.access_control import (
    StaticProfileProvider,
    default_observer,
    evaluator_for,
    require_admin,
    require_any_role,
    require_permission,
)
from inventory_core.identity.authorization import (
    LoggingAuthorizationObserver,
    NullAuthorizationObserver,
)
from inventory_core.identity.users import Profile, UserRole

pytestmark = pytest.mark.unit


def _build_app(profile: Profile | None) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.middleware("http")
    async def _fake_session(request: Request, call_next):
        request.state.profile = profile
        return await call_next(request)

    @app.get("/movements")
    def record(p: Profile = Depends(require_permission(UserRole.EMPLOYEE))):
        return {"role": p.role.value}

    @app.get("/admin")
    def admin_only(_: Profile = Depends(require_admin())):
        return {"ok": True}

    @app.get("/employees-only")
    def employees_only(_: Profile = Depends(require_any_role(UserRole.EMPLOYEE))):
        return {"ok": True}

    return app


def test_guard_rejects_missing_profile_with_401():
    client = TestClient(_build_app(None))

    response = client.get("/movements")

    assert response.status_code == 401
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["code"] == "UNAUTHORIZED"


def test_employee_can_record_but_not_admin(employee_profile):
    client = TestClient(_build_app(employee_profile))

    assert client.get("/movements").json() == {"role": "employee"}

    response = client.get("/admin")
    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


def test_admin_passes_permission_guards(admin_profile):
    client = TestClient(_build_app(admin_profile))

    assert client.get("/movements").status_code == 200
    assert client.get("/admin").status_code == 200


def test_any_role_guard_does_not_escalate_admin(admin_profile, employee_profile):
    assert TestClient(_build_app(admin_profile)).get("/employees-only").status_code == 403
    assert (
        TestClient(_build_app(employee_profile)).get("/employees-only").status_code
        == 200
    )


def test_developer_is_forbidden(developer_profile):
    client = TestClient(_build_app(developer_profile))
    assert client.get("/movements").status_code == 403


def test_default_observer_follows_settings(monkeypatch):
    from inventory_core.crosscutting.config import get_settings

    assert isinstance(default_observer(), NullAuthorizationObserver)

    monkeypatch.setenv("AUTHZ_DECISION_LOGGING", "true")
    get_settings.cache_clear()

    assert isinstance(default_observer(), LoggingAuthorizationObserver)


def test_decision_logging_is_visible_at_default_log_level(
    monkeypatch, caplog, employee_profile
):
    from inventory_core.crosscutting.config import get_settings
    from inventory_core.crosscutting.logger import logger

    monkeypatch.setenv("AUTHZ_DECISION_LOGGING", "true")
    get_settings.cache_clear()

    assert get_settings().log_level == "INFO"
    assert logger.getEffectiveLevel() == logging.INFO

    evaluator_for(StaticProfileProvider(employee_profile)).has_permission(
        UserRole.EMPLOYEE
    )

    records = [r for r in caplog.records if r.name == logger.name]
    assert [r.getMessage() for r in records] == ["Decisión de autorización"]
    assert records[0].levelno == logging.INFO
    assert records[0].check == "has_permission"
    assert records[0].granted is True


def test_evaluator_for_static_provider(employee_profile):
    authz = evaluator_for(StaticProfileProvider(employee_profile))

    assert authz.profile is employee_profile
    assert authz.has_permission(UserRole.EMPLOYEE) is True
    assert evaluator_for(StaticProfileProvider()).has_permission("employee") is False
