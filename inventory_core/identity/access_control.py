"""
===============================================================================
TARJETA CRC — identity/access_control.py
===============================================================================

Módulo:
    Route guards (FastAPI) sobre el contrato de autorización

Responsabilidades:
    - Leer el Profile que dejó el proveedor de sesión en request.state.profile.
    - Construir un AuthorizationEvaluator por request (observer según settings).
    - Exponer dependencias FastAPI:
        - require_permission(role)   -> usa has_permission (admin escala)
        - require_any_role(*roles)   -> usa has_any_role (membresía estricta)
        - require_admin()

Colaboradores:
    - identity.authorization: AuthorizationEvaluator + observers.
    - identity.users: Profile / UserRole.
    - crosscutting.config: authz_decision_logging.
    - crosscutting.error_responses: unauthorized/forbidden estándar.

Notas:
    - La autenticación (quién pone el Profile en request.state) es externa.
    - Sin profile => 401; con profile sin permiso => 403.
===============================================================================
"""

from __future__ import annotations

from typing import Callable, Protocol

from fastapi import Request

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import forbidden, unauthorized
from .authorization import (
    AuthorizationEvaluator,
    AuthorizationObserver,
    LoggingAuthorizationObserver,
    NullAuthorizationObserver,
    RoleLike,
)
from .users import Profile, UserRole


class ProfileProvider(Protocol):
    """Proveedor de sesión: entrega el Profile actual (o None) de forma síncrona."""

    def get_current_profile(self) -> Profile | None: ...


class StaticProfileProvider:
    """Provider fijo (tests / scripts / CLI)."""

    def __init__(self, profile: Profile | None = None) -> None:
        self._profile = profile

    def get_current_profile(self) -> Profile | None:
        return self._profile


def default_observer() -> AuthorizationObserver:
    """Observer según settings: logging si authz_decision_logging, sino no-op."""
    if get_settings().authz_decision_logging:
        return LoggingAuthorizationObserver()
    return NullAuthorizationObserver()


def evaluator_for(
    provider: ProfileProvider, observer: AuthorizationObserver | None = None
) -> AuthorizationEvaluator:
    """Snapshot del profile actual en un evaluator nuevo."""
    return AuthorizationEvaluator(
        provider.get_current_profile(), observer or default_observer()
    )


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------


def get_current_profile(request: Request) -> Profile | None:
    """Profile puesto por el proveedor de sesión (o None)."""
    profile = getattr(request.state, "profile", None)
    return profile if isinstance(profile, Profile) else None


def get_authorization(request: Request) -> AuthorizationEvaluator:
    """Dependency FastAPI: evaluator para el actor del request."""
    return AuthorizationEvaluator(get_current_profile(request), default_observer())


def require_permission(role: RoleLike) -> Callable:
    """Dependency FastAPI: requiere has_permission(role) (admin satisface todo)."""

    async def dependency(request: Request) -> Profile:
        authz = get_authorization(request)
        if authz.profile is None:
            raise unauthorized("Se requiere una sesión activa.")
        if not authz.has_permission(role):
            raise forbidden("Rol insuficiente.")
        return authz.profile

    return dependency


def require_any_role(*roles: RoleLike) -> Callable:
    """Dependency FastAPI: requiere uno de los roles (sin escalamiento de admin)."""
    allowed = tuple(roles)

    async def dependency(request: Request) -> Profile:
        authz = get_authorization(request)
        if authz.profile is None:
            raise unauthorized("Se requiere una sesión activa.")
        if not authz.has_any_role(allowed):
            raise forbidden("Rol insuficiente.")
        return authz.profile

    return dependency


def require_admin() -> Callable:
    return require_permission(UserRole.ADMIN)
