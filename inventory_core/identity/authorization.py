"""
===============================================================================
TARJETA CRC — identity/authorization.py
===============================================================================

Módulo:
    Evaluador de Autorización por Rol (AuthorizationEvaluator)

Responsabilidades:
    - Responder preguntas booleanas sobre el Profile actual (o su ausencia):
        * has_permission(required_role)
        * is_admin() / is_developer()
        * has_any_role(roles)
    - Exponer user_role (rol actual o None).
    - Reportar cada decisión a un observer inyectable (no-op por defecto).

Colaboradores:
    - identity.users: Profile / UserRole.
    - crosscutting.logger: sink del LoggingAuthorizationObserver.
    - identity.access_control: construye un evaluator por request.
    - application.usecases.stock: gatea el registro de movimientos.

Reglas:
    - Sin profile => ningún permiso (no es un error, es un input normal).
    - has_permission: ADMIN satisface cualquier requisito (admin ⊇ employee);
      el resto necesita el rol exacto.
    - has_any_role: membresía estricta, SIN escalamiento de admin.
      La asimetría con has_permission es intencional: hay UI que depende de
      ambos comportamientos. No "arreglar" sin confirmar con producto.
    - DEVELOPER no tiene rama propia: solo pasa cuando se lo pide explícitamente.
    - Nada de esto lanza excepciones; el observer tampoco puede alterar el bool.
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, Union

from ..crosscutting.logger import logger
from .users import Profile, UserRole

RoleLike = Union[UserRole, str]

CHECK_HAS_PERMISSION = "has_permission"
CHECK_IS_ADMIN = "is_admin"
CHECK_IS_DEVELOPER = "is_developer"
CHECK_HAS_ANY_ROLE = "has_any_role"


def coerce_role(value: object) -> UserRole | None:
    """UserRole o su valor string -> UserRole; cualquier otra cosa -> None."""
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(value)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Observers
# ---------------------------------------------------------------------------


class AuthorizationObserver(Protocol):
    """Recibe cada decisión de autorización. Es informativo, nunca decide."""

    def on_decision(
        self,
        *,
        check: str,
        granted: bool,
        role: UserRole | None,
        required: tuple[str, ...],
    ) -> None: ...


class NullAuthorizationObserver:
    """Observer no-op (default)."""

    def on_decision(
        self,
        *,
        check: str,
        granted: bool,
        role: UserRole | None,
        required: tuple[str, ...],
    ) -> None:
        return None


class LoggingAuthorizationObserver:
    """Observer que escribe cada decisión en el logger estructurado."""

    def __init__(
        self, log: logging.Logger | None = None, level: int = logging.INFO
    ) -> None:
        self._log = log or logger
        self._level = level

    def on_decision(
        self,
        *,
        check: str,
        granted: bool,
        role: UserRole | None,
        required: tuple[str, ...],
    ) -> None:
        self._log.log(
            self._level,
            "Decisión de autorización",
            extra={
                "check": check,
                "granted": granted,
                "role": role.value if role else None,
                "required": list(required),
            },
        )


# ---------------------------------------------------------------------------
# Evaluator
# ---------------------------------------------------------------------------


class AuthorizationEvaluator:
    """
    Evaluador puro de permisos para un Profile explícito.

    El profile se inyecta en el constructor (nada de estado global): un
    evaluator por request / interacción.
    """

    def __init__(
        self,
        profile: Profile | None,
        observer: AuthorizationObserver | None = None,
    ) -> None:
        self._profile = profile
        self._observer: AuthorizationObserver = (
            observer or NullAuthorizationObserver()
        )

    @property
    def profile(self) -> Profile | None:
        return self._profile

    @property
    def user_role(self) -> UserRole | None:
        """Rol del profile actual, o None si no hay sesión."""
        if self._profile is None:
            return None
        return coerce_role(self._profile.role)

    def has_permission(self, required_role: RoleLike) -> bool:
        """True si el actor satisface required_role (admin satisface todo)."""
        role = self.user_role
        if self._profile is None:
            granted = False
        elif role == UserRole.ADMIN:
            granted = True
        else:
            granted = role is not None and role == coerce_role(required_role)
        return self._report(CHECK_HAS_PERMISSION, granted, (required_role,))

    def is_admin(self) -> bool:
        granted = self.user_role == UserRole.ADMIN
        return self._report(CHECK_IS_ADMIN, granted, (UserRole.ADMIN,))

    def is_developer(self) -> bool:
        granted = self.user_role == UserRole.DEVELOPER
        return self._report(CHECK_IS_DEVELOPER, granted, (UserRole.DEVELOPER,))

    def has_any_role(self, roles: Iterable[RoleLike]) -> bool:
        """Membresía estricta: admin solo pasa si está en roles."""
        candidates = tuple(roles)
        role = self.user_role
        if role is None:
            granted = False
        else:
            allowed = {coerce_role(r) for r in candidates}
            allowed.discard(None)
            granted = role in allowed
        return self._report(CHECK_HAS_ANY_ROLE, granted, candidates)

    def _report(
        self, check: str, granted: bool, required: tuple[RoleLike, ...]
    ) -> bool:
        try:
            self._observer.on_decision(
                check=check,
                granted=granted,
                role=self.user_role,
                required=tuple(
                    r.value if isinstance(r, UserRole) else str(r) for r in required
                ),
            )
        except Exception:
            # Un observer roto no cambia la decisión.
            logger.warning(
                "Observer de autorización falló",
                exc_info=True,
                extra={"check": check},
            )
        return granted
