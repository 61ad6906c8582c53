"""
===============================================================================
TARJETA CRC — identity/users.py
===============================================================================

Módulo:
    Modelos de Identidad (rol + perfil)

Responsabilidades:
    - Definir el enum de roles de usuario para autorización.
    - Definir el dataclass Profile (actor autenticado) que entrega el proveedor
      de sesión externo.
    - Mantener el contrato de datos de identidad centralizado y estable.

Colaboradores:
    - identity/authorization.py: lee Profile.role para decidir permisos.
    - identity/access_control.py: lee Profile desde request.state.

Notas:
    - Este módulo NO contiene lógica de negocio: solo "shapes" de datos.
    - DEVELOPER es un rol reconocido pero sin privilegios propios: ninguna regla
      de autorización lo trata de forma especial.
    - Si agregás nuevos roles, revisá AuthorizationEvaluator y los guards.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """Roles soportados para autorización."""

    ADMIN = "admin"
    EMPLOYEE = "employee"
    DEVELOPER = "developer"


@dataclass(frozen=True, slots=True)
class Profile:
    """Actor autenticado. Lo crea/destruye el proveedor de sesión; acá es de solo lectura."""

    id: UUID
    full_name: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    is_master: bool = False
