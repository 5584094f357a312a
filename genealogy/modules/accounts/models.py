"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

ROLES = ("member", "editor", "manager", "admin", "super_admin")
EDITOR_ROLES = frozenset({"editor", "manager", "admin", "super_admin"})
MANAGER_ROLES = frozenset({"manager", "admin", "super_admin"})


@dataclass(slots=True)
class Account:
    id: str
    username: str
    role: str
    is_active: bool
    password_hash: str = field(repr=False)
    real_name: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    def is_editor(self) -> bool:
        return self.role in EDITOR_ROLES

    def is_manager(self) -> bool:
        return self.role in MANAGER_ROLES

    def is_admin(self) -> bool:
        return self.role in {"admin", "super_admin"}


@dataclass(slots=True)
class AccountCreateInput:
    username: str
    password: str
    role: str = "member"
    real_name: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
