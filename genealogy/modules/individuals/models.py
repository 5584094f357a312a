"""Domain models for family trees and the individuals in them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from genealogy.modules.accounts.models import EDITOR_ROLES, MANAGER_ROLES, Account


@dataclass(slots=True)
class Tree:
    id: int
    name: str
    title: str


@dataclass(slots=True)
class Individual:
    id: int
    tree_id: int
    xref: str
    full_name: str
    sex: str = "U"
    is_private: bool = False
    is_locked: bool = False

    def can_show(self, account: Optional[Account]) -> bool:
        if not self.is_private:
            return True
        return account is not None and account.is_active

    def can_edit(self, account: Optional[Account]) -> bool:
        if account is None or not account.is_active:
            return False
        # Locked records can only be changed by managers.
        allowed = MANAGER_ROLES if self.is_locked else EDITOR_ROLES
        return account.role in allowed and self.can_show(account)
