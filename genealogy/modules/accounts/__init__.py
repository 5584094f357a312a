"""Account domain services and models."""

from .models import Account, AccountCreateInput, EDITOR_ROLES, MANAGER_ROLES, ROLES
from .service import AccountService
from .exceptions import (
    AccountError,
    AccountNotFoundError,
    UnknownRoleError,
    UsernameTakenError,
)

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountService",
    "AccountError",
    "AccountNotFoundError",
    "UnknownRoleError",
    "UsernameTakenError",
    "EDITOR_ROLES",
    "MANAGER_ROLES",
    "ROLES",
]
