"""Domain services for account management."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from genealogy.core.crypto import hash_password, needs_rehash, verify_password

from .exceptions import UnknownRoleError, UsernameTakenError
from .models import ROLES, Account, AccountCreateInput
from .repository import AccountRepository


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        from genealogy.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def authenticate(self, username: str, password: str) -> Account | None:
        account = await self._repository.get_by_username(username)
        if account is None or not account.is_active:
            return None
        if not verify_password(password, account.password_hash):
            return None
        if needs_rehash(account.password_hash):
            account.password_hash = hash_password(password)
            await self._repository.set_password_hash(account.id, account.password_hash)
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        if payload.role not in ROLES:
            raise UnknownRoleError(payload.role)

        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise UsernameTakenError(payload.username)

        return await self._repository.create_account(
            username=payload.username,
            password_hash=hash_password(payload.password),
            role=payload.role,
            real_name=payload.real_name,
            email=payload.email,
            is_active=payload.is_active,
        )

    async def set_last_login(self, account_id: str) -> None:
        await self._repository.set_last_login(account_id, datetime.now(timezone.utc))
