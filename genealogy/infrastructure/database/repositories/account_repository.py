"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from genealogy.infrastructure.database.models import Account as AccountModel
from genealogy.modules.accounts.exceptions import AccountNotFoundError
from genealogy.modules.accounts.models import Account


class SqlAccountRepository:
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, account_id: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self._session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_account(
        self,
        *,
        username: str,
        password_hash: str,
        role: str,
        real_name: str | None,
        email: str | None,
        is_active: bool,
    ) -> Account:
        model = AccountModel(
            username=username,
            password_hash=password_hash,
            role=role,
            real_name=real_name,
            email=email,
            is_active=is_active,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        account = self._to_domain(model)
        assert account is not None
        return account

    async def set_last_login(self, account_id: str, timestamp: datetime) -> None:
        stmt = update(AccountModel).where(AccountModel.id == account_id).values(last_login_at=timestamp)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFoundError(account_id)

    async def set_password_hash(self, account_id: str, password_hash: str) -> None:
        stmt = update(AccountModel).where(AccountModel.id == account_id).values(password_hash=password_hash)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise AccountNotFoundError(account_id)

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            username=model.username,
            role=model.role,
            is_active=bool(model.is_active),
            password_hash=model.password_hash,
            real_name=model.real_name,
            email=model.email,
            created_at=model.created_at,
            last_login_at=model.last_login_at,
        )
