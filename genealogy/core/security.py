"""JWT helpers and current-account dependencies."""
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from genealogy.core.config import get_settings
from genealogy.interfaces.http.deps.account import get_account_service
from genealogy.modules.accounts import Account, AccountService
from genealogy.schemas import TokenData

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def create_access_token(account_id: str, username: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": account_id,
        "username": username,
        "role": role,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc

    account_id = payload.get("sub")
    username = payload.get("username")
    role = payload.get("role")
    if not all([account_id, username, role]):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials")
    return TokenData(account_id=account_id, username=username, role=role)


async def _load_account(token: str, service: AccountService) -> Account:
    token_data = decode_access_token(token)
    account = await service.get_by_id(token_data.account_id)
    if account is None or not account.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Account does not exist or is disabled")
    return account


async def get_current_account(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    service: AccountService = Depends(get_account_service),
) -> Account:
    return await _load_account(credentials.credentials, service)


async def get_optional_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
    service: AccountService = Depends(get_account_service),
) -> Optional[Account]:
    """The signed-in account, or ``None`` for visitors."""
    if credentials is None:
        return None
    return await _load_account(credentials.credentials, service)


async def get_current_admin(account: Account = Depends(get_current_account)) -> Account:
    if not account.is_admin():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Administrator access required")
    return account
