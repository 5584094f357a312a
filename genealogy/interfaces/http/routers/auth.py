"""Authentication endpoints used by web clients."""
from fastapi import APIRouter, Depends, HTTPException, status

from genealogy.core.security import create_access_token
from genealogy.interfaces.http.deps import get_account_service
from genealogy.modules.accounts import AccountNotFoundError, AccountService
from genealogy.schemas import AccountLoginResponse, LoginRequest

router = APIRouter()


@router.post("/login", response_model=AccountLoginResponse, summary="Sign in and obtain an access token")
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
) -> AccountLoginResponse:
    account = await account_service.authenticate(payload.username, payload.password)
    if not account:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password")

    try:
        await account_service.set_last_login(account.id)
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password") from exc

    access_token = create_access_token(account.id, account.username, account.role)
    return AccountLoginResponse(
        access_token=access_token,
        account_id=account.id,
        username=account.username,
        role=account.role,
    )
