"""Pydantic schemas used across the project."""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)


class AccountLoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account_id: str
    username: str
    role: str


class TokenData(BaseModel):
    account_id: str
    username: str
    role: str


class CustomModuleResponse(BaseModel):
    name: str
    title: str
    description: str = ""
    author_name: str = ""
    version: str = ""
    latest_version_url: str = ""
    support_url: str = ""


class CustomModuleListResponse(BaseModel):
    total: int
    modules: list[CustomModuleResponse]
