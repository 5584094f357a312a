"""Router assembly for API and page routes."""

from fastapi import APIRouter

from genealogy.interfaces.http.routers import auth, edit, module, modules


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(modules.router, prefix="/modules", tags=["modules"])
    return router


def create_page_router() -> APIRouter:
    router = APIRouter()
    router.include_router(module.router, tags=["modules"])
    router.include_router(edit.router, tags=["edit"])
    return router


__all__ = [
    "create_api_router",
    "create_page_router",
]
