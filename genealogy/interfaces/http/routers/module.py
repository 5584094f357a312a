"""Dispatch of ``/module`` requests to custom module actions."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from genealogy.interfaces.http.deps import get_module_registry
from genealogy.modules.custom import (
    AssetAccessDeniedError,
    AssetNotFoundError,
    AssetResponse,
    CustomModuleNotFoundError,
    ModuleActionNotFoundError,
    ModuleRegistry,
    resolve_action,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(result: object) -> Response:
    if isinstance(result, AssetResponse):
        return Response(content=result.body, status_code=result.status, headers=result.headers)
    if isinstance(result, Response):
        return result
    raise TypeError(f"Unsupported module action result: {type(result).__name__}")


@router.api_route("/module", methods=["GET", "POST"], name="module", summary="Run a custom module action")
def module_action(
    request: Request,
    module: str,
    action: str,
    registry: ModuleRegistry = Depends(get_module_registry),
) -> Response:
    # Sync endpoint: module actions read files, so they run in the threadpool.
    try:
        handler = resolve_action(registry.get(module), request.method, action)
    except (CustomModuleNotFoundError, ModuleActionNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found") from exc

    try:
        result = handler(request.query_params)
    except AssetAccessDeniedError as exc:
        logger.warning("Rejected asset path for module %s: %s", module, exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied") from exc
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found") from exc

    return _to_response(result)
