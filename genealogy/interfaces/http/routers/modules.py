"""Control panel endpoints for installed custom modules."""

from fastapi import APIRouter, Depends

from genealogy.core.security import get_current_admin
from genealogy.interfaces.http.deps import get_module_registry
from genealogy.modules.accounts import Account
from genealogy.modules.custom import CustomModule, ModuleRegistry
from genealogy.schemas import CustomModuleListResponse, CustomModuleResponse

router = APIRouter()


def _to_schema(module: CustomModule) -> CustomModuleResponse:
    return CustomModuleResponse(
        name=module.name,
        title=module.title(),
        description=module.description(),
        author_name=module.custom_module_author_name(),
        version=module.custom_module_version(),
        latest_version_url=module.custom_module_latest_version_url(),
        support_url=module.custom_module_support_url(),
    )


@router.get("/", response_model=CustomModuleListResponse, summary="List installed custom modules")
async def list_modules(
    registry: ModuleRegistry = Depends(get_module_registry),
    _admin: Account = Depends(get_current_admin),
):
    modules = registry.modules()
    return CustomModuleListResponse(
        total=len(modules),
        modules=[_to_schema(module) for module in modules],
    )
