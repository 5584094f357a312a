"""Pages for editing family trees."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from genealogy.core.i18n import Translator
from genealogy.core.security import get_optional_account
from genealogy.core.urls import RequestUrlBuilder
from genealogy.interfaces.http.deps import get_individual_factory, get_module_registry, get_translator, get_url_builder
from genealogy.interfaces.http.templating import templates
from genealogy.modules.accounts import Account
from genealogy.modules.custom import ModuleRegistry
from genealogy.modules.individuals import (
    IndividualAccessDeniedError,
    IndividualFactory,
    IndividualNotFoundError,
    TreeNotFoundError,
    check_individual_access,
)

router = APIRouter()


@router.get(
    "/tree/{tree}/add-child-to-individual",
    response_class=HTMLResponse,
    name="add-child-to-individual",
    summary="Add a new child to an individual, creating a one-parent family",
)
async def add_child_to_individual_page(
    request: Request,
    tree: str,
    xref: str,
    factory: IndividualFactory = Depends(get_individual_factory),
    account: Optional[Account] = Depends(get_optional_account),
    translator: Translator = Depends(get_translator),
    registry: ModuleRegistry = Depends(get_module_registry),
    url_builder: RequestUrlBuilder = Depends(get_url_builder),
):
    try:
        family_tree = await factory.tree(tree)
        individual = await factory.make(xref, family_tree)
        individual = check_individual_access(individual, account, edit=True)
    except (TreeNotFoundError, IndividualNotFoundError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except IndividualAccessDeniedError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied") from exc

    title = f"{individual.full_name} - {translator.translate('Add a child to create a one-parent family')}"

    return templates.TemplateResponse(
        request,
        "edit/new-individual.html",
        {
            "next_action": "add-child-to-individual-action",
            "tree": family_tree,
            "title": title,
            "individual": individual,
            "family": None,
            "name_fact": None,
            "famtag": "CHIL",
            "gender": "U",
            "stylesheets": registry.stylesheet_urls(url_builder),
        },
    )
