"""Dependencies exposing application-wide services stored on ``app.state``."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from genealogy.core.i18n import Translator
from genealogy.core.urls import RequestUrlBuilder
from genealogy.modules.custom import ModuleRegistry
from genealogy.modules.individuals import IndividualFactory

from .database import get_db_session


def get_module_registry(request: Request) -> ModuleRegistry:
    return request.app.state.modules


def get_translator(request: Request) -> Translator:
    return request.app.state.translator


def get_url_builder(request: Request) -> RequestUrlBuilder:
    return RequestUrlBuilder(request)


def get_individual_factory(db: AsyncSession = Depends(get_db_session)) -> IndividualFactory:
    return IndividualFactory.with_session(db)


__all__ = [
    "get_individual_factory",
    "get_module_registry",
    "get_translator",
    "get_url_builder",
]
