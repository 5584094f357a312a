"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .account import get_account_service
from .modules import get_individual_factory, get_module_registry, get_translator, get_url_builder

__all__ = [
    "get_db_session",
    "get_account_service",
    "get_individual_factory",
    "get_module_registry",
    "get_translator",
    "get_url_builder",
]
