"""Lookup of trees and individuals."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import TreeNotFoundError
from .models import Individual, Tree
from .repository import IndividualRepository


class IndividualFactory:
    """Create individual objects from the records in a tree."""

    def __init__(self, repository: IndividualRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "IndividualFactory":
        from genealogy.infrastructure.database.repositories.individual_repository import SqlIndividualRepository

        return cls(SqlIndividualRepository(session))

    async def tree(self, name: str) -> Tree:
        tree = await self._repository.get_tree_by_name(name)
        if tree is None:
            raise TreeNotFoundError(name)
        return tree

    async def make(self, xref: str, tree: Tree) -> Individual | None:
        return await self._repository.get_individual(tree.id, xref)
