"""SQLAlchemy implementation of the individual repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from genealogy.infrastructure.database.models import Individual as IndividualModel
from genealogy.infrastructure.database.models import Tree as TreeModel
from genealogy.modules.individuals.models import Individual, Tree


class SqlIndividualRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_tree_by_name(self, name: str) -> Tree | None:
        stmt = select(TreeModel).where(TreeModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return Tree(id=model.id, name=model.name, title=model.title)

    async def get_individual(self, tree_id: int, xref: str) -> Individual | None:
        stmt = select(IndividualModel).where(
            IndividualModel.tree_id == tree_id,
            IndividualModel.xref == xref,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: IndividualModel) -> Individual:
        return Individual(
            id=model.id,
            tree_id=model.tree_id,
            xref=model.xref,
            full_name=model.full_name,
            sex=model.sex,
            is_private=bool(model.is_private),
            is_locked=bool(model.is_locked),
        )
