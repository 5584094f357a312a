"""Repository protocol for trees and individuals."""

from __future__ import annotations

from typing import Protocol

from .models import Individual, Tree


class IndividualRepository(Protocol):
    async def get_tree_by_name(self, name: str) -> Tree | None:
        ...

    async def get_individual(self, tree_id: int, xref: str) -> Individual | None:
        ...
