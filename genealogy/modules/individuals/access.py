"""Access checks applied before showing or editing an individual."""

from __future__ import annotations

from typing import Optional

from genealogy.modules.accounts.models import Account

from .exceptions import IndividualAccessDeniedError, IndividualNotFoundError
from .models import Individual


def check_individual_access(
    individual: Optional[Individual],
    account: Optional[Account],
    edit: bool = False,
) -> Individual:
    """Return the individual if ``account`` may see it (and edit it, when asked)."""
    if individual is None:
        raise IndividualNotFoundError("This individual does not exist or you do not have permission to view it.")

    if not individual.can_show(account):
        raise IndividualAccessDeniedError(individual.xref)

    if edit and not individual.can_edit(account):
        raise IndividualAccessDeniedError(individual.xref)

    return individual


__all__ = ["check_individual_access"]
