"""Tree and individual lookup with access control."""

from .models import Individual, Tree
from .exceptions import (
    IndividualAccessDeniedError,
    IndividualError,
    IndividualNotFoundError,
    TreeNotFoundError,
)
from .access import check_individual_access
from .service import IndividualFactory

__all__ = [
    "Individual",
    "IndividualAccessDeniedError",
    "IndividualError",
    "IndividualFactory",
    "IndividualNotFoundError",
    "Tree",
    "TreeNotFoundError",
    "check_individual_access",
]
