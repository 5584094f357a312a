"""Individual domain specific exceptions."""


class IndividualError(Exception):
    """Base class for tree and individual errors."""


class TreeNotFoundError(IndividualError):
    """Raised when no tree exists with the requested name."""


class IndividualNotFoundError(IndividualError):
    """Raised when the individual does not exist or cannot be seen."""


class IndividualAccessDeniedError(IndividualError):
    """Raised when the current account may not view or edit the individual."""
