"""Errors raised while managing accounts and signing in."""


class AccountError(Exception):
    """Base class for account errors."""


class UsernameTakenError(AccountError):
    """Another account already uses the requested username."""


class UnknownRoleError(AccountError):
    """The requested role is not one of ``ROLES``."""


class AccountNotFoundError(AccountError):
    """The account was deleted while it was being updated."""
