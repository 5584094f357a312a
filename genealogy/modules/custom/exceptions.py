"""Custom module specific exceptions."""


class CustomModuleError(Exception):
    """Base class for custom module errors."""


class CustomModuleNotFoundError(CustomModuleError):
    """Raised when no module is registered under the requested name."""


class ModuleActionNotFoundError(CustomModuleError):
    """Raised when a module does not provide the requested action."""


class AssetError(CustomModuleError):
    """Base class for errors raised while serving module assets."""


class AssetAccessDeniedError(AssetError):
    """Raised when an asset path tries to reach a parent folder."""


class AssetNotFoundError(AssetError):
    """Raised when the requested asset file does not exist."""
