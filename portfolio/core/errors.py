"""Exception types raised inside the portfolio application."""


class PortfolioError(Exception):
    """Base class for portfolio errors."""


class StorageError(PortfolioError):
    """Preference storage could not be read or written."""

    def __init__(self, message: str, path: object | None = None):
        super().__init__(message)
        self.path = path


class ContentError(PortfolioError):
    """Portfolio content file could not be loaded."""
