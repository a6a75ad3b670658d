"""Exception types for memhistory."""


class HistoryError(Exception):
    """Base class for memhistory errors."""


class ConfigurationError(HistoryError):
    """Raised when a history cannot be built or operated as configured."""
