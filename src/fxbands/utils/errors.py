"""Custom exception classes for fx-bands."""


class FxBandsError(Exception):
    """Base exception for all fx-bands errors."""
    pass


class ConfigurationError(FxBandsError):
    """Raised when there's a configuration error."""
    pass


class DataProviderError(FxBandsError):
    """Base exception for rate-history provider errors."""
    pass


class RateLimitError(DataProviderError):
    """Raised when API rate limit is exceeded."""
    pass


class DataNotFoundError(DataProviderError):
    """Raised when requested data is not available."""
    pass


class ValidationError(FxBandsError):
    """Raised when input or band definitions fail validation."""
    pass
