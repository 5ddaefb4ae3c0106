class ConfigurationError(Exception):
    """Raised for missing or invalid check configuration."""


class ApiError(Exception):
    """Raised when a pull request host request fails."""
