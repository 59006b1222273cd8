"""
Configuration error type.
"""


class ConfigurationError(ValueError):
    """Raised when a trial configuration is malformed."""
