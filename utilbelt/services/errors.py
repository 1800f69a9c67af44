"""Custom exceptions for service layer operations."""


class JSONParseError(Exception):
    """Raised when an aggregated body is not valid JSON."""


class ConfigError(Exception):
    """Raised when the YAML configuration file cannot be loaded."""
