"""Custom exceptions for the domain checker."""


class CheckerError(Exception):
    """Base exception for this project."""


class ConfigError(CheckerError):
    """Raised when runtime configuration is invalid."""


class CredentialError(CheckerError):
    """Raised when the API credential cannot be resolved."""


class WordSourceError(CheckerError):
    """Raised when a word list file cannot be read."""


class ProviderError(CheckerError):
    """Raised when the availability provider returns an unusable response."""
