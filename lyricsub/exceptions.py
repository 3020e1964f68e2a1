"""Custom Exceptions for the LyricSub application."""

class LyricSubError(Exception):
    """Base class for exceptions in this module."""
    pass

class ConfigurationError(LyricSubError):
    """Exception raised for errors in configuration loading."""
    pass

class FetchError(LyricSubError):
    """Exception raised when the lyrics service request fails."""
    pass

class AuthenticationError(FetchError):
    """Exception raised when the lyrics service rejects the bearer token (HTTP 401)."""
    pass

class FormattingError(LyricSubError):
    """Exception raised for errors during subtitle formatting."""
    pass

class FileSystemError(LyricSubError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass
