"""randid exceptions."""


class RandidError(Exception):
    """Base exception for randid errors."""
    pass


class InvalidLengthError(RandidError, ValueError):
    """Raised when a requested identifier length is not a usable integer."""
    pass


class InvalidPrefixError(RandidError, ValueError):
    """Raised when an identifier prefix is empty or not web-safe."""
    pass


class ConfigError(RandidError, ValueError):
    """Raised when generator configuration is invalid."""
    pass
