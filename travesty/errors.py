"""Exceptions raised by the travesty generator."""


class TravestyError(Exception):
    """Base exception for travesty errors."""
    pass


class InvalidParameter(TravestyError):
    """Raised when a generation parameter is out of range."""
    pass


class InsufficientInput(TravestyError):
    """Raised when the normalized corpus is shorter than the pattern length."""
    pass


class NoContinuation(TravestyError):
    """Raised when a pattern has no observed following character."""
    pass
