"""Typed exceptions for argv."""


class ArgvError(Exception):
    """Base exception for argv failures."""


class InvalidArgumentsError(ArgvError):
    """Raised when the argument list is not a sequence of strings."""
