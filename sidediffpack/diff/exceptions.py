"""Diff subsystem exceptions."""


class DiffError(Exception):
    """Base class for diff errors."""


class DiffLimitsError(DiffError):
    """Invalid size-limit configuration."""


class DiffInputTooLargeError(DiffError):
    """Inputs exceed the caller's configured size limits."""


class DiffInputError(DiffError):
    """Diff input could not be read."""
