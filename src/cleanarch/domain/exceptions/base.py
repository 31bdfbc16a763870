"""Base exceptions for cleanarch domain."""


class CleanArchError(Exception):
    """Root exception for all cleanarch errors.

    All domain exceptions inherit from this.
    Allows catching all cleanarch-specific errors.
    """
