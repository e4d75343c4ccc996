"""Base exceptions for moenster domain."""


class MoensterError(Exception):
    """Root exception for all moenster errors.

    All domain exceptions inherit from this.
    Allows catching all moenster-specific errors.
    """
