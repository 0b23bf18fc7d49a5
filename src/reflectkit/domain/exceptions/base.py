"""Base exceptions for reflectkit domain."""


class ReflectKitError(Exception):
    """Root exception for all reflectkit errors.

    All domain exceptions inherit from this.
    Allows catching all reflectkit-specific errors.
    """
