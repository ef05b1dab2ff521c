"""Base exceptions for catalogfilter domain."""


class CatalogFilterError(Exception):
    """Root exception for all catalogfilter errors.

    All domain exceptions inherit from this.
    Allows catching all catalogfilter-specific errors.
    """
