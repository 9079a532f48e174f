"""Errors raised while validating allocation inputs."""


class AllocationError(ValueError):
    """Base class for invalid allocation input."""


class InvalidDemand(AllocationError):
    pass


class InvalidPackSize(AllocationError):
    pass


class UnorderedCatalog(AllocationError):
    """Pack sizes handed to the allocator are not strictly descending."""


class EmptyCatalog(AllocationError):
    """Positive demand against a catalog with no pack sizes."""
