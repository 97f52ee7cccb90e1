"""Custom exceptions for the faultmesh package."""


class FaultMeshError(Exception):
    """Base exception for faultmesh package."""

    pass


class InvalidDomain(FaultMeshError):
    """Grid domain or subdivision count is unusable."""

    pass


class MeshGenerationError(FaultMeshError):
    """Terrain mesh generation failed."""

    pass


class SamplingError(FaultMeshError):
    """Elevation sampling failed."""

    pass


class DataLoadError(FaultMeshError):
    """Failed to load data from file."""

    pass
