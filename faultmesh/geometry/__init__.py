"""Domain geometry."""

from faultmesh.geometry.domain import Domain

__all__ = ["Domain"]
