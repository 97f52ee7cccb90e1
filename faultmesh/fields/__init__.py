"""Elevation sampling utilities."""

from faultmesh.fields.sampling import ElevationSampler, sample_elevation

__all__ = ["ElevationSampler", "sample_elevation"]
