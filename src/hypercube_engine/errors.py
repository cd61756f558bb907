from __future__ import annotations


class HypercubeError(Exception):
    """Base class for errors raised at the engine boundary."""


class InvalidDimension(HypercubeError, ValueError):
    """Requested dimensionality cannot form a rotation triple (needs >= 3)."""


class MalformedRotation(HypercubeError, ValueError):
    """Rotation axes out of range, not pairwise distinct, or side not in {0, 2}."""
