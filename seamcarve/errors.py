"""
Exceptions raised by the seam carving core.

All of them are ``ValueError`` subclasses: they signal bad input or a
broken contract between stages, never a transient condition.
"""


class SeamCarvingError(ValueError):
    """Base class for seam carving errors."""


class InvalidDimensions(SeamCarvingError):
    """An image or grid is empty, or the requested target width is out of range."""


class ShapeMismatch(SeamCarvingError):
    """Two grids that must stay aligned (image, energy, seam) disagree in shape."""
