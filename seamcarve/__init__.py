"""
Content-aware image narrowing by vertical seam carving.

Based on "Seam Carving for Content-Aware Image Resizing"
by Avidan & Shamir, 2007.
"""

__version__ = "0.1.0"

from .errors import SeamCarvingError, InvalidDimensions, ShapeMismatch
from .energy import gradient_magnitude_energy, compute_energy, luminance
from .seam import cumulative_energy, find_seam, compute_seam, seam_energy, remove_seam
from .carving import (
    STRATEGIES,
    CarveStep,
    carve,
    iter_carve,
    carve_image_exact,
    carve_image_shared,
    carve_image_balanced,
)
from .visualize import normalize_energy, energy_heatmap, direction_map, overlay_seam

__all__ = [
    'SeamCarvingError',
    'InvalidDimensions',
    'ShapeMismatch',
    'gradient_magnitude_energy',
    'compute_energy',
    'luminance',
    'cumulative_energy',
    'find_seam',
    'compute_seam',
    'seam_energy',
    'remove_seam',
    'STRATEGIES',
    'CarveStep',
    'carve',
    'iter_carve',
    'carve_image_exact',
    'carve_image_shared',
    'carve_image_balanced',
    'normalize_energy',
    'energy_heatmap',
    'direction_map',
    'overlay_seam',
]
