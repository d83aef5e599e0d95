"""
Diagnostic views of the intermediate seam carving state.

These turn energy, cumulative energy and direction maps into displayable
uint8 tensors, and paint seams onto images or grids.
"""

import torch

from .errors import ShapeMismatch

# Direction map colors: left, straight, right
DIRECTION_COLORS = {
    -1: (255, 0, 0),
    0: (0, 255, 0),
    1: (0, 0, 255),
}


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to the [0, 1] range.

    This is a monotonic transform so seam positions are unchanged.

    Args:
        energy: Energy or cumulative energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized float32 map in [0, 1]
    """
    energy = energy.to(torch.float32)
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)


def energy_heatmap(energy: torch.Tensor) -> torch.Tensor:
    """Scale any energy-like map (H, W) to an 8-bit grayscale image."""
    return torch.round(normalize_energy(energy) * 255).to(torch.uint8)


def direction_map(directions: torch.Tensor) -> torch.Tensor:
    """Color a direction map (H, W) as an RGB image (3, H, W)."""
    H, W = directions.shape
    colored = torch.zeros((3, H, W), dtype=torch.uint8, device=directions.device)
    for step, rgb in DIRECTION_COLORS.items():
        mask = directions == step
        for c in range(3):
            colored[c][mask] = rgb[c]
    return colored


def overlay_seam(image: torch.Tensor, seam: torch.Tensor, value=255) -> torch.Tensor:
    """
    Paint a vertical seam onto a copy of an image or grid.

    Args:
        image: Image tensor (C, H, W) or grid (H, W)
        seam: Seam indices (H,)
        value: Scalar for every channel, or one value per channel

    Returns:
        Copy of ``image`` with the seam pixels set to ``value``
    """
    H = image.shape[-2]
    if seam.shape != (H,):
        raise ShapeMismatch(f"Seam of shape {tuple(seam.shape)} does not fit {H} rows")

    painted = image.clone()
    rows = torch.arange(H, device=image.device)
    cols = seam.to(device=image.device, dtype=torch.long)

    if painted.dim() == 2:
        painted[rows, cols] = value
    else:
        fill = torch.as_tensor(value, dtype=painted.dtype, device=painted.device)
        if fill.dim() == 0:
            painted[:, rows, cols] = fill
        else:
            painted[:, rows, cols] = fill.view(-1, 1)
    return painted
