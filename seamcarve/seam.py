"""
Seam computation algorithms.

A vertical seam is found in two passes:
1. Cumulative energy: bottom-up dynamic programming over the energy map,
   recording for every pixel which of the three pixels below continues
   its cheapest path to the bottom edge.
2. Extraction: start at the cheapest pixel of the top row and follow the
   recorded directions down.
"""

from typing import Tuple

import torch

from .errors import InvalidDimensions, ShapeMismatch

CUMULATIVE_DTYPE = torch.int64
DIRECTION_DTYPE = torch.int8

LEFT, STRAIGHT, RIGHT = -1, 0, 1


def _check_grid(grid: torch.Tensor, name: str) -> Tuple[int, int]:
    if grid.dim() != 2:
        raise ShapeMismatch(f"{name} must be (H, W), got shape {tuple(grid.shape)}")
    H, W = grid.shape
    if H < 1 or W < 1:
        raise InvalidDimensions(f"{name} must be non-empty, got shape {tuple(grid.shape)}")
    return H, W


def cumulative_energy(energy: torch.Tensor) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Build the cumulative energy and direction maps for vertical seams.

    cumulative[i, j] is the smallest total energy of any path from (i, j)
    to the bottom row that moves one row down and at most one column
    sideways per step. directions[i, j] is the step (-1, 0 or 1) taken
    from (i, j) along that path; it is 0 on the bottom row.

    Candidates past the left/right edge are clamped onto the center
    column. The center candidate wins unless a side is strictly smaller,
    and left is tested before right.

    Args:
        energy: Energy map (H, W)

    Returns:
        (cumulative, directions), both (H, W)
    """
    H, W = _check_grid(energy, 'energy')
    device = energy.device

    # Integer maps accumulate in int64; float maps keep their own precision
    dtype = energy.dtype if energy.dtype.is_floating_point else CUMULATIVE_DTYPE
    cumulative = torch.zeros((H, W), dtype=dtype, device=device)
    directions = torch.zeros((H, W), dtype=DIRECTION_DTYPE, device=device)

    energy = energy.to(dtype)
    cumulative[H - 1] = energy[H - 1]

    cols = torch.arange(W, device=device)
    left_idx = (cols - 1).clamp(min=0)
    right_idx = (cols + 1).clamp(max=W - 1)

    for i in range(H - 2, -1, -1):
        below = cumulative[i + 1]
        left = below[left_idx]
        right = below[right_idx]

        best = below.clone()
        step = torch.zeros(W, dtype=DIRECTION_DTYPE, device=device)

        take_left = left < best
        best = torch.where(take_left, left, best)
        step[take_left] = LEFT

        take_right = right < best
        best = torch.where(take_right, right, best)
        step[take_right] = RIGHT

        cumulative[i] = energy[i] + best
        directions[i] = step

    return cumulative, directions


def find_seam(cumulative: torch.Tensor, directions: torch.Tensor) -> torch.Tensor:
    """
    Extract the minimal vertical seam from precomputed DP maps.

    The seam starts at the lowest-index minimum of the top row of
    ``cumulative``; each following row steps by the direction stored at
    the previous column in that row: seam[i] = seam[i-1] + directions[i, seam[i-1]],
    clamped to the grid.

    Args:
        cumulative: Cumulative energy map (H, W)
        directions: Direction map (H, W) from cumulative_energy

    Returns:
        Seam indices (H,) with column index per row
    """
    H, W = _check_grid(cumulative, 'cumulative')
    if directions.shape != cumulative.shape:
        raise ShapeMismatch(
            f"directions {tuple(directions.shape)} do not match "
            f"cumulative {tuple(cumulative.shape)}")

    seam = torch.zeros(H, dtype=torch.long, device=cumulative.device)
    # argmin is not guaranteed to return the first minimum on every backend
    top = cumulative[0]
    col = int(torch.nonzero(top == top.min())[0].item())
    seam[0] = col

    dirs = directions.tolist()
    for i in range(1, H):
        col = min(max(col + dirs[i][col], 0), W - 1)
        seam[i] = col

    return seam


def compute_seam(energy: torch.Tensor) -> torch.Tensor:
    """Minimal-energy vertical seam of an energy map (H, W)."""
    cumulative, directions = cumulative_energy(energy)
    return find_seam(cumulative, directions)


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy of the pixels a vertical seam passes through."""
    H, _ = _check_grid(energy, 'energy')
    if seam.shape != (H,):
        raise ShapeMismatch(f"Seam of shape {tuple(seam.shape)} does not fit {H} rows")
    rows = torch.arange(H, device=energy.device)
    return energy[rows, seam.to(energy.device)].sum().item()


def remove_seam(image: torch.Tensor, seam: torch.Tensor) -> torch.Tensor:
    """
    Remove a vertical seam from an image or grid.

    Pixels are only relocated, never recomputed, so the same seam can be
    applied to an image and to its energy map to keep them aligned.

    Args:
        image: Image tensor (C, H, W) or grid (H, W)
        seam: Seam indices (H,)

    Returns:
        Carved tensor with one column removed from every row
    """
    if image.dim() == 2:
        # Single-channel grid
        image = image.unsqueeze(0)
        squeeze_output = True
    elif image.dim() == 3:
        squeeze_output = False
    else:
        raise ShapeMismatch(f"Expected (C, H, W) or (H, W), got shape {tuple(image.shape)}")

    C, H, W = image.shape
    if H < 1 or W < 1:
        raise InvalidDimensions(f"Cannot remove a seam from shape {tuple(image.shape)}")
    if seam.dim() != 1 or seam.shape[0] != H:
        raise ShapeMismatch(f"Seam of shape {tuple(seam.shape)} does not fit {H} rows")

    seam = seam.to(device=image.device, dtype=torch.long)
    if (seam < 0).any() or (seam >= W).any():
        raise ShapeMismatch(f"Seam leaves the valid column range [0, {W - 1}]")

    keep = torch.ones((H, W), dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam] = False

    carved = image[:, keep].reshape(C, H, W - 1)

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
