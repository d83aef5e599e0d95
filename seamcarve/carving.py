"""
High-level carving functions that orchestrate the seam removal loop.

Three strategies trade energy freshness for speed:

- 'exact':    recompute the energy of the narrowed image before every seam.
- 'shared':   compute energy once, then shrink that same map with each seam.
- 'balanced': recompute every ``period`` seams, shrink the map in between.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

import torch

from .energy import gradient_magnitude_energy
from .errors import InvalidDimensions, ShapeMismatch
from .seam import cumulative_energy, find_seam, remove_seam

logger = logging.getLogger(__name__)

STRATEGIES = ('exact', 'shared', 'balanced')

EnergyFn = Callable[[torch.Tensor], torch.Tensor]


@dataclass
class CarveStep:
    """State after one seam removal.

    ``image`` and ``energy`` are the narrowed buffers; ``energy`` is the
    map the next seam will be found on if it is not recomputed.
    """
    index: int
    seam: torch.Tensor
    image: torch.Tensor
    energy: torch.Tensor


def _recompute_period(strategy: str, period: Optional[int], n_seams: int) -> int:
    """Number of removals between energy recomputations for a strategy."""
    if strategy not in STRATEGIES:
        raise ValueError(f"Invalid strategy: {strategy!r}. Must be one of {STRATEGIES}.")

    if strategy == 'exact':
        return 1
    if strategy == 'shared':
        # Never reached again after the initial computation at removal 0
        return max(n_seams, 1)

    if period is None:
        raise ValueError("The 'balanced' strategy requires a period")
    if isinstance(period, bool) or not isinstance(period, int) or period < 1:
        raise ValueError(f"Invalid period: {period!r}. Must be an integer >= 1.")
    return period


def _validate(image: torch.Tensor, target_width: int) -> int:
    """Check the carve preconditions; return the number of seams to remove."""
    if image.dim() not in (2, 3):
        raise InvalidDimensions(f"Expected (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    H, W = image.shape[-2:]
    if H < 1 or W < 1 or (image.dim() == 3 and image.shape[0] < 1):
        raise InvalidDimensions(f"Image must be non-empty, got shape {tuple(image.shape)}")

    if isinstance(target_width, bool) or not isinstance(target_width, int):
        raise InvalidDimensions(f"Target width must be an integer, got {target_width!r}")
    if target_width < 1:
        raise InvalidDimensions(f"Target width must be at least 1, got {target_width}")
    if target_width > W:
        raise InvalidDimensions(
            f"Target width {target_width} exceeds current width {W}; seams can only be removed")

    return W - target_width


def iter_carve(image: torch.Tensor, target_width: int,
               strategy: str = 'exact', period: Optional[int] = None,
               energy_fn: EnergyFn = gradient_magnitude_energy) -> Iterator[CarveStep]:
    """
    Remove vertical seams one at a time, yielding after each removal.

    Every yielded step leaves the image and energy buffers consistent, so
    a caller may stop iterating at any point (progress reporting,
    cancellation) and keep the last step's image.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        target_width: Width to carve down to, 1 <= target_width <= W
        strategy: 'exact', 'shared' or 'balanced'
        period: Removals between energy recomputations for 'balanced'
        energy_fn: Maps an image to an (H, W) energy map

    Returns:
        Iterator of CarveStep, one per removed seam

    Raises:
        InvalidDimensions: on an empty image or an out-of-range target,
            before any seam is removed
    """
    n_seams = _validate(image, target_width)
    every = _recompute_period(strategy, period, n_seams)
    return _carve_steps(image, n_seams, every, energy_fn)


def _carve_steps(image: torch.Tensor, n_seams: int, every: int,
                 energy_fn: EnergyFn) -> Iterator[CarveStep]:
    current = image.clone()
    energy = None

    for i in range(n_seams):
        if i % every == 0:
            energy = energy_fn(current)
            logger.debug(f"Seam {i}: recomputed energy at width {current.shape[-1]}")

        if energy.shape != current.shape[-2:]:
            raise ShapeMismatch(
                f"Energy map {tuple(energy.shape)} has diverged from image "
                f"{tuple(current.shape[-2:])}")

        cumulative, directions = cumulative_energy(energy)
        seam = find_seam(cumulative, directions)

        current = remove_seam(current, seam)
        energy = remove_seam(energy, seam)
        logger.debug(f"Seam {i}: removed, starting at column {int(seam[0])}")

        yield CarveStep(index=i, seam=seam, image=current, energy=energy)


def carve(image: torch.Tensor, target_width: int,
          strategy: str = 'exact', period: Optional[int] = None,
          energy_fn: EnergyFn = gradient_magnitude_energy) -> torch.Tensor:
    """
    Content-aware narrowing of an image to ``target_width`` columns.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        target_width: Width of the result, 1 <= target_width <= W
        strategy: 'exact' (default), 'shared' or 'balanced'
        period: Removals between energy recomputations for 'balanced'
        energy_fn: Maps an image to an (H, W) energy map

    Returns:
        Carved image with the same height, channels and dtype
    """
    steps = iter_carve(image, target_width, strategy=strategy,
                       period=period, energy_fn=energy_fn)
    carved = image.clone()
    for step in steps:
        carved = step.image

    logger.info(f"Carved width {image.shape[-1]} -> {carved.shape[-1]} ({strategy})")
    return carved


def carve_image_exact(image: torch.Tensor, target_width: int) -> torch.Tensor:
    """Carve recomputing energy before every seam."""
    return carve(image, target_width, strategy='exact')


def carve_image_shared(image: torch.Tensor, target_width: int) -> torch.Tensor:
    """Carve reusing a single energy map for all seams."""
    return carve(image, target_width, strategy='shared')


def carve_image_balanced(image: torch.Tensor, target_width: int,
                         period: int) -> torch.Tensor:
    """Carve recomputing energy every ``period`` seams."""
    return carve(image, target_width, strategy='balanced', period=period)
