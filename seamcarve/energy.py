"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the Sobel gradient magnitude of the image luminance, quantized to
the 8-bit range so that cumulative sums stay exact integers.
"""

import torch
import torch.nn.functional as F

from .errors import InvalidDimensions

LUMA_WEIGHTS = (0.299, 0.587, 0.114)

SOBEL_X = torch.tensor([[-1, 0, 1],
                        [-2, 0, 2],
                        [-1, 0, 1]], dtype=torch.float32)

SOBEL_Y = torch.tensor([[-1, -2, -1],
                        [ 0,  0,  0],
                        [ 1,  2,  1]], dtype=torch.float32)

ENERGY_DTYPE = torch.int64


def luminance(image: torch.Tensor) -> torch.Tensor:
    """
    Reduce a color image to a single luma channel on the 0-255 scale.

    Args:
        image: RGB(A) image tensor (C, H, W), uint8 or float in [0, 1].
               A trailing alpha channel is ignored. (H, W) is taken as
               already grayscale.

    Returns:
        Luminance (H, W), float32
    """
    if image.dim() == 2:
        gray = image.to(torch.float32)
        if not image.dtype.is_floating_point:
            return gray
        return gray * 255.0

    if image.dim() != 3:
        raise ValueError(f"Expected (C, H, W) or (H, W) image, got shape {tuple(image.shape)}")

    rgb = image.to(torch.float32)
    if image.dtype.is_floating_point:
        rgb = rgb * 255.0

    if image.shape[0] >= 3:
        r, g, b = LUMA_WEIGHTS
        return r * rgb[0] + g * rgb[1] + b * rgb[2]
    return rgb[0]


def gradient_magnitude_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute Sobel gradient magnitude energy for an image.

    E(i,j) = round(sqrt(Gx(i,j)^2 + Gy(i,j)^2)), clamped to [0, 255]

    Samples outside the image are replicated from the nearest edge pixel,
    so a flat border produces no spurious energy.

    Args:
        image: RGB(A) image tensor (C, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W), int64
    """
    gray = luminance(image)
    if gray.numel() == 0:
        raise InvalidDimensions(f"Cannot compute energy of an empty image {tuple(gray.shape)}")

    # (1, 1, H, W) for conv2d, in float64 so rounding does not depend on accumulation order
    gray = gray.to(torch.float64).unsqueeze(0).unsqueeze(0)
    padded = F.pad(gray, (1, 1, 1, 1), mode='replicate')

    sobel_x = SOBEL_X.to(device=gray.device, dtype=gray.dtype).view(1, 1, 3, 3)
    sobel_y = SOBEL_Y.to(device=gray.device, dtype=gray.dtype).view(1, 1, 3, 3)

    grad_x = F.conv2d(padded, sobel_x)
    grad_y = F.conv2d(padded, sobel_y)

    magnitude = torch.sqrt(grad_x ** 2 + grad_y ** 2).squeeze(0).squeeze(0)
    energy = torch.round(magnitude).clamp(0, 255)

    return energy.to(ENERGY_DTYPE)


compute_energy = gradient_magnitude_energy
