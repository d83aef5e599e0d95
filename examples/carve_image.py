"""
Narrow an image file with seam carving.

Usage:
    python examples/carve_image.py input.png output.png --width 400
    python examples/carve_image.py input.png output.png --width 400 --strategy balanced --period 10
"""

import argparse
import logging
import os
import sys
import time

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import torch
from PIL import Image

from seamcarve import STRATEGIES, carve

logger = logging.getLogger(__name__)


def load_image(path: str) -> torch.Tensor:
    """Load an image as a uint8 RGBA tensor (4, H, W)."""
    img = Image.open(path).convert('RGBA')
    img_array = np.array(img, dtype=np.uint8)
    return torch.from_numpy(img_array).permute(2, 0, 1).contiguous()


def save_image(tensor: torch.Tensor, path: str):
    """Save a uint8 RGBA tensor (4, H, W)."""
    img_array = tensor.permute(1, 2, 0).cpu().numpy()
    Image.fromarray(img_array).save(path)
    logger.info(f"Saved: {path}")


def main():
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('input')
    parser.add_argument('output')
    parser.add_argument('--width', type=int, required=True, help='target width in pixels')
    parser.add_argument('--strategy', choices=STRATEGIES, default='exact')
    parser.add_argument('--period', type=int, default=None,
                        help="seams between energy recomputations ('balanced' only)")
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(message)s')

    image = load_image(args.input)
    C, H, W = image.shape
    logger.info(f"Image shape: {C} x {H} x {W}")

    start = time.perf_counter()
    carved = carve(image, args.width, strategy=args.strategy, period=args.period)
    logger.info(f"Removed {W - args.width} seams in {time.perf_counter() - start:.2f}s")

    save_image(carved, args.output)


if __name__ == '__main__':
    main()
