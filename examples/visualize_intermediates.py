"""
Show every intermediate stage of finding one seam.

Panels: input, energy, cumulative energy, directions, and the seam
overlaid on the energy map and on the image.

Usage:
    python examples/visualize_intermediates.py input.png [--output stages.png]
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import matplotlib.pyplot as plt

from seamcarve import (compute_energy, cumulative_energy, find_seam,
                       energy_heatmap, direction_map, overlay_seam)
from carve_image import load_image


def to_display(tensor):
    """(C, H, W) or (H, W) tensor to something imshow accepts."""
    if tensor.dim() == 2:
        return tensor.cpu().numpy()
    return tensor.permute(1, 2, 0).cpu().numpy()


def main():
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('input')
    parser.add_argument('--output', default=None, help='save the figure instead of showing it')
    args = parser.parse_args()

    image = load_image(args.input)
    energy = compute_energy(image)
    cumulative, directions = cumulative_energy(energy)
    seam = find_seam(cumulative, directions)

    panels = [
        ('Input', to_display(image), None),
        ('Energy', to_display(energy_heatmap(energy)), 'gray'),
        ('Cumulative energy', to_display(energy_heatmap(cumulative)), 'gray'),
        ('Directions', to_display(direction_map(directions)), None),
        ('Seam on energy', to_display(overlay_seam(energy_heatmap(energy), seam)), 'gray'),
        ('Seam on image', to_display(overlay_seam(image, seam, value=(255, 0, 0, 255))), None),
    ]

    fig, axes = plt.subplots(2, 3, figsize=(15, 8))
    for ax, (title, data, cmap) in zip(axes.flat, panels):
        ax.imshow(data, cmap=cmap)
        ax.set_title(title)
        ax.axis('off')
    plt.tight_layout()

    if args.output:
        plt.savefig(args.output, dpi=150, bbox_inches='tight')
        print(f"Saved: {args.output}")
    else:
        plt.show()


if __name__ == '__main__':
    main()
