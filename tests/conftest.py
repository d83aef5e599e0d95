"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_uniform_image(H, W, color=(90, 140, 200, 255)):
    """Every pixel the same RGBA color, uint8 (4, H, W)."""
    return torch.tensor(color, dtype=torch.uint8).view(-1, 1, 1).expand(len(color), H, W).clone()


def make_line_image(H, W, line_col, bright=255, dark=0):
    """Dark RGBA image with one bright vertical line at ``line_col``."""
    image = torch.full((4, H, W), dark, dtype=torch.uint8)
    image[:3, :, line_col] = bright
    image[3] = 255
    return image


def make_random_image(H, W, channels=4, seed=0):
    """Reproducible random uint8 image (channels, H, W)."""
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (channels, H, W), dtype=torch.uint8, generator=gen)


@pytest.fixture
def random_image():
    """Random 4x24x32 RGBA image."""
    return make_random_image(24, 32)


@pytest.fixture
def random_energy():
    """Random 20x30 integer energy map."""
    gen = torch.Generator().manual_seed(42)
    return torch.randint(0, 256, (20, 30), dtype=torch.int64, generator=gen)
