from __future__ import annotations

import math

import torch


GRAY_RAMP_SIZE = 128
HUE_RAMP_SIZE = 256

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def gray_ramp(levels: int) -> torch.Tensor:
    if levels == 2:
        return _two_tone(GRAY_RAMP_SIZE)
    rows = [(i << 1, i << 1, i << 1, 255) for i in range(GRAY_RAMP_SIZE)]
    return torch.tensor(rows, dtype=torch.uint8)


def hue_ramp(levels: int) -> torch.Tensor:
    if levels == 2:
        return _two_tone(HUE_RAMP_SIZE)
    rows = [BLACK]
    for i in range(1, HUE_RAMP_SIZE):
        r, g, b = hue_to_rgb(i / (HUE_RAMP_SIZE - 1.0))
        rows.append((r, g, b, 255))
    return torch.tensor(rows, dtype=torch.uint8)


def hue_to_rgb(hue: float) -> tuple[int, int, int]:
    """Map `hue` in [0, 1] around the colour wheel; each channel is a shifted trapezoid."""
    r = int(255 * _hue_value(_wrap(hue + 2.0 / 6)) + 0.5)
    g = int(255 * _hue_value(_wrap(hue)) + 0.5)
    b = int(255 * _hue_value(_wrap(hue - 2.0 / 6)) + 0.5)
    return (r, g, b)


def palette_index(value: int, levels: int, size: int) -> int:
    value = max(0, min(levels - 1, value))
    if levels <= 1:
        return 0
    return int((value / (levels - 1)) * (size - 1) + 0.5)


def _two_tone(size: int) -> torch.Tensor:
    half = size // 2
    rows = [BLACK] * half + [WHITE] * (size - half)
    return torch.tensor(rows, dtype=torch.uint8)


def _wrap(x: float) -> float:
    return x - math.floor(x)


def _hue_value(x: float) -> float:
    if x < 1.0 / 6:
        return 6 * x
    if x < 0.5:
        return 1.0
    if x < 4.0 / 6:
        return 4 - 6 * x
    return 0.0
