# Colour helpers for drawing entities.

from __future__ import annotations

import random
from typing import Optional

import numpy as np
from matplotlib import colors

import config


def pick_color(rng: Optional[random.Random] = None) -> str:
    """Description: Random colour from the shape palette
    Inputs: rng: Optional[random.Random]
    """
    return (rng or random).choice(config.COLORS)


def fade_toward(color: str, background: str, progress: float) -> str:
    """Description: Blend a colour toward the background; 0 keeps the colour, 1 is the background
    Inputs: color: str, background: str, progress: float
    """
    t = float(np.clip(progress, 0.0, 1.0))
    start = np.array(colors.to_rgb(color))
    end = np.array(colors.to_rgb(background))
    return colors.to_hex(start + (end - start) * t).upper()


def removal_frames(color: str, background: str, frames: int = config.REMOVAL_FRAMES) -> list[str]:
    """Description: Colours for each frame of the removal fade, ending on the background
    Inputs: color: str, background: str, frames: int
    """
    steps = np.linspace(0.0, 1.0, num=max(frames, 1) + 1)[1:]
    return [fade_toward(color, background, step) for step in steps]
