"""
Debug rasters of generated rooms.

Walls are drawn one pixel wide, each in a random light colour, on a black
background covering the room bounds. Intended for eyeballing generation
output only.
"""

import logging
import os
from typing import List, Optional

import matplotlib.image as mpimg
import numpy as np

from ..core.world import Box, Room, build_room

logger = logging.getLogger(__name__)


def rasterize_room(room: Room, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Rasterize the wall outline of a room.

    Returns:
        ``uint8`` RGB array of shape ``(max_y - min_y + 1, max_x - min_x + 1, 3)``.
    """
    rng = rng if rng is not None else np.random.default_rng(0)
    min_x, min_y, max_x, max_y = room.bounds
    image = np.zeros((max_y - min_y + 1, max_x - min_x + 1, 3), dtype=np.uint8)

    for side in room.sides:
        col = side.x0 - min_x
        row = side.y0 - min_y
        if side.x0 == side.x1:
            width, height = 1, abs(side.y1 - side.y0)
        else:
            width, height = abs(side.x1 - side.x0), 1
        color = rng.integers(127, 256, size=3)
        image[row:row + height, col:col + width] = color
    return image


def save_raster(image: np.ndarray, path: str) -> str:
    """Write a raster to disk; the format follows the file extension."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    mpimg.imsave(path, image)
    logger.debug(f"Saved raster {image.shape[1]}x{image.shape[0]} to {path}")
    return path


class RasterSnapshotter:
    """
    This class is a generation step callback that saves ``room{i}.bmp`` after each box is added.
    """
    def __init__(self, directory: str, seed: int = 0, extension: str = 'bmp'):
        self.directory = directory
        self.seed = seed
        self.extension = extension
        self.paths: List[str] = []
        self.logger = logging.getLogger(self.__class__.__name__)

    def __call__(self, boxes: List[Box]) -> None:
        room = build_room(boxes)
        image = rasterize_room(room, np.random.default_rng(self.seed))
        path = os.path.join(self.directory, f"room{len(self.paths)}.{self.extension}")
        self.paths.append(save_raster(image, path))
