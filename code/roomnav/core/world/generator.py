import logging
import math
from typing import Callable, List, Optional

import numpy as np

from .shapes import Box


# Anchor sides, two directions each. Even/odd picks the secondary alignment.
ANCHOR_RIGHT = (0, 1)
ANCHOR_LEFT = (2, 3)
ANCHOR_BOTTOM = (4, 5)
ANCHOR_TOP = (6, 7)
NUM_DIRECTIONS = 8


class RoomGenerator:
    """
    This class places boxes flush against the current extreme boxes until the layout
    reaches a minimum total area.

    The random source is a ``numpy.random.Generator`` owned by the instance, so two
    generators built from the same seed produce the same layout.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _draw_size(self, min_box_size: int, max_box_size: int):
        width = int(self.rng.integers(min_box_size, max_box_size + 1))
        height = int(self.rng.integers(min_box_size, max_box_size + 1))
        return width, height

    def generate(self, minimum_area: int, min_box_size: int, max_box_size: int,
                 on_step: Optional[Callable[[List[Box]], None]] = None) -> List[Box]:
        """
        Generate boxes until their summed area reaches ``minimum_area``.

        Args:
            minimum_area: Area threshold; the last box added is the first to cross it
            min_box_size: Smallest side length (inclusive)
            max_box_size: Largest side length (inclusive)
            on_step: Called with the box list after every box added past the root

        Returns:
            Boxes in placement order; index 0 is the root box centered on the origin.
        """
        if min_box_size < 1:
            raise ValueError("min_box_size must be positive")
        if max_box_size < min_box_size:
            raise ValueError("max_box_size must be >= min_box_size")
        if minimum_area < 0:
            raise ValueError("minimum_area must be non-negative")

        width, height = self._draw_size(min_box_size, max_box_size)
        current_area = width * height
        boxes = [Box(
            left=-math.floor(width / 2),
            right=math.ceil(width / 2),
            bottom=-math.floor(height / 2),
            top=math.ceil(height / 2),
        )]

        max_right_i = max_left_i = max_bottom_i = max_top_i = 0

        while current_area < minimum_area:
            width, height = self._draw_size(min_box_size, max_box_size)
            current_area += width * height
            direction = int(self.rng.integers(0, NUM_DIRECTIONS))

            if direction in ANCHOR_RIGHT:
                anchor = boxes[max_right_i]
                left = anchor.right
                right = left + width
            elif direction in ANCHOR_LEFT:
                anchor = boxes[max_left_i]
                right = anchor.left
                left = right - width
            elif direction in ANCHOR_BOTTOM:
                anchor = boxes[max_bottom_i]
                top = anchor.bottom
                bottom = top - height
            else:
                anchor = boxes[max_top_i]
                bottom = anchor.top
                top = bottom + height

            if direction < 4:
                if direction % 2 == 0:
                    top = anchor.top
                    bottom = top - height
                else:
                    bottom = anchor.bottom
                    top = bottom + height
            else:
                if direction % 2 == 0:
                    left = anchor.left
                    right = left + width
                else:
                    right = anchor.right
                    left = right - width

            new_box = Box(left=left, right=right, bottom=bottom, top=top)

            # Strict comparisons: ties keep the earlier box as the extreme
            if new_box.right > boxes[max_right_i].right:
                max_right_i = len(boxes)
            if new_box.left < boxes[max_left_i].left:
                max_left_i = len(boxes)
            if new_box.bottom < boxes[max_bottom_i].bottom:
                max_bottom_i = len(boxes)
            if new_box.top > boxes[max_top_i].top:
                max_top_i = len(boxes)

            boxes.append(new_box)
            if on_step is not None:
                on_step(boxes)

        self.logger.info(f"Generated {len(boxes)} boxes with total area {current_area} (seed={self.seed})")
        return boxes


def generate_boxes(seed: Optional[int], minimum_area: int, min_box_size: int, max_box_size: int,
                   on_step: Optional[Callable[[List[Box]], None]] = None) -> List[Box]:
    """Generate a box layout from a seed with a fresh random source."""
    return RoomGenerator(seed).generate(minimum_area, min_box_size, max_box_size, on_step=on_step)
