"""
Plotting functionality for generated rooms.

Provides a top-down view of floors, walls (with normals) and an optional box path.
"""

import logging
import os
from typing import List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.world import Room

logger = logging.getLogger(__name__)


def plot_room(room: Room, box_path: Optional[List[int]] = None, out_path: Optional[str] = None,
              show_normals: bool = False, annotate: bool = True):
    """
    Draw a room top-down.

    Args:
        room: Room to draw
        box_path: Optional sequence of box indices drawn through box centers
        out_path: If given, the figure is saved there and closed
        show_normals: Draw a short tick along each wall's normal
        annotate: Label each box with its index

    Returns:
        The matplotlib figure (closed if it was saved).
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    for i, box in enumerate(room.boxes):
        ax.add_patch(Rectangle((box.left, box.bottom), box.width, box.height,
                               facecolor='#d9d4c7', edgecolor='none'))
        if annotate:
            cx, cy = box.center
            ax.text(cx, cy, str(i), ha='center', va='center', fontsize=7, color='#555555')

    for side in room.sides:
        ax.plot([side.x0, side.x1], [side.y0, side.y1], color='#222222', linewidth=1.5)
        if show_normals:
            mx, my = (side.x0 + side.x1) / 2.0, (side.y0 + side.y1) / 2.0
            ax.plot([mx, mx + 0.8 * side.normal[0]], [my, my + 0.8 * side.normal[1]],
                    color='#c0392b', linewidth=0.8)

    if box_path:
        xs = [room.boxes[i].center[0] for i in box_path]
        ys = [room.boxes[i].center[1] for i in box_path]
        ax.plot(xs, ys, color='#2e86de', linewidth=2, marker='o', markersize=4)

    min_x, min_y, max_x, max_y = room.bounds
    ax.set_xlim(min_x - 1, max_x + 1)
    ax.set_ylim(min_y - 1, max_y + 1)
    ax.set_aspect('equal')
    ax.set_title(f"{len(room.boxes)} boxes, {len(room.sides)} walls")

    if out_path:
        directory = os.path.dirname(out_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(out_path, dpi=150, bbox_inches='tight')
        plt.close(fig)
        logger.info(f"Saved room plot to {out_path}")
    return fig
