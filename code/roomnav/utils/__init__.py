"""
Utility modules.

This module provides:
- math_utils: steering math in the horizontal plane
- io_utils: room JSON export/import and CSV output
- raster: debug rasters of room wall outlines
"""

from .math_utils import heading_angle, forward_vector, horizontal_distance

from .io_utils import (
    ensure_serializable,
    save_json,
    save_room_json,
    load_room_json,
    save_rows_to_csv
)

from .raster import rasterize_room, save_raster, RasterSnapshotter

__all__ = [
    # Math utilities
    'heading_angle',
    'forward_vector',
    'horizontal_distance',

    # I/O utilities
    'ensure_serializable',
    'save_json',
    'save_room_json',
    'load_room_json',
    'save_rows_to_csv',

    # Debug rasters
    'rasterize_room',
    'save_raster',
    'RasterSnapshotter'
]
