"""
I/O utilities for room export, trajectories and survey tables.
"""

import json
import logging
import os
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..core.world import Box, Room, build_room

logger = logging.getLogger(__name__)


def ensure_serializable(obj):
    """Ensure object is JSON serializable."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {k: ensure_serializable(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [ensure_serializable(i) for i in obj]
    return obj


def save_json(data: Dict, file_path: str, indent: int = 2):
    """Save data to a JSON file."""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, 'w') as f:
        json.dump(ensure_serializable(data), f, indent=indent)


def save_room_json(room: Room, file_path: str, metadata: Dict[str, Any] = None) -> None:
    """Export a room (boxes, walls, bounds, adjacency) to JSON."""
    data = room.to_dict()
    if metadata:
        data['metadata'] = metadata
    save_json(data, file_path)
    logger.info(f"Saved room with {len(room.boxes)} boxes and {len(room.sides)} walls to {file_path}")


def load_room_json(file_path: str) -> Room:
    """Rebuild a room from the boxes of an exported JSON file."""
    with open(file_path, 'r') as f:
        data = json.load(f)
    if 'boxes' not in data:
        raise KeyError(f"Expected 'boxes' key not found in {file_path}")
    boxes = [Box(**box) for box in data['boxes']]
    return build_room(boxes)


def save_rows_to_csv(rows: List[Dict[str, Any]], file_path: str) -> pd.DataFrame:
    """Save a list of row dicts (e.g. a chase trajectory) to CSV."""
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    df = pd.DataFrame(rows)
    if df.empty:
        logger.warning(f"No rows to save to {file_path}")
    df.to_csv(file_path, index=False)
    logger.info(f"Saved {len(df)} rows to {file_path}")
    return df
