"""
Analysis and plotting for generated rooms.
"""

from .plot import plot_room

__all__ = ['plot_room']
