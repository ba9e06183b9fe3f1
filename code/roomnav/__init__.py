"""
Procedural room generation and navigation.

Generates connected box layouts from a seed, derives their wall outline and box
adjacency, and drives follower agents through them.
"""

__version__ = '0.1.0'
