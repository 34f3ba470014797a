"""Voxel world game logic: chunk quad trees, task scheduling, player movement, animations, tile constraints and HUD text."""

__version__ = "0.1.0"