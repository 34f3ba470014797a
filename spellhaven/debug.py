"""Settings that switch on debugging aids at run time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DebugSettings:
    """Debug switches: free camera and path overlay."""

    unlock_camera: bool = False
    show_path_debug: bool = False
    path_circle_radius: float = 1.0
    path_show_range: int = 500