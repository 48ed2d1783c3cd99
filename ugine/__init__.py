"""Logic core of a small 2D game engine: geometry, collisions, input, animation, tile maps, fonts and GUI controls."""

__version__ = "0.1.0"

__all__ = [
    "camera",
    "collision",
    "controls",
    "events",
    "font",
    "gestures",
    "image",
    "inputmanager",
    "mathutil",
    "particles",
    "skeleton",
    "slider",
    "tilemap",
    "widgets",
]