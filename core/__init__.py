"""
Core components.

Only the camera is exported here so importing it stays free of pygame. The
window and input layers are imported from their modules directly.
"""

from .camera import Camera, Projection

__all__ = ["Camera", "Projection"]
