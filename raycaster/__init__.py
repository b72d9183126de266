"""A first-person raycasting maze viewer with an XPM reader and X11 colour table."""

__version__ = "0.1.0"
__all__ = ["colors", "visual", "image", "xpm", "world", "render", "game"]