"""Height-map reader and interactive 3D wireframe viewer."""

__version__ = "0.1.0"

__all__ = ["app", "controls", "mapfile", "parsing", "projection", "raster"]