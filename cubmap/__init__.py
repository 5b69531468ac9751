"""Read and validate .cub scene files, and load XPM pixmaps into images."""

__version__ = "0.1.0"