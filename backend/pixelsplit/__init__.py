"""pixelsplit — grid seam detection and mask refinement for image editors."""

__version__ = "0.1.0"
