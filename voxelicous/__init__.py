"""Input state tracking, action mapping and GPU selection logic for a voxel engine."""

__version__ = "0.1.0"