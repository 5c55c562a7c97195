"""Pitch calibration, camera pose, offside-line geometry and viewer state for soccer video."""

__version__ = "0.1.0"