"""Inverse kinematics, gaits and error handling for a six-legged walking robot."""

__version__ = "0.1.0"