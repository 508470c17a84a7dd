"""Hydrogen-bond profiles of molecular simulation frames, in slabs along a box axis or in spherical shells."""

__version__ = "0.1.0"