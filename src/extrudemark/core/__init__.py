"""Core algorithms for extrudemark.

This module contains the core algorithms for:

- Deterministic pseudo-random numbers (mulberry32)
- Curve flattening (Bezier sampling to polylines)
- Extrusion side-face construction
- Bounding box accumulation over rotated geometry
- Text layout (wordmark and icon)
- Asset generation (layout, render, write)

Everything except BrandAssetGenerator is pure: no I/O and no state shared
between calls.

Key functions:
- flatten_outline: Convert path commands to contours
- merge: Widen a bounding box by a point
- bounds_of_rotated_geometry: Bounds of front and back after rotation
- cycle_colors: Face color selector cycling through accents

Key classes:
- SeededRandom: Seedable unit-interval stream
- ExtrusionBuilder: Builds side faces and back paths
- LayoutEngine: Places glyphs and sizes the canvas
- BrandAssetGenerator: Writes the wordmark and icon
"""

from extrudemark.core.bounds import (
    bounds_of_points,
    bounds_of_rotated_geometry,
    merge,
    merge_boxes,
    rotate_point,
)
from extrudemark.core.extrude import ExtrusionBuilder, FaceSet, cycle_colors
from extrudemark.core.flatten import flatten_outline
from extrudemark.core.generator import BrandAssetGenerator
from extrudemark.core.layout import LayoutEngine
from extrudemark.core.prng import SeededRandom
from extrudemark.core.text import iter_clusters

__all__ = [
    # Orchestration
    "BrandAssetGenerator",
    # Extrusion
    "ExtrusionBuilder",
    "FaceSet",
    # Layout
    "LayoutEngine",
    # Randomness
    "SeededRandom",
    # Bounds
    "bounds_of_points",
    "bounds_of_rotated_geometry",
    "cycle_colors",
    # Flattening
    "flatten_outline",
    "iter_clusters",
    "merge",
    "merge_boxes",
    "rotate_point",
]
