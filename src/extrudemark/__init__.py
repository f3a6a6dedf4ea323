"""Extrudemark - Render extruded, pseudo-3D wordmarks and icons as SVG.

Extrudemark takes a string and a seed, pulls glyph outlines from a font (or
from a built-in block alphabet), flattens them, extrudes each glyph along a
jittered offset vector and lays the result out on a tightly sized canvas.

Example:
    $ extrudemark --text Pluribus --font Inter-Black.ttf --seed 7

This will write assets/pluribus-logo.svg and assets/pluribus-favicon.svg.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
