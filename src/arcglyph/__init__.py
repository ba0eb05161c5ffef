"""Arcglyph - Circular-arc glyph outlines for signed-distance-field debugging.

Arcglyph approximates glyph outlines with chains of circular arcs and provides
the geometric queries needed to build and inspect a signed distance field:
distance to an arc, angular wedge containment, arc-to-Bezier conversion and
reconstruction of drawable path commands from arc endpoint sequences.

Example:
    $ arcglyph render Roboto-Regular.ttf "Ag"

This will write A.svg and g.svg debug renderings of the arc outlines.
"""

__version__ = "0.1.0"
__author__ = "Arcglyph contributors"

__all__ = ["__author__", "__version__"]
