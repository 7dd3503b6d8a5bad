"""
Booklet imposition planner.

This package computes which pages go on which side of each physical sheet
of a saddle-stitched booklet, how many blank pages must be prepared, and
which sheets need color ink.
"""

__version__ = "1.0.0"
