"""Sentinel-1 product metadata extraction.

Converts Sentinel-1 product XML (current and legacy annotation schemas)
into normalized GeoJSON-like feature records: a footprint polygon plus a
flat property bag ready for catalog indexing.
"""

__version__ = "0.1.0"
