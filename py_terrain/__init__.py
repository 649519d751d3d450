"""
py-terrain: fractal simplex-noise terrain height fields.
"""

__version__ = "0.1.0"
