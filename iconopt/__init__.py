"""iconopt — SVG icon optimizer with closepath normalization."""

__version__ = "0.1.0"
