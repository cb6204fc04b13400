"""Directory browser for AI infrastructure companies."""

__version__ = "0.1.0"
