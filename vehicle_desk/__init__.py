"""Vehicle Desk: filter and export vehicle records."""

__version__ = "0.1.0"
