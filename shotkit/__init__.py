"""Settings storage, filename pattern expansion, desktop session detection and desktop entry parsing."""

__version__ = "0.9.0"