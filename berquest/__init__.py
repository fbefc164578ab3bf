"""A collect-and-escape puzzle game on .ber maps, with map checks and small text helpers."""

__version__ = "0.1.0"