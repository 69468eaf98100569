"""Wiring-style core utilities: strings, printing, streams, timing, pulse measurement and IP addresses."""

__version__ = "0.1.0"