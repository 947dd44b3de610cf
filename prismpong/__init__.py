"""A colourful arcade paddle game with rainbow effects, particles and a computer opponent."""

__version__ = "0.1.0"