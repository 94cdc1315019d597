"""Spacecorridor: a pygame arcade game of steering a spaceship through a meteorite corridor to the finish line."""

__version__ = "0.1.0"