"""Synthetic height/weight sample with a least-squares regression line."""

__version__ = "0.1.0"
