"""
ColorWheel Colors Module

Provides the RGB/HSV color model, the harmony scheme registry, and harmony
derivation for the color picker wheel. All functions are pure and operate on
immutable value types.
"""

__version__ = "1.0.0"
