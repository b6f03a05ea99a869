"""
Vector style translation.

A translator reads a native (map-library) style and returns a print-service style
object, plus any errors/warnings it found along the way.
"""
from .simple import SimpleStyleTranslator
from .types import StyleTranslation, StyleTranslator

__all__ = [
    "SimpleStyleTranslator",
    "StyleTranslation",
    "StyleTranslator",
]
