"""Shape types: the Shape base class, Point and Rectangle."""

from .shape import Shape
from .point import Point
from .rectangle import Rectangle

__all__ = ['Shape', 'Point', 'Rectangle']
