"""Public package interface for aocgrid."""

from .chinese_remainder import Constraint, chinese_remainder
from .conway import ConwaySpace
from .direction import Direction
from .map import Map, MapConversionError, NotRectangularError, TileConversionError
from .point import Point
from .tiles import Bool, Classifier, FunctionClassifier, Traversability
from .vectors import Vector3, Vector4

__all__ = [
    "Bool",
    "Classifier",
    "Constraint",
    "ConwaySpace",
    "Direction",
    "FunctionClassifier",
    "Map",
    "MapConversionError",
    "NotRectangularError",
    "Point",
    "TileConversionError",
    "Traversability",
    "Vector3",
    "Vector4",
    "chinese_remainder",
]
