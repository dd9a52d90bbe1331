"""
Vectors Module

Immutable geometric vector value type for the Vecthrust library. A Vector is a
representation of a point or displacement in n-dimensional real space: an
ordered sequence of float coordinates plus the dimension, i.e. how many axes
are involved.
"""

import numbers
import logging
from typing import Iterable, Iterator, Tuple

import numpy as np

from .error_handling import (
    EmptyVectorError, DimensionMismatchError, VectorError, Result, success, error
)

logger = logging.getLogger(__name__)


class Vector:
    """
    An immutable vector of float coordinates.

    Vectors are created only through the constructor, which rejects empty input.
    Arithmetic never mutates its operands; every operation returns a new Vector.

    Examples:
        >>> Vector([1.0, 1.0]).dimension
        2
        >>> Vector([1.0, 2.5099]).to_string()
        'Vector: [1.0, 2.5099]'
        >>> Vector([1.0, 2.0]) + Vector([0.0, 4.0]) == Vector([1.0, 6.0])
        True
    """

    __slots__ = ("_coordinates",)

    def __init__(self, coordinates: Iterable[float]):
        """
        Create a new Vector from a sequence of coordinates.

        Args:
            coordinates (Iterable[float]): Coordinate values in axis order

        Raises:
            EmptyVectorError: If no coordinates are given
            TypeError: If a coordinate is not a real number
            VectorError: If a coordinate does not fit in a float
        """
        values = tuple(coordinates)
        if len(values) == 0:
            raise EmptyVectorError()

        self._coordinates = tuple(_to_float(value, "Vector coordinate") for value in values)

    @property
    def coordinates(self) -> Tuple[float, ...]:
        return self._coordinates

    @property
    def dimension(self) -> int:
        return len(self._coordinates)

    def as_array(self) -> np.ndarray:
        """Return a float64 copy of the coordinates as a numpy array."""
        return np.array(self._coordinates, dtype=np.float64)

    def to_string(self) -> str:
        """Format this vector as a string, e.g. ``Vector: [1.0, 2.5099]``."""
        return f"Vector: {list(self._coordinates)}"

    def equals(self, other: "Vector") -> bool:
        """
        Compare two vectors coordinate by coordinate.

        Vectors of differing dimension are never equal.

        Raises:
            TypeError: If other is not a Vector
        """
        if not isinstance(other, Vector):
            raise TypeError(f"Can only compare a Vector with a Vector, got {type(other).__name__}")
        return self._coordinates == other._coordinates

    def add(self, other: "Vector") -> "Vector":
        """Add two vectors creating a new one with the resulting coordinates."""
        _check_same_dimension(self, other)
        with np.errstate(over="ignore", invalid="ignore"):
            result = np.add(self.as_array(), other.as_array())
        return Vector(result.tolist())

    def subtract(self, other: "Vector") -> "Vector":
        """Subtract two vectors creating a new one with the resulting coordinates."""
        _check_same_dimension(self, other)
        with np.errstate(over="ignore", invalid="ignore"):
            result = np.subtract(self.as_array(), other.as_array())
        return Vector(result.tolist())

    def scale(self, factor: float) -> "Vector":
        """
        Multiply every coordinate by a scalar.

        Args:
            factor (float): Scalar multiplier

        Returns:
            Vector: New vector with scaled coordinates

        Raises:
            TypeError: If factor is not a real number
            VectorError: If factor does not fit in a float
        """
        factor = _to_float(factor, "Scale factor")
        with np.errstate(over="ignore", invalid="ignore"):
            result = np.multiply(self.as_array(), factor)
        return Vector(result.tolist())

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        return hash(self._coordinates)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __len__(self):
        return len(self._coordinates)

    def __iter__(self) -> Iterator[float]:
        return iter(self._coordinates)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Vector({list(self._coordinates)})"


def _to_float(value, kind: str) -> float:
    # bool is a numbers.Real subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{kind} must be a real number, got {type(value).__name__}")
    try:
        return float(value)
    except OverflowError:
        raise VectorError(f"{kind} is too large to represent as a float") from None

def _check_same_dimension(left: Vector, right: Vector) -> None:
    if left.dimension != right.dimension:
        logger.debug(f"Dimension mismatch: {left.dimension} vs {right.dimension}")
        raise DimensionMismatchError(left.dimension, right.dimension)

def create_vector(coordinates: Iterable[float]) -> Vector:
    """
    Create a vector from a sequence of coordinates.

    Args:
        coordinates (Iterable[float]): Coordinate values in axis order

    Returns:
        Vector: The new vector

    Raises:
        EmptyVectorError: If no coordinates are given
    """
    return Vector(coordinates)

def try_create_vector(coordinates: Iterable[float]) -> Result[Vector, str]:
    """
    Create a vector, reporting construction failures as an error result.

    Args:
        coordinates (Iterable[float]): Coordinate values in axis order

    Returns:
        Result: (vector, None) on success, (None, message) on failure
    """
    try:
        return success(Vector(coordinates))
    except (VectorError, TypeError) as e:
        return error(str(e))

def add_vectors(vector_a: Vector, vector_b: Vector) -> Vector:
    """Elementwise sum of two vectors of the same dimension."""
    return vector_a.add(vector_b)

def subtract_vectors(vector_a: Vector, vector_b: Vector) -> Vector:
    """Elementwise difference of two vectors of the same dimension."""
    return vector_a.subtract(vector_b)

def scale_vector(vector: Vector, factor: float) -> Vector:
    """Multiply every coordinate of a vector by a scalar."""
    return vector.scale(factor)
