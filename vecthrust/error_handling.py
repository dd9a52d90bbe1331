"""
Error Handling Module for Vecthrust

This module defines the exceptions raised by vector construction and arithmetic,
and a Result type pattern for callers that prefer to receive errors as values
instead of catching exceptions.
"""

from typing import Tuple, Any, Callable, TypeVar, Union

# Type variables for generic functions
T = TypeVar('T')
E = TypeVar('E')
R = TypeVar('R')

# Result type for functions that might fail
Result = Union[Tuple[T, None], Tuple[None, E]]


class VectorError(ValueError):
    """Base class for all vector errors."""


class EmptyVectorError(VectorError):
    """Raised when a vector is constructed from zero coordinates."""

    def __init__(self, message: str = "Empty vectors are not allowed"):
        super().__init__(message)


class DimensionMismatchError(VectorError):
    """
    Raised when an elementwise operation receives vectors of different dimensions.

    Attributes:
        left_dimension (int): Dimension of the left operand
        right_dimension (int): Dimension of the right operand
    """

    def __init__(self, left_dimension: int, right_dimension: int):
        self.left_dimension = left_dimension
        self.right_dimension = right_dimension
        super().__init__(
            f"Vectors must have the same dimension: {left_dimension} vs {right_dimension}"
        )


def success(value: T) -> Result[T, Any]:
    """Create a success result."""
    return (value, None)

def error(err: E) -> Result[Any, E]:
    """Create an error result."""
    return (None, err)

def is_success(result: Result[T, E]) -> bool:
    """Check if a result is successful."""
    return result[1] is None

def is_error(result: Result[T, E]) -> bool:
    """Check if a result is an error."""
    return result[1] is not None

def get_value(result: Result[T, E]) -> T:
    """
    Get the value from a successful result.

    Args:
        result: A Result tuple

    Returns:
        The success value

    Raises:
        ValueError: If the result is an error
    """
    if is_error(result):
        raise ValueError(f"Cannot get value from error result: {result[1]}")
    return result[0]

def get_error(result: Result[T, E]) -> E:
    """
    Get the error from an error result.

    Raises:
        ValueError: If the result is a success
    """
    if is_success(result):
        raise ValueError("Cannot get error from success result")
    return result[1]

def map_success(result: Result[T, E], fn: Callable[[T], R]) -> Result[R, E]:
    """
    Apply a function to the value if the result is successful.

    Args:
        result: A Result tuple
        fn: Function to apply to success value

    Returns:
        A new Result with the transformed value or the original error
    """
    if is_success(result):
        return success(fn(get_value(result)))
    return result

def handle_error(result: Result[T, E], handler: Callable[[E], R]) -> Union[T, R]:
    """Return the success value, or the handler's result for an error."""
    if is_success(result):
        return get_value(result)
    return handler(get_error(result))
