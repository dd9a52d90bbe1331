"""
Vecthrust: Geometric Vectors

A small Python library providing an immutable n-dimensional vector value type
with elementwise addition, subtraction and scalar multiplication, plus a batch
pipeline that evaluates vector operations described in JSON files.
"""

__version__ = "0.1.0"

# Import core components for easy access
from .vectors import (
    Vector, create_vector, try_create_vector,
    add_vectors, subtract_vectors, scale_vector
)
from .error_handling import (
    VectorError, EmptyVectorError, DimensionMismatchError,
    success, error, is_success, is_error, get_value, get_error
)
from .config_parser import parse_input_config, validate_config

# Main processing function
from .vecthrust import process_input_file
