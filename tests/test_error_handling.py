"""
Test error handling module
"""

import pytest
from vecthrust.error_handling import (
    VectorError, EmptyVectorError, DimensionMismatchError,
    success, error, is_success, is_error, get_value, get_error,
    map_success, handle_error
)

def test_exception_hierarchy():
    """Test vector errors derive from ValueError"""
    assert issubclass(VectorError, ValueError)
    assert issubclass(EmptyVectorError, VectorError)
    assert issubclass(DimensionMismatchError, VectorError)

def test_dimension_mismatch_message():
    """Test the mismatch error names both dimensions"""
    err = DimensionMismatchError(3, 2)
    assert err.left_dimension == 3
    assert err.right_dimension == 2
    assert "3" in str(err) and "2" in str(err)

def test_result_helpers():
    """Test success and error results"""
    ok = success(42)
    failed = error("boom")

    assert is_success(ok) and not is_error(ok)
    assert is_error(failed) and not is_success(failed)
    assert get_value(ok) == 42
    assert get_error(failed) == "boom"

    with pytest.raises(ValueError):
        get_value(failed)
    with pytest.raises(ValueError):
        get_error(ok)

def test_map_and_handle():
    """Test transforming and handling results"""
    assert get_value(map_success(success(2), lambda x: x * 3)) == 6
    assert map_success(error("boom"), lambda x: x * 3) == error("boom")

    assert handle_error(success(1), lambda e: 0) == 1
    assert handle_error(error("boom"), lambda e: f"handled {e}") == "handled boom"
