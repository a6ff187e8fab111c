"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)
        
    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return np.array(result, dtype=np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify a flat array holds exactly `length` values.
    
    Args:
        array: 1D array to check
        length: Required number of values
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If the length differs
    """
    if array.shape[0] != length:
        raise DimensionError(
            f"{name}: expected {length} values, got {array.shape[0]}",
            expected=length,
            actual=array.shape[0],
        )


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer (bool rejected).
    
    Raises:
        ValidationError: If value is not an int or is negative
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_index(row: Any, col: Any, shape: tuple[int, int]) -> None:
    """
    Verify a 1-based (row, col) pair addresses an entry of a matrix.
    
    Index 0 is always out of bounds since indexing starts at 1.
    
    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfBoundsError: If either index is outside 1..=rows / 1..=cols
    """
    for value, name in ((row, 'row'), (col, 'col')):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{name}: expected an integer index, got {type(value).__name__}"
            )
    rows, cols = shape
    if not (1 <= row <= rows and 1 <= col <= cols):
        raise IndexOutOfBoundsError(row, col, shape)


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is a strictly positive integer (bool rejected).
    
    Raises:
        ValidationError: If value is not an int or is less than 1
    """
    value = check_non_negative_int(value, name)
    if value == 0:
        raise ValidationError(f"{name}: must be at least 1, got 0")
    return value


def normalize_span(span: tuple[int, int] | range, name: str) -> range:
    """
    Convert a 1-based inclusive span to a range of the indices it selects.
    
    Accepts a (start, end) tuple, where both ends are included, or a
    range whose elements are the selected indices.
    
    Args:
        span: (start, end) tuple or range
        name: Parameter name for error messages
        
    Returns:
        Non-empty step-1 range
        
    Raises:
        ValidationError: If the span is malformed, empty or has a step other than 1
    """
    if isinstance(span, range):
        normalized = span
    elif isinstance(span, tuple) and len(span) == 2:
        start, end = (check_non_negative_int(v, name) for v in span)
        normalized = range(start, end + 1)
    else:
        raise ValidationError(
            f"{name}: expected a (start, end) tuple or a range, got {span!r}"
        )
    
    if normalized.step != 1:
        raise ValidationError(f"{name}: step must be 1, got {normalized.step}")
    if len(normalized) == 0:
        raise ValidationError(
            f"{name}: selects nothing (start={normalized.start}, end={normalized.stop - 1})"
        )
    return normalized
