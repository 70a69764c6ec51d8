"""Nullable integer vectors with explicit recycling.

Inputs arrive as scalars, lists, numpy arrays or pandas Series, with any
element possibly missing. They are normalized here into fixed-length int64
arrays plus a missing mask, and reconciled to a common batch length before
any elementwise work happens.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sized
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from weekdate.weeks.errors import EmptyInputError, InvalidInputError, WeekOverflowError

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def is_missing(value: Any) -> bool:
    """Check whether a scalar is a missing-value marker.

    None, float NaN, pandas.NA and NaT all count as missing.
    """
    if value is None:
        return True
    if isinstance(value, (str, bytes)) or not pd.api.types.is_scalar(value):
        return False
    return bool(pd.isna(value))


def as_items(values: Any) -> list[Any]:
    """Flatten a scalar or one-dimensional collection into a list.

    Strings are scalars here, so "Monday" is one item, not six.
    """
    if isinstance(values, (pd.Series, pd.Index)):
        return values.tolist()
    if isinstance(values, np.ndarray):
        if values.ndim == 0:
            return [values.item()]
        return values.ravel().tolist()
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


def to_int(value: Any, field: str) -> int | None:
    """Convert one element to an int, keeping missing values as None.

    Args:
        value: Element to convert
        field: Argument name used in error messages

    Returns:
        The integer, or None for a missing element

    Raises:
        InvalidInputError: If the element is not an integral number
    """
    if is_missing(value):
        return None
    if isinstance(value, (bool, np.bool_)):
        raise InvalidInputError([f"{field} must be an integer, got boolean {value!r}"])
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not math.isfinite(value) or not float(value).is_integer():
            raise InvalidInputError([f"{field} must be an integer, got {value!r}"])
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError as e:
            raise InvalidInputError([f"{field} must be an integer, got {value!r}"]) from e
        return to_int(number, field)
    raise InvalidInputError([f"{field} must be an integer, got {type(value).__name__} {value!r}"])


@dataclass(frozen=True)
class NullableIntVector:
    """Fixed-length int64 vector with a per-element missing mask.

    Attributes:
        values: int64 array; entries under the mask are placeholders (0)
        missing: bool array, True where the element is missing
    """

    values: np.ndarray
    missing: np.ndarray

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def from_list(cls, items: list[int | None], field: str = "value") -> NullableIntVector:
        """Build a vector from ints and Nones.

        Raises:
            WeekOverflowError: If an element does not fit in int64
        """
        for item in items:
            if item is not None and not INT64_MIN <= item <= INT64_MAX:
                raise WeekOverflowError([f"{field} value {item} does not fit in a 64-bit integer"])
        values = np.array([0 if item is None else item for item in items], dtype=np.int64)
        missing = np.array([item is None for item in items], dtype=bool)
        return cls(values=values, missing=missing)

    def to_list(self) -> list[int | None]:
        return [None if gap else int(value) for value, gap in zip(self.values, self.missing, strict=True)]

    def recycle(self, length: int) -> NullableIntVector:
        """Repeat the vector cyclically up to ``length`` elements."""
        if len(self) == length:
            return self
        return NullableIntVector(values=np.resize(self.values, length), missing=np.resize(self.missing, length))

    def present(self) -> np.ndarray:
        """Return the non-missing values."""
        return self.values[~self.missing]


def as_vector(values: Any, field: str) -> NullableIntVector:
    """Coerce caller input to a NullableIntVector.

    Args:
        values: Scalar or one-dimensional collection
        field: Argument name used in error messages

    Returns:
        The vector, with missing elements masked

    Raises:
        InvalidInputError: If an element is not an integral number
        WeekOverflowError: If an element does not fit in int64
    """
    items = [to_int(item, field) for item in as_items(values)]
    return NullableIntVector.from_list(items, field)


def batch_length(arguments: Mapping[str, Sized]) -> int:
    """Return the length every argument is recycled to.

    Args:
        arguments: Argument name to collection

    Returns:
        Length of the longest argument

    Raises:
        EmptyInputError: If any argument has zero length
    """
    empty = [name for name, items in arguments.items() if len(items) == 0]
    if empty:
        raise EmptyInputError([f"{name} must not be empty" for name in empty])
    return max(len(items) for items in arguments.values())
