"""
Table Interpolation
===================
Piecewise-linear lookup over a key -> value table, used to derive correction
factors from measured (tabulated) data.

Unlike ``numpy.interp``, which clamps to the end values, points outside the
table are linearly extrapolated from the nearest end segment.
"""
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Mapping, Union

import numpy as np

from airdensity.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    import numpy.typing as npt

InterpolationTable = Mapping[float, float]


def _split_table(table: InterpolationTable) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Return the table as (keys, values) arrays sorted by key."""
    if len(table) < 2:
        raise InvalidArgumentError(
            f"Interpolation table needs at least 2 entries, got {len(table)}."
        )
    keys, values = zip(*sorted(table.items()))
    keys = np.asarray(keys, dtype=np.float64)
    if np.any(np.diff(keys) == 0):
        raise InvalidArgumentError("Interpolation table keys must be distinct as floats.")
    return keys, np.asarray(values, dtype=np.float64)


def interpolate(
    x: Union[float, Decimal, npt.ArrayLike],
    table: InterpolationTable,
) -> Union[float, npt.NDArray[np.float64]]:
    """
    Interpolate (or extrapolate) the table value at ``x``.

    Rules:
        * ``x`` equal to a key returns the stored value unchanged.
        * ``x`` below the smallest key extends the slope of the two
          smallest keys.
        * ``x`` above the largest key extends the slope of the two
          largest keys.
        * Otherwise the bracketing pair of keys is found by binary search
          and the local slope is applied.

    Args:
        x: Point(s) to evaluate. Scalars (including ``Decimal``) return a
           float, array-likes return an array of the same shape.
        table: Mapping of distinct numeric keys to values, at least 2 entries.
               The mapping does not need to be sorted and is not modified.

    Returns:
        Interpolated value(s).

    Raises:
        InvalidArgumentError: If the table has fewer than 2 entries or two
            keys collapse to the same float.
    """
    keys, values = _split_table(table)

    if isinstance(x, Decimal):
        x = float(x)
    scalar = np.ndim(x) == 0
    xs = np.atleast_1d(np.asarray(x, dtype=np.float64))

    n = len(keys)

    # Binary search for the insertion point of every x
    pos = np.searchsorted(keys, xs, side="left")
    hit = np.minimum(pos, n - 1)
    exact = keys[hit] == xs

    # Lower key of the bracketing segment; the end segments cover extrapolation
    lo = np.clip(pos - 1, 0, n - 2)
    slope = (values[lo + 1] - values[lo]) / (keys[lo + 1] - keys[lo])
    result = values[lo] + (xs - keys[lo]) * slope

    above = xs > keys[-1]
    result = np.where(above, values[-1] + (xs - keys[-1]) * slope, result)
    result = np.where(exact, values[hit], result)

    if scalar:
        return float(result[0])
    return result


def round_half_up(
    value: Union[float, npt.ArrayLike],
    decimal_places: int,
) -> Union[float, npt.NDArray[np.float64]]:
    """
    Round to ``decimal_places`` with ties going away from zero.

    ``round()`` and ``numpy.round`` use banker's rounding (ties to even),
    which is not what tabulated laboratory values expect.

    Args:
        value: Value(s) to round.
        decimal_places: Number of digits after the decimal point.

    Returns:
        Rounded value(s).
    """
    factor = 10.0 ** decimal_places
    rounded = np.sign(value) * np.floor(np.abs(value) * factor + 0.5) / factor
    if np.ndim(value) == 0:
        return float(rounded)
    return rounded
