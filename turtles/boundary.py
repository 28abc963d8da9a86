"""Search-space bounds for a turtle swarm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from turtles.errors import ConfigurationError

BoundsLike = Union["Boundary", Sequence[float], Sequence[Sequence[float]], np.ndarray]


@dataclass(frozen=True, eq=False)
class Boundary:
    """Per-dimension lower and upper bounds of the search space."""

    lower: np.ndarray
    upper: np.ndarray

    def __post_init__(self) -> None:
        lower = np.asarray(self.lower, dtype=float)
        upper = np.asarray(self.upper, dtype=float)
        if lower.ndim != 1 or lower.shape != upper.shape:
            raise ConfigurationError(
                f"lower and upper bounds must be 1-D and equal length, "
                f"got shapes {lower.shape} and {upper.shape}"
            )
        if lower.size < 1:
            raise ConfigurationError("bounds must cover at least one dimension")
        if not (np.all(np.isfinite(lower)) and np.all(np.isfinite(upper))):
            raise ConfigurationError("bounds must be finite")
        inverted = np.flatnonzero(lower > upper)
        if inverted.size:
            d = int(inverted[0])
            raise ConfigurationError(
                f"inverted bounds in dimension {d}: lower={lower[d]} > upper={upper[d]}"
            )
        # frozen dataclass: bypass __setattr__ to store the normalised arrays
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)

    @classmethod
    def cubic(cls, dimensions: int, lower: float, upper: float) -> Boundary:
        """Same (lower, upper) range in every dimension."""
        if dimensions < 1:
            raise ConfigurationError(f"dimensions must be >= 1, got {dimensions}")
        return cls(np.full(dimensions, lower, dtype=float), np.full(dimensions, upper, dtype=float))

    @classmethod
    def parse(cls, dimensions: int, bounds: BoundsLike) -> Boundary:
        """Build a boundary from a single pair or one pair per dimension."""
        if dimensions < 1:
            raise ConfigurationError(f"dimensions must be >= 1, got {dimensions}")
        if isinstance(bounds, Boundary):
            boundary = bounds
        else:
            try:
                arr = np.asarray(bounds, dtype=float)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"could not interpret bounds {bounds!r}") from exc
            if arr.shape == (2,):
                return cls.cubic(dimensions, float(arr[0]), float(arr[1]))
            if arr.ndim != 2 or arr.shape[1] != 2:
                raise ConfigurationError(
                    f"bounds must be a (lower, upper) pair or one pair per dimension, "
                    f"got shape {arr.shape}"
                )
            boundary = cls(arr[:, 0], arr[:, 1])
        if boundary.dimensions != dimensions:
            raise ConfigurationError(
                f"bounds cover {boundary.dimensions} dimensions, expected {dimensions}"
            )
        return boundary

    @property
    def dimensions(self) -> int:
        return int(self.lower.size)

    @property
    def width(self) -> np.ndarray:
        return self.upper - self.lower

    def contains(self, position: np.ndarray) -> bool:
        position = np.asarray(position)
        return bool(np.all(position >= self.lower) and np.all(position <= self.upper))

    def representable(self, dtype: np.dtype | type | str = np.float64) -> tuple[np.ndarray, np.ndarray]:
        """Bounds rounded inward to the nearest values of ``dtype``.

        In single precision a bound such as 0.1 has no exact value, and a plain
        cast may land just outside it.  The result can be empty (lower > upper)
        when no value of ``dtype`` lies within the bounds.
        """
        dtype = np.dtype(dtype)
        lower = self.lower.astype(dtype)
        upper = self.upper.astype(dtype)
        lower = np.where(lower < self.lower, np.nextafter(lower, dtype.type(np.inf)), lower)
        upper = np.where(upper > self.upper, np.nextafter(upper, dtype.type(-np.inf)), upper)
        return lower.astype(dtype), upper.astype(dtype)

    def clip(self, position: np.ndarray) -> np.ndarray:
        """Clip into bounds without leaving the precision of ``position``."""
        position = np.asarray(position)
        lower, upper = self.representable(position.dtype)
        return np.clip(position, lower, upper)
