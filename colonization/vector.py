"""
Point/vector types for the space colonization engine.

The engine only relies on the small capability set described by ``Point``,
so any type providing it can be grown (2D, 3D or higher dimensional).
``Vector`` is the concrete implementation used throughout this package.
"""

import numpy as np
from typing import Iterable, Protocol, Tuple, TypeVar


P = TypeVar('P', bound='Point')


class Point(Protocol):
    """Capabilities the engine needs from a position type."""

    def __add__(self: P, other: P) -> P: ...

    def __sub__(self: P, other: P) -> P: ...

    def __mul__(self: P, scalar: float) -> P: ...

    def normalize(self: P) -> P: ...

    def distance_squared_to(self: P, other: P) -> float: ...

    def zero(self: P) -> P: ...


class Vector:
    __slots__ = ('_coords',)

    def __init__(self, *coords: float):
        self._coords: Tuple[float, ...] = tuple(float(c) for c in coords)

    def _check(self, other: 'Vector'):
        if len(self._coords) != len(other._coords):
            raise ValueError(
                f"Dimension mismatch: {len(self._coords)} vs {len(other._coords)}"
            )

    def __add__(self, other: 'Vector') -> 'Vector':
        self._check(other)
        return Vector(*(a + b for a, b in zip(self._coords, other._coords)))

    def __sub__(self, other: 'Vector') -> 'Vector':
        self._check(other)
        return Vector(*(a - b for a, b in zip(self._coords, other._coords)))

    def __mul__(self, scalar: float) -> 'Vector':
        return Vector(*(c * scalar for c in self._coords))

    def __rmul__(self, scalar: float) -> 'Vector':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector':
        return Vector(*(c / scalar for c in self._coords))

    def __neg__(self) -> 'Vector':
        return self * -1.0

    def __len__(self) -> int:
        return len(self._coords)

    def __iter__(self):
        return iter(self._coords)

    def __getitem__(self, index: int) -> float:
        return self._coords[index]

    def __repr__(self) -> str:
        inner = ", ".join(f"{c:.2f}" for c in self._coords)
        return f"Vector({inner})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector) or len(self) != len(other):
            return NotImplemented
        return bool(np.allclose(self._coords, other._coords))

    __hash__ = None

    @property
    def dimension(self) -> int:
        return len(self._coords)

    @property
    def x(self) -> float:
        return self._coords[0]

    @property
    def y(self) -> float:
        return self._coords[1]

    @property
    def z(self) -> float:
        return self._coords[2]

    @property
    def magnitude(self) -> float:
        return float(np.sqrt(self.magnitude_squared))

    @property
    def magnitude_squared(self) -> float:
        return sum(c * c for c in self._coords)

    def normalize(self) -> 'Vector':
        mag = self.magnitude
        if mag < 1e-10:
            return self.zero()
        return self / mag

    def zero(self) -> 'Vector':
        return Vector(*([0.0] * len(self._coords)))

    def distance_to(self, other: 'Vector') -> float:
        return (self - other).magnitude

    def distance_squared_to(self, other: 'Vector') -> float:
        return (self - other).magnitude_squared

    def to_tuple(self) -> tuple:
        return self._coords

    def to_array(self) -> np.ndarray:
        return np.array(self._coords)

    @classmethod
    def from_tuple(cls, t: Iterable[float]) -> 'Vector':
        return cls(*t)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> 'Vector':
        return cls(*np.asarray(arr, dtype=float).ravel())

    def copy(self) -> 'Vector':
        return Vector(*self._coords)
