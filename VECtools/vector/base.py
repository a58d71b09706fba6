"""
    VECtools Vector Storage Core

    The dimension-agnostic part of every vector type: the fixed-length float32
    buffer, the named-component accessors mapped onto it, and the operations
    whose formula does not depend on the dimension (arithmetic, rounding,
    normalization, interpolation, distance queries).

    Vectors are mutable value types. Component setters (``v.x = 1.0`` or
    ``v[0] = 1.0``) write into the vector's own buffer; every other operation
    leaves its inputs untouched and returns a newly allocated vector.

    Arithmetic happens in double precision on the widened components and is
    rounded back to float32 when the result is stored. Degenerate inputs
    (division by zero, zero-length vectors in angle queries) produce inf/nan
    rather than exceptions.

"""

import logging
from typing import Iterator, Sequence, Union

import numpy as np

from .constants import *
from .core_functions import *

logger = logging.getLogger(__name__)

Number = Union[int, float, np.floating, np.integer]


def _component(
    index: int,
    name: str) -> property:
    """
    Build a read/write property for the component stored at buffer offset `index`.
    """

    def getter(self) -> float:
        return float(self._values[index])

    def setter(self, value: float) -> None:
        with np.errstate(over="ignore"):
            self._values[index] = value

    return property(getter, setter, doc=f"The {name} component (offset {index}).")


class VectorBase:
    """
    Fixed-size float32 storage shared by Vector2, Vector3 and Vector4.

    Subclasses set `dimension` and expose the named components with
    `_component`. Core queries dispatch to the Numba kernels while
    `use_numba` is true, otherwise to the NumPy equivalents.

    `str()` renders each stored float32 with its shortest round-trip decimal
    and keeps the trailing `.0` of whole numbers, so `Vector2(0.1, 3)` prints
    as `Vector2(0.1, 3.0)` rather than the widened double `0.10000000149011612`.
    """

    __slots__ = ("_values",)

    dimension = 0
    use_numba = True

    def __init__(
        self,
        *components: Number) -> None:
        if len(components) != self.dimension:
            raise TypeError(
                f"{type(self).__name__} takes {self.dimension} components, got {len(components)}")
        with np.errstate(over="ignore"):
            self._values = np.array(components, dtype=VECTOR_DTYPE)


    @classmethod
    def _wrap(
        cls,
        values: np.ndarray) -> "VectorBase":
        """
        Wrap a freshly computed buffer, rounding it to float32.
        """
        out = cls.__new__(cls)
        with np.errstate(over="ignore", invalid="ignore"):
            out._values = np.ascontiguousarray(values, dtype=VECTOR_DTYPE)
        return out


    @classmethod
    def from_array(
        cls,
        values: Union[Sequence[Number], np.ndarray]) -> "VectorBase":
        """
        Build a vector from a sequence or 1-D array of exactly `dimension` numbers.

        Args:
            values (Sequence or np.ndarray): the components in x, y, z, w order

        Returns:
            a new vector owning a float32 copy of `values`
        """
        array = np.asarray(values)
        if array.ndim != 1:
            raise ValueError(f"values must be one-dimensional. Got shape {array.shape}")
        if array.shape[0] != cls.dimension:
            raise ValueError(
                f"values must have {cls.dimension} elements. Got {array.shape[0]}")
        if array.dtype != np.float32:
            logger.debug("Converting %s values to float32 for %s", array.dtype, cls.__name__)
        # copy so the new vector never shares the caller's buffer
        return cls._wrap(np.array(array, dtype=np.float64))


    def to_array(self) -> np.ndarray:
        """Copy of the float32 component buffer."""
        return self._values.copy()


    def clone(self) -> "VectorBase":
        return self._wrap(self._values.copy())


    ##########################################################################
    # Dimension-agnostic queries
    ##########################################################################

    @property
    def magnitude(self) -> float:
        """
        Euclidean norm of the vector, accumulated in double precision.
        """
        if self.use_numba:
            return float(vector_magnitude_nb_core(self._values))
        return vector_magnitude_np_core(self._values)


    def __str__(self) -> str:
        return f"Vector{self.dimension}({', '.join(str(c) for c in self._values)})"

    __repr__ = __str__


    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._values)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __setitem__(self, index: int, value: float) -> None:
        with np.errstate(over="ignore"):
            self._values[index] = value


    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    # mutable, so not hashable
    __hash__ = None

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None


    ##########################################################################
    # Arithmetic (non-mutating)
    ##########################################################################

    def _widened(self) -> np.ndarray:
        return self._values.astype(np.float64)


    def add(
        self,
        other: "VectorBase") -> "VectorBase":
        """
        Add `other` to the vector and return a new vector.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            return self._wrap(self._widened() + other._widened())


    def sub(
        self,
        other: "VectorBase") -> "VectorBase":
        """
        Subtract `other` from the vector and return a new vector.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            return self._wrap(self._widened() - other._widened())


    def mult(
        self,
        scalar: Number) -> "VectorBase":
        """
        Multiply the vector by `scalar` and return a new vector.
        """
        with np.errstate(over="ignore", invalid="ignore"):
            return self._wrap(self._widened() * np.float64(scalar))


    def div(
        self,
        scalar: Number) -> "VectorBase":
        """
        Divide the vector by `scalar` and return a new vector.

        A zero scalar gives inf (or nan for zero components), it does not raise.
        """
        with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
            return self._wrap(self._widened() / np.float64(scalar))


    def floor(self) -> "VectorBase":
        return self._wrap(np.floor(self._values))


    def ceil(self) -> "VectorBase":
        return self._wrap(np.ceil(self._values))


    def normalize(self) -> "VectorBase":
        """
        Scale the vector to unit length and return a new vector.

        A vector whose magnitude is exactly 0 is returned as an equal copy.
        """
        if self.magnitude == 0.0:
            logger.debug("normalize() on zero-length %s, returning it unchanged", type(self).__name__)
            return self.clone()
        if self.use_numba:
            return self._wrap(vector_normalize_nb_core(self._values))
        return self._wrap(vector_normalize_np_core(self._values))


    def equals(
        self,
        other: "VectorBase",
        error: float = DEFAULT_ERROR) -> bool:
        """
        True iff every pair of corresponding components differs by at most `error`.

        Raises TypeError when `other` is not the same vector type.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if self.use_numba:
            return bool(vector_equals_nb_core(self._values, other._values, float(error)))
        return vector_equals_np_core(self._values, other._values, error)


    def dot_product_with(
        self,
        other: "VectorBase") -> float:
        """
        Dot product over the x and y components only.

        Vector3 and Vector4 inherit this two-term form unchanged; use
        `Vector3.dot` for the full three-term product.
        """
        if self.use_numba:
            return float(vector_dot_product_nb_core(self._values, other._values, 2))
        return vector_dot_product_np_core(self._values, other._values, 2)


    ##########################################################################
    # Operators
    ##########################################################################

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float, np.number)) or isinstance(scalar, bool):
            return NotImplemented
        return self.mult(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, (int, float, np.number)) or isinstance(scalar, bool):
            return NotImplemented
        return self.div(scalar)

    def __neg__(self):
        return self.mult(-1)


    ##########################################################################
    # Two-point queries
    ##########################################################################

    @classmethod
    def displacement(
        cls,
        from_: "VectorBase",
        to: "VectorBase") -> "VectorBase":
        """`to - from_`"""
        return to.sub(from_)


    @classmethod
    def direction(
        cls,
        from_: "VectorBase",
        to: "VectorBase") -> "VectorBase":
        """Unit displacement; zero when the points coincide."""
        return cls.displacement(from_, to).normalize()


    @classmethod
    def distance(
        cls,
        from_: "VectorBase",
        to: "VectorBase") -> float:
        return cls.displacement(from_, to).magnitude


    @classmethod
    def distance_squared(
        cls,
        from_: "VectorBase",
        to: "VectorBase") -> float:
        dist = cls.distance(from_, to)
        return dist * dist


    @classmethod
    def midpoint(
        cls,
        from_: "VectorBase",
        to: "VectorBase") -> "VectorBase":
        return cls.displacement(from_, to).mult(0.5).add(from_)


    @classmethod
    def lerp(
        cls,
        from_: "VectorBase",
        to: "VectorBase",
        t: float) -> "VectorBase":
        """
        Point at fraction `t` of the way from `from_` to `to`.

        `t` is not clamped, so values outside [0, 1] extrapolate.
        """
        disp = cls.displacement(from_, to)
        distance = disp.magnitude
        return disp.normalize().mult(t * distance).add(from_)


    @classmethod
    def lerp_by_distance(
        cls,
        from_: "VectorBase",
        to: "VectorBase",
        distance: float) -> "VectorBase":
        """
        Point `distance` units from `from_` in the direction of `to`.
        """
        return cls.direction(from_, to).mult(distance).add(from_)


    @classmethod
    def dot_product(
        cls,
        a: "VectorBase",
        b: "VectorBase") -> float:
        return a.dot_product_with(b)


    @classmethod
    def angle_between(
        cls,
        a: "VectorBase",
        b: "VectorBase") -> float:
        """
        Angle in radians between `a` and `b` from `dot_product`.

        nan when either vector has zero length.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_angle = np.float64(cls.dot_product(a, b)) / np.float64(a.magnitude * b.magnitude)
            return float(np.arccos(cos_angle))
