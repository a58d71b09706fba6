"""
    VECtools Vector Types

    Vector2, Vector3 and Vector4: single-precision vectors built on the shared
    float32 storage in `base.py`. Each class adds its named components and the
    operations that only make sense for its dimension (2D rotation and angles,
    the 3D cross product, projections down to the smaller types).

"""

import math

import numpy as np

from .base import VectorBase, _component
from .constants import *
from .core_functions import *


class Vector2(VectorBase):
    """
    A 2-dimensional vector of single-precision floats.

    Arithmetic methods return new vectors; assigning to `x` or `y` mutates
    this vector in place.
    """

    __slots__ = ()

    dimension = 2

    x = _component(X, "x")
    y = _component(Y, "y")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0) -> None:
        super().__init__(x, y)


    def angle(self) -> float:
        """
        Signed angle from the positive x-axis in radians, in (-pi, pi].
        """
        return math.atan2(self.y, self.x)


    def rotate_by(
        self,
        theta: float) -> "Vector2":
        """
        Rotate counter-clockwise by `theta` radians and return a new vector.

        The result is rebuilt from `angle() + theta` at the original magnitude.
        """
        return Vector2.from_angle(self.angle() + theta).mult(self.magnitude)


    def rotate_about(
        self,
        about: "Vector2",
        theta: float) -> "Vector2":
        """
        Rotate counter-clockwise by `theta` radians around the pivot `about`.
        """
        return self.sub(about).rotate_by(theta).add(about)


    def cross_product_with(
        self,
        other: "Vector2") -> "Vector3":
        """
        Cross product of two 2D vectors, as a Vector3 along the z-axis.
        """
        return Vector2.cross_product(self, other)


    @classmethod
    def cross_product(
        cls,
        a: "Vector2",
        b: "Vector2") -> "Vector3":
        """
        Returns Vector3(0, 0, a.x * b.y - b.x * a.y).
        """
        if cls.use_numba:
            z = vector_cross_product_2D_nb_core(a._values, b._values)
        else:
            z = vector_cross_product_2D_np_core(a._values, b._values)
        return Vector3(0.0, 0.0, z)


    @classmethod
    def from_angle(
        cls,
        theta: float) -> "Vector2":
        """
        Unit vector at `theta` radians from the positive x-axis.
        """
        with np.errstate(invalid="ignore"):
            return cls(np.cos(theta), np.sin(theta))


class Vector3(VectorBase):
    """
    A 3-dimensional vector of single-precision floats.

    `dot` and `cross` use all three components. `dot_product_with` and
    `dot_product` keep the two-term (x, y) form shared with Vector2.
    """

    __slots__ = ()

    dimension = 3

    x = _component(X, "x")
    y = _component(Y, "y")
    z = _component(Z, "z")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0) -> None:
        super().__init__(x, y, z)


    def dot(
        self,
        other: "Vector3") -> float:
        """
        Calculate the three-term dot product.
        """
        if self.use_numba:
            return float(vector_dot_product_nb_core(self._values, other._values, 3))
        return vector_dot_product_np_core(self._values, other._values, 3)


    def cross(
        self,
        other: "Vector3") -> "Vector3":
        """
        Calculate the cross product and return a new vector.
        """
        if self.use_numba:
            return self._wrap(vector_cross_product_3D_nb_core(self._values, other._values))
        return self._wrap(vector_cross_product_3D_np_core(self._values, other._values))


    @classmethod
    def cross_product(
        cls,
        a: "Vector3",
        b: "Vector3") -> "Vector3":
        return a.cross(b)


    @property
    def xy(self) -> Vector2:
        """
        The x and y components as a new Vector2.
        """
        return Vector2(self._values[X], self._values[Y])


class Vector4(VectorBase):
    """
    A 4-dimensional vector of single-precision floats.
    """

    __slots__ = ()

    dimension = 4

    x = _component(X, "x")
    y = _component(Y, "y")
    z = _component(Z, "z")
    w = _component(W, "w")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        w: float = 0.0) -> None:
        super().__init__(x, y, z, w)


    @property
    def xyz(self) -> Vector3:
        """
        The x, y and z components as a new Vector3.
        """
        return Vector3(self._values[X], self._values[Y], self._values[Z])
