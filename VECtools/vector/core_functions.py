from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for single vectors
##########################################################################################

# Components are widened with np.float64 before any arithmetic, so the kernels
# return double precision results. No fastmath: inf and nan must propagate unchanged.

@njit([sig_mag_f32], cache=True, error_model="numpy")
def vector_magnitude_nb_core(
    values):
    """
    Compute magnitude of a vector
    values: shape (N,)
    returns: float64
    """
    acc = 0.0
    for i in range(values.shape[0]):
        acc += np.float64(values[i]) * np.float64(values[i])

    return np.sqrt(acc)


@njit([sig_dot_f32], cache=True, error_model="numpy")
def vector_dot_product_nb_core(
    values_1,
    values_2,
    num_of_terms):
    """
    Compute dot product of two vectors over the first num_of_terms components
    values_1, values_2: shape (N,)
    returns: float64
    """
    acc = 0.0
    for i in range(num_of_terms):
        acc += np.float64(values_1[i]) * np.float64(values_2[i])

    return acc


@njit([sig_cross_3d_f32], cache=True, error_model="numpy")
def vector_cross_product_3D_nb_core(
    values_1,
    values_2):
    """
    Compute cross product of two 3D vectors
    values_1, values_2: shape (3,)
    returns: shape (3,)
    """
    ax, ay, az = np.float64(values_1[0]), np.float64(values_1[1]), np.float64(values_1[2])
    bx, by, bz = np.float64(values_2[0]), np.float64(values_2[1]), np.float64(values_2[2])
    out = np.empty(3, dtype=np.float64)

    # Component 0: a_y * b_z - a_z * b_y
    out[0] = ay * bz - az * by
    # Component 1: a_z * b_x - a_x * b_z
    out[1] = az * bx - ax * bz
    # Component 2: a_x * b_y - a_y * b_x
    out[2] = ax * by - ay * bx

    return out


@njit([sig_cross_2d_f32], cache=True, error_model="numpy")
def vector_cross_product_2D_nb_core(
    values_1,
    values_2):
    """
    Compute cross product of two 2D vectors (returns the scalar z term)
    values_1, values_2: shape (2,)
    returns: float64
    """
    return (np.float64(values_1[0]) * np.float64(values_2[1]) -
            np.float64(values_2[0]) * np.float64(values_1[1]))


@njit([sig_norm_f32], cache=True, error_model="numpy")
def vector_normalize_nb_core(
    values):
    """
    Normalize a vector
    values: shape (N,)
    returns: shape (N,), the widened input unchanged when the magnitude is exactly 0
    """
    n = values.shape[0]
    out = np.empty(n, dtype=np.float64)
    acc = 0.0
    for i in range(n):
        out[i] = np.float64(values[i])
        acc += out[i] * out[i]
    mag = np.sqrt(acc)

    if mag != 0.0:
        for i in range(n):
            out[i] = out[i] / mag

    return out


@njit([sig_equals_f32], cache=True, error_model="numpy")
def vector_equals_nb_core(
    values_1,
    values_2,
    error):
    """
    Componentwise comparison within an absolute tolerance
    values_1, values_2: shape (N,)
    returns: True iff |a_i - b_i| <= error for every i
    """
    for i in range(values_1.shape[0]):
        diff = abs(np.float64(values_1[i]) - np.float64(values_2[i]))
        # written so that a nan difference fails the comparison
        if not diff <= error:
            return False

    return True


##########################################################################################
# Core numpy functions for single vectors
##########################################################################################


def vector_magnitude_np_core(
    values : np.ndarray) -> float:
    """
    Compute the magnitude of a vector.
    """

    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.sqrt(vector_dot_product_np_core(values,
                                                        values,
                                                        values.shape[0])))


def vector_dot_product_np_core(
    values_1 : np.ndarray,
    values_2 : np.ndarray,
    num_of_terms : int) -> float:
    """
    Compute the dot product of two vectors over the first num_of_terms components.
    """

    with np.errstate(over="ignore", invalid="ignore"):
        products = (values_1[:num_of_terms].astype(np.float64) *
                    values_2[:num_of_terms].astype(np.float64))
        # left-to-right, the same summation order as the kernels
        return float(np.add.accumulate(products)[-1])


def vector_cross_product_3D_np_core(
    values_1 : np.ndarray,
    values_2 : np.ndarray) -> np.ndarray:
    """
    Compute the cross product of two 3D vectors.
    """

    a = values_1.astype(np.float64)
    b = values_2.astype(np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        out = np.array([
                    a[Y] * b[Z] - a[Z] * b[Y],
                    a[Z] * b[X] - a[X] * b[Z],
                    a[X] * b[Y] - a[Y] * b[X]]
                        )

    return out


def vector_cross_product_2D_np_core(
    values_1 : np.ndarray,
    values_2 : np.ndarray) -> float:
    """
    Compute the scalar z term of the cross product of two 2D vectors.
    """

    a = values_1.astype(np.float64)
    b = values_2.astype(np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        return float(a[X] * b[Y] - b[X] * a[Y])


def vector_normalize_np_core(
    values : np.ndarray) -> np.ndarray:
    """
    Normalize a vector. A vector of magnitude exactly 0 comes back unchanged.
    """

    out = values.astype(np.float64)
    mag = vector_magnitude_np_core(values)
    if mag != 0.0:
        with np.errstate(invalid="ignore"):
            out = out / mag

    return out


def vector_equals_np_core(
    values_1 : np.ndarray,
    values_2 : np.ndarray,
    error : float = DEFAULT_ERROR) -> bool:
    """
    Compare two vectors componentwise within an absolute tolerance.
    """

    with np.errstate(over="ignore", invalid="ignore"):
        diff = np.abs(values_1.astype(np.float64) - values_2.astype(np.float64))
        return bool(np.all(diff <= error))
