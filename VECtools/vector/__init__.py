"""
VECtools Vector Module

Provides single-precision Vector2, Vector3 and Vector4 value types with
arithmetic, normalization, dot and cross products, interpolation, rotation
and distance/angle queries.

The core queries run through Numba JIT kernels over the float32 component
buffer, with NumPy fallbacks selected by `VectorBase.use_numba`.
"""

# Import main classes
from .base import VectorBase
from .operations import Vector2, Vector3, Vector4
from .constants import X, Y, Z, W, DEFAULT_ERROR

# Import core functions for advanced users
from .core_functions import (
    vector_magnitude_nb_core,
    vector_dot_product_nb_core,
    vector_cross_product_3D_nb_core,
    vector_cross_product_2D_nb_core,
    vector_normalize_nb_core,
    vector_equals_nb_core,
    vector_magnitude_np_core,
    vector_dot_product_np_core,
    vector_cross_product_3D_np_core,
    vector_cross_product_2D_np_core,
    vector_normalize_np_core,
    vector_equals_np_core
)

# Define public API
__all__ = [
    'VectorBase',
    'Vector2',
    'Vector3',
    'Vector4',
    'X', 'Y', 'Z', 'W',
    'DEFAULT_ERROR',
    # Core functions for advanced use
    'vector_magnitude_nb_core',
    'vector_dot_product_nb_core',
    'vector_cross_product_3D_nb_core',
    'vector_cross_product_2D_nb_core',
    'vector_normalize_nb_core',
    'vector_equals_nb_core',
    'vector_magnitude_np_core',
    'vector_dot_product_np_core',
    'vector_cross_product_3D_np_core',
    'vector_cross_product_2D_np_core',
    'vector_normalize_np_core',
    'vector_equals_np_core'
]
