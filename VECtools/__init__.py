"""
VECtools: single-precision 2D, 3D and 4D vector algebra.
"""

import logging

from .vector import Vector2, Vector3, Vector4, VectorBase, DEFAULT_ERROR

logger = logging.getLogger(__name__)

# Version info
__version__ = "0.1.0"


def set_use_numba(
    use_numba: bool) -> None:
    """
    Select the kernels behind the core vector queries for every vector type.

    Args:
        use_numba (bool): True for the Numba JIT kernels, False for the NumPy
                          implementations. Both give the same results.
    """
    VectorBase.use_numba = bool(use_numba)
    logger.info("Vector core functions now use %s", "numba" if use_numba else "numpy")


__all__ = [
    'Vector2',
    'Vector3',
    'Vector4',
    'VectorBase',
    'DEFAULT_ERROR',
    'set_use_numba'
]
