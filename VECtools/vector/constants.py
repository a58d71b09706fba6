from numba import types

##############################################################################
# Global constants
##############################################################################

# Component offsets into the vector buffer
X, Y, Z, W = 0, 1, 2, 3
DEFAULT_ERROR = 1e-5

# The buffer dtype shared by every vector type
VECTOR_DTYPE = "float32"


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Vector magnitude signature (any dimension)
sig_mag_f32 = types.float64(
    types.float32[:]
    )

# Vector dot product signature, summed over the first `num_of_terms` components
sig_dot_f32 = types.float64(
    types.float32[:],
    types.float32[:],
    types.int64
    )

# Vector cross product signatures (3D returns vector, 2D returns scalar)
sig_cross_3d_f32 = types.float64[:]( # three-dimensional
    types.float32[:],
    types.float32[:]
    )
sig_cross_2d_f32 = types.float64( # two-dimensional
    types.float32[:],
    types.float32[:]
    )

# Vector normalize signature (any dimension)
sig_norm_f32 = types.float64[:](
    types.float32[:]
    )

# Componentwise tolerant equality signature (any dimension)
sig_equals_f32 = types.boolean(
    types.float32[:],
    types.float32[:],
    types.float64
    )
