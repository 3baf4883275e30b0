"""Ring operations for evaluation arguments.

The evaluation recurrences only need a multiplicative identity, a product
and integer powers.  What those mean depends on the argument:
 - scalars and 1-D arrays: ordinary (elementwise) arithmetic
 - square 2-D arrays: matrix products, constants scaled by the identity
 - polynomials: container arithmetic
"""

import operator

import numpy as np

from polybasis.errors import ArgumentError, UnsupportedOperation
from polybasis.promotion import is_scalar, promoted_type, convert_scalar

def prepare_argument(x):
    """Turn lists and tuples into numpy arrays; leave everything else alone."""
    if isinstance(x, (list, tuple)):
        return np.asarray(x)
    return x

def is_matrix(x):
    return isinstance(x, np.ndarray) and x.ndim == 2

class Ring(object):
    __slots__ = ("x", "one", "mul")

    def __init__(self, x):
        self.x = x
        if is_matrix(x):
            if x.shape[0] != x.shape[1]:
                raise ArgumentError("cannot evaluate at a non-square {}x{} matrix".format(*x.shape))
            self.one = np.eye(x.shape[0], dtype=x.dtype)
            self.mul = np.matmul
        else:
            self.one = 1
            self.mul = operator.mul

    def constant(self, c):
        """The constant `c` as an element of this ring, with promoted type."""
        x = self.x
        if is_matrix(x):
            return c * self.one
        if is_scalar(x):
            return convert_scalar(c, promoted_type(type(c), type(x)))
        if isinstance(x, np.ndarray):
            return c + np.zeros_like(x)
        return c + 0 * x

    def promote(self, y, t):
        """Convert a result computed from `t` coefficients to the promoted
        type for scalar arguments; other arguments are returned unchanged."""
        if is_scalar(self.x):
            return convert_scalar(y, promoted_type(t, type(self.x)))
        return y

    def power(self, k):
        x = self.x
        if is_matrix(x):
            return np.linalg.matrix_power(x, k)
        if is_scalar(x) or isinstance(x, np.ndarray):
            if k < 0 and np.issubdtype(np.asarray(x).dtype, np.integer):
                # numpy refuses negative powers of integers
                x = np.asarray(x, dtype=float) if isinstance(x, np.ndarray) else float(x)
            return x ** k
        if k < 0:
            raise UnsupportedOperation("negative powers of a {} are not defined".format(type(x).__name__))
        return x ** k
