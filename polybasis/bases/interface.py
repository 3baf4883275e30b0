"""The basis tag type and the interface every basis handler implements.

A basis tag carries no data; it only says which functions a container's
coefficients multiply.  All behavior lives in a BasisHandler, looked up
through `polybasis.bases.basis_handler`.

Handlers work on "runs": pairs (first_index, coefficients) where the
coefficient list starts at `first_index`.  Only the standard basis accepts
runs with a negative first index.
"""

import math

import numpy as np

from polybasis.common import ADT
from polybasis.errors import UnsupportedOperation
from polybasis.promotion import quotient_type

class Basis(ADT):
    pass

def zero_based(run, zero=0):
    """Coefficient list starting at index 0 for the given run."""
    first, cs = run
    if first < 0:
        raise UnsupportedOperation("basis does not support negative indices (first index is {})".format(first))
    return [zero] * first + list(cs)

def as_float_array(values):
    """A float (or complex) numpy array for handing to LAPACK."""
    arr = np.asarray(values)
    if arr.dtype.kind not in "fc":
        if any(isinstance(v, complex) for v in values):
            arr = arr.astype(np.complex128)
        else:
            arr = arr.astype(np.float64)
    return arr

class BasisHandler(object):
    """Behavior for one basis.  Methods without a recurrence raise
    UnsupportedOperation."""

    basis = None
    name = None
    symbol = None
    domain = (-math.inf, math.inf)
    supports_negative_indices = False

    # Handlers with term_wise set also implement evaluate_terms,
    # multiply_terms, derivative_terms and integrate_terms on {index: coeff}
    # dicts; sparse containers use them instead of dense runs.
    term_wise = False

    def in_domain(self, x):
        return True

    def evaluate(self, p, ring):
        raise UnsupportedOperation("{} basis has no evaluation recurrence".format(self.name))

    def multiply(self, a, b):
        raise UnsupportedOperation("{} basis has no product rule".format(self.name))

    def divrem(self, num, den):
        raise UnsupportedOperation("{} basis has no division algorithm".format(self.name))

    def multiply_type(self, t):
        return t

    def derivative_type(self, t):
        return quotient_type(t)

    def integral_type(self, t):
        return quotient_type(t)

    def derivative(self, run):
        raise UnsupportedOperation("{} basis has no derivative recurrence".format(self.name))

    def integrate(self, run):
        raise UnsupportedOperation("{} basis has no integral recurrence".format(self.name))

    def evaluate_terms(self, terms, ring, scalar_type):
        raise UnsupportedOperation("{} basis has no term-wise evaluation".format(self.name))

    def multiply_terms(self, a, b):
        raise UnsupportedOperation("{} basis has no term-wise product".format(self.name))

    def derivative_terms(self, terms):
        raise UnsupportedOperation("{} basis has no term-wise derivative".format(self.name))

    def integrate_terms(self, terms):
        raise UnsupportedOperation("{} basis has no term-wise integral".format(self.name))

    def companion(self, cs):
        raise UnsupportedOperation("{} basis has no companion matrix".format(self.name))

    def vander(self, x, n):
        raise UnsupportedOperation("{} basis has no Vandermonde matrix".format(self.name))

    def constant_term(self, p):
        return p[0]

    def __repr__(self):
        return "{}()".format(type(self).__name__)
