"""Evaluating polynomials.

Important functions:
 - evaluate: value of a polynomial at a scalar, vector, matrix or polynomial
 - evalpoly: the same, argument first, for callers that think of evaluation
   as a function of the point

The recurrence is chosen by the polynomial's basis (Horner for the standard
basis, Clenshaw for Chebyshev).  With `checked=True` (the default) scalar and
vector arguments outside the basis domain raise DomainError; matrix and
polynomial arguments are never checked.
"""

import numpy as np

from polybasis.bases import basis_handler
from polybasis.errors import DomainError
from polybasis.promotion import is_scalar
from polybasis.rings import Ring, prepare_argument

def _checkable(x):
    return is_scalar(x) or (isinstance(x, np.ndarray) and x.ndim < 2)

def evaluate(p, x, checked=True):
    h = basis_handler(p.basis)
    x = prepare_argument(x)
    if checked and _checkable(x) and not h.in_domain(x):
        lo, hi = h.domain
        raise DomainError("{} outside of domain [{}, {}]".format(x, lo, hi))
    return h.evaluate(p, Ring(x))

def evalpoly(x, p, checked=True):
    return evaluate(p, x, checked=checked)
