"""Linear algebra on polynomials: companion matrices, roots, Vandermonde
matrices and least-squares fits.

Eigenvalues and least squares come from numpy.linalg; this module only builds
the matrices.

Important functions:
 - companion: matrix whose eigenvalues are the roots of a polynomial
 - roots: sorted roots via the companion matrix
 - vander: generalized Vandermonde matrix for a basis
 - fit: least-squares polynomial through sample points
"""

import numpy as np

from polybasis.bases import Basis, basis_handler
from polybasis.bases.interface import as_float_array
from polybasis.common import typechecked
from polybasis.containers import MutableDensePolynomial
from polybasis.errors import ArgumentError, DomainError
from polybasis.logging import task

def _companion_of(h, cs):
    if len(cs) == 2:
        return as_float_array([-cs[0] / cs[1]]).reshape(1, 1)
    return h.companion(cs)

def companion(p):
    d = p.degree()
    if d < 1:
        raise ArgumentError("companion matrix needs a polynomial of degree at least 1, not {}".format(d))
    h = basis_handler(p.basis)
    cs = p.coeffs_from_zero()
    with task("companion", basis=h.name, degree=d):
        return _companion_of(h, cs)

def roots(p):
    """Roots of `p`, sorted (complex roots by real part, then imaginary part)."""
    h = basis_handler(p.basis)
    with task("roots", basis=h.name, degree=p.degree()):
        if h.supports_negative_indices:
            first, cs = p.run()
            k, cs = h.roots_at_zero(list(cs))
            zeros = max(first, 0) + k
        else:
            cs = p.coeffs_from_zero()
            zeros = 0
        if len(cs) >= 2:
            found = np.linalg.eigvals(_companion_of(h, cs))
        else:
            found = np.array([])
        result = np.concatenate([np.zeros(zeros), found])
        return np.sort(result)

@typechecked
def vander(basis : Basis, points, order : int):
    """Matrix A with A[i, j] = (j-th basis function)(points[i]), 0 <= j <= order."""
    if order < 0:
        raise ArgumentError("order must be non-negative, not {}".format(order))
    x = np.asarray(points)
    if x.ndim != 1:
        raise ArgumentError("points must be one-dimensional")
    return basis_handler(basis).vander(x, order)

@typechecked
def fit(basis : Basis, x, y, deg : int, var : str = "x"):
    """Least-squares fit of degree `deg` through the points (x[i], y[i])."""
    h = basis_handler(basis)
    x = np.asarray(x)
    y = np.asarray(y)
    if x.shape != y.shape:
        raise ArgumentError("x and y must have the same shape ({} vs {})".format(x.shape, y.shape))
    if not h.in_domain(x):
        lo, hi = h.domain
        raise DomainError("fit points must lie in [{}, {}]".format(lo, hi))
    with task("fit", basis=h.name, deg=deg, points=len(x)):
        A = as_float_array(vander(basis, x, deg))
        coef, residuals, rank, sv = np.linalg.lstsq(A, as_float_array(y), rcond=None)
    return MutableDensePolynomial(coef.tolist(), basis=basis, var=var)
