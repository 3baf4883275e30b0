"""Univariate polynomials in the standard and Chebyshev bases.

Important names:
 - Polynomial, ChebyshevT: mutable dense constructors
 - MutableDensePolynomial, ImmutableDensePolynomial, DenseViewPolynomial,
   SparsePolynomial, LaurentPolynomial: container shapes
 - STANDARD, CHEBYSHEV_T: basis tags
 - evaluate, evalpoly, derivative, integrate, divrem, companion, roots,
   vander, fit, convert
"""

from polybasis.bases import Basis, STANDARD, CHEBYSHEV_T, StandardBasis, ChebyshevTBasis, basis_handler
from polybasis.containers import (
    AbstractPolynomial, MutableDensePolynomial, ImmutableDensePolynomial,
    DenseViewPolynomial, SparsePolynomial, LaurentPolynomial,
    Polynomial, ChebyshevT)
from polybasis.errors import (
    PolynomialError, DomainError, MismatchedBasis, MismatchedVariable,
    UnsupportedOperation, DivideError, ArgumentError)
from polybasis.evaluation import evaluate, evalpoly
from polybasis.arithmetic import divrem
from polybasis.calculus import derivative, integrate
from polybasis.roots import companion, roots, vander, fit
from polybasis.conversion import convert
