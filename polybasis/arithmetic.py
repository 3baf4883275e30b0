"""Arithmetic on coefficient containers.

Addition, subtraction and scalar operations work coefficient-wise for every
basis; products and division use the basis handler (convolution for the
standard basis, z-series for Chebyshev).  Operands must share a basis and a
variable name.

Results keep the left operand's shape, except that a Laurent operand makes
the result Laurent and a view produces a mutable dense result.
"""

from polybasis.bases import basis_handler
from polybasis.errors import MismatchedBasis, MismatchedVariable, DivideError, ArgumentError
from polybasis.logging import task
from polybasis.opts import Option
from polybasis.promotion import promoted_type, quotient_type, convert_scalar

zero_tolerance = Option("zero-tolerance", float, 0.0, metavar="TOL",
    description="A constant divisor whose magnitude is at most this is treated as zero")

def check_compatible(p, q):
    if p.basis != q.basis:
        raise MismatchedBasis("cannot combine {!r} and {!r} polynomials".format(p.basis, q.basis))
    if p.var != q.var:
        raise MismatchedVariable("polynomials must have the same variable ({!r} vs {!r})".format(p.var, q.var))

def combined_class(p, q):
    if q.laurent and not p.laurent:
        return q.result_class()
    return p.result_class()

def _build(cls, p, terms_or_run, scalar_type):
    if isinstance(terms_or_run, tuple):
        return cls.from_run(terms_or_run, basis=p.basis, var=p.var, scalar_type=scalar_type)
    return cls.from_terms(terms_or_run, basis=p.basis, var=p.var, scalar_type=scalar_type)

def add(p, q):
    check_compatible(p, q)
    R = promoted_type(p.scalar_type, q.scalar_type)
    terms = dict(p.terms())
    for i, c in q.terms().items():
        terms[i] = terms[i] + c if i in terms else c
    return _build(combined_class(p, q), p, terms, R)

def subtract(p, q):
    check_compatible(p, q)
    R = promoted_type(p.scalar_type, q.scalar_type)
    terms = dict(p.terms())
    for i, c in q.terms().items():
        terms[i] = terms[i] - c if i in terms else -c
    return _build(combined_class(p, q), p, terms, R)

def negate(p):
    return _build(p.result_class(), p, { i : -c for i, c in p.terms().items() }, p.scalar_type)

def scalar_add(p, c):
    """Add `c` to the constant basis function (index 0 for every basis)."""
    R = promoted_type(p.scalar_type, type(c))
    terms = dict(p.terms())
    terms[0] = terms.get(0, R(0)) + c
    return _build(p.result_class(), p, terms, R)

def scalar_multiply(p, c):
    R = promoted_type(p.scalar_type, type(c))
    return _build(p.result_class(), p, { i : v * c for i, v in p.terms().items() }, R)

def scalar_divide(p, c):
    if c == 0:
        raise DivideError("division of a polynomial by zero")
    R = quotient_type(promoted_type(p.scalar_type, type(c)))
    return _build(p.result_class(), p, { i : v / c for i, v in p.terms().items() }, R)

def multiply(p, q):
    check_compatible(p, q)
    h = basis_handler(p.basis)
    R = h.multiply_type(promoted_type(p.scalar_type, q.scalar_type))
    cls = combined_class(p, q)
    if p.is_zero() or q.is_zero():
        return cls.zero(basis=p.basis, var=p.var, scalar_type=R)
    if (p.sparse or q.sparse) and h.term_wise:
        return _build(cls, p, h.multiply_terms(p.terms(), q.terms()), R)
    return _build(cls, p, h.multiply(p.run(), q.run()), R)

def divrem(p, q):
    """Quotient and remainder with p == q*quotient + remainder and
    degree(remainder) < degree(q)."""
    check_compatible(p, q)
    h = basis_handler(p.basis)
    R = quotient_type(promoted_type(p.scalar_type, q.scalar_type))
    cls = combined_class(p, q)
    num = p.coeffs_from_zero()
    den = q.coeffs_from_zero()
    n = p.degree()
    m = q.degree()
    zero = cls.zero(basis=p.basis, var=p.var, scalar_type=R)

    if m <= 0 and (q.is_zero() or abs(den[0]) <= zero_tolerance.value):
        raise DivideError("division by a zero polynomial")
    if n < m:
        return zero, _build(cls, p, (0, num), R)
    if m == 0:
        lead = den[0]
        return _build(cls, p, (0, [c / lead for c in num]), R), zero

    with task("divrem", basis=h.name, n=n, m=m):
        quo, rem = h.divrem(
            [convert_scalar(c, R) for c in num],
            [convert_scalar(c, R) for c in den])
    return _build(cls, p, (0, quo), R), _build(cls, p, (0, rem), R)

def power(p, n):
    if not isinstance(n, int) or n < 0:
        raise ArgumentError("polynomials can only be raised to non-negative integer powers, not {!r}".format(n))
    result = p.result_class().one(basis=p.basis, var=p.var, scalar_type=p.scalar_type)
    base = p
    while n:
        if n & 1:
            result = multiply(result, base)
        n >>= 1
        if n:
            base = multiply(base, base)
    return result
