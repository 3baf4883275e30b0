"""Derivatives and antiderivatives.

Both operators use the recurrence of the polynomial's basis and accept an
`order` (number of times to apply the operator).  A polynomial with a NaN
coefficient yields a single-coefficient NaN polynomial instead of running the
recurrence; the derivative of a constant is zero even when the constant is
NaN.  The antiderivative's constant coefficient is always zero.
"""

from polybasis.bases import basis_handler
from polybasis.errors import ArgumentError
from polybasis.logging import event
from polybasis.promotion import convert_scalar

def _check_order(order):
    if not isinstance(order, int) or order < 0:
        raise ArgumentError("order must be a non-negative integer, not {!r}".format(order))

def _nan(p, scalar_type):
    event("NaN coefficient in {!r}; result is NaN".format(p))
    return p.similar((0, [convert_scalar(float("nan"), scalar_type)]), scalar_type=scalar_type)

def _apply(p, h, R, on_run, on_terms):
    if p.sparse and h.term_wise:
        terms = { i : convert_scalar(c, R) for i, c in p.terms().items() }
        return p.result_class().from_terms(on_terms(terms), basis=p.basis, var=p.var, scalar_type=R)
    first, cs = p.run()
    return p.similar(on_run((first, [convert_scalar(c, R) for c in cs])), scalar_type=R)

def _derivative(p):
    h = basis_handler(p.basis)
    R = h.derivative_type(p.scalar_type)
    if p.is_constant():
        return p.result_class().zero(basis=p.basis, var=p.var, scalar_type=R)
    if p.has_nan():
        return _nan(p, R)
    return _apply(p, h, R, h.derivative, h.derivative_terms)

def _integral(p):
    h = basis_handler(p.basis)
    R = h.integral_type(p.scalar_type)
    if p.has_nan():
        return _nan(p, R)
    return _apply(p, h, R, h.integrate, h.integrate_terms)

def derivative(p, order=1):
    _check_order(order)
    if order == 0:
        return p.copy()
    for _ in range(order):
        p = _derivative(p)
    return p

def integrate(p, order=1):
    _check_order(order)
    if order == 0:
        return p.copy()
    for _ in range(order):
        p = _integral(p)
    return p
