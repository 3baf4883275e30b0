"""Changing the basis of a polynomial.

`convert(p, basis)` evaluates `p` at the degree-1 generator of the target
basis, so the evaluation recurrence of the source basis does the work:
Horner's rule builds a Chebyshev series from monomial coefficients and the
Clenshaw recurrence builds monomial coefficients from a Chebyshev series.
The result keeps the shape of `p`.
"""

from polybasis.bases import basis_handler
from polybasis.evaluation import evaluate
from polybasis.logging import task

def convert(p, basis):
    if basis == p.basis:
        return p.copy()
    source = basis_handler(p.basis)
    target = basis_handler(basis)
    x = p.result_class().variable(basis=basis, var=p.var, scalar_type=p.scalar_type)
    with task("convert", source=source.name, target=target.name, degree=p.degree()):
        return evaluate(p, x, checked=False)
