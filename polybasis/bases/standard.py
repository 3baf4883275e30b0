"""The standard (monomial) basis 1, x, x**2, ...

Evaluation is Horner's rule, products are convolutions, and the calculus
operators are the power rule.  This is the only basis that accepts runs with
negative indices (Laurent polynomials).
"""

import numpy as np

from polybasis.common import declare_case
from polybasis.errors import UnsupportedOperation
from polybasis.zseries import convolve
from .interface import Basis, BasisHandler, as_float_array

StandardBasis = declare_case(Basis, "StandardBasis")
STANDARD = StandardBasis()

class StandardHandler(BasisHandler):

    basis = STANDARD
    name = "standard"
    symbol = "x"
    supports_negative_indices = True
    term_wise = True

    def evaluate(self, p, ring):
        if p.sparse:
            return self.evaluate_terms(p.terms(), ring, p.scalar_type)
        first, cs = p.run()
        x = ring.x
        if not cs:
            return ring.constant(p.scalar_type(0))
        y = ring.constant(cs[-1])
        for c in reversed(cs[:-1]):
            y = ring.mul(y, x) + c * ring.one
        if first != 0:
            y = ring.mul(y, ring.power(first))
        return y

    def multiply(self, a, b):
        (fa, ca), (fb, cb) = a, b
        return (fa + fb, convolve(ca, cb))

    def evaluate_terms(self, terms, ring, scalar_type):
        y = ring.constant(scalar_type(0))
        for i, c in sorted(terms.items()):
            y = y + c * ring.power(i)
        return y

    def multiply_terms(self, a, b):
        out = {}
        for i, ca in a.items():
            for j, cb in b.items():
                k = i + j
                out[k] = out[k] + ca * cb if k in out else ca * cb
        return out

    def divrem(self, num, den):
        """Long division of coefficient lists, len(num) >= len(den) >= 2."""
        m = len(den) - 1
        rem = list(num)
        lead = den[-1]
        quo = [None] * (len(num) - m)
        for k in reversed(range(len(quo))):
            q = rem[m + k] / lead
            quo[k] = q
            for j in range(m + 1):
                rem[j + k] = rem[j + k] - q * den[j]
        return quo, rem[:m]

    def derivative_type(self, t):
        return t

    def derivative(self, run):
        first, cs = run
        if first == 0:
            return (0, [k * c for k, c in enumerate(cs)][1:])
        zero = cs[0] * 0
        return (first - 1, [(first + i) * c if first + i != 0 else zero for i, c in enumerate(cs)])

    def integrate(self, run):
        first, cs = run
        out = []
        for i, c in enumerate(cs):
            k = first + i
            if k == -1:
                if c != 0:
                    raise UnsupportedOperation("cannot integrate a Laurent polynomial with an x**-1 term")
                out.append(c / 1)
            else:
                out.append(c / (k + 1))
        return (first + 1, out)

    def derivative_terms(self, terms):
        return { i - 1 : i * c for i, c in terms.items() if i != 0 }

    def integrate_terms(self, terms):
        if terms.get(-1, 0) != 0:
            raise UnsupportedOperation("cannot integrate a Laurent polynomial with an x**-1 term")
        return { i + 1 : c / (i + 1) for i, c in terms.items() if i != -1 }

    def companion(self, cs):
        d = len(cs) - 1
        monic = as_float_array([c / cs[-1] for c in cs])
        comp = np.zeros((d, d), dtype=monic.dtype)
        comp[1:, :-1] += np.eye(d - 1, dtype=monic.dtype)
        comp[:, -1] -= monic[:d]
        return comp

    def vander(self, x, n):
        A = np.empty((len(x), n + 1), dtype=x.dtype)
        A[:, 0] = 1
        for i in range(1, n + 1):
            A[:, i] = A[:, i - 1] * x
        return A

    def roots_at_zero(self, cs):
        """Split off zero roots: count vanishing low-order coefficients."""
        k = 0
        while k < len(cs) and cs[k] == 0:
            k += 1
        return k, cs[k:]
