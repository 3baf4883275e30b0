"""Chebyshev polynomials of the first kind, T_0 = 1, T_1 = x,
T_{k+1} = 2x T_k - T_{k-1}, on the domain [-1, 1].

Evaluation uses the Clenshaw recurrence.  Products and quotients go through
z-series (see polybasis.zseries).  The calculus recurrences and the comrade
(companion) matrix follow the classical formulas for T_k.
"""

import numpy as np

from polybasis.common import declare_case
from polybasis.promotion import quotient_type
from polybasis.zseries import c_to_z, z_to_c, convolve, z_division
from .interface import Basis, BasisHandler, zero_based, as_float_array

ChebyshevTBasis = declare_case(Basis, "ChebyshevTBasis")
CHEBYSHEV_T = ChebyshevTBasis()

class ChebyshevTHandler(BasisHandler):

    basis = CHEBYSHEV_T
    name = "chebyshev"
    symbol = "T"
    domain = (-1, 1)

    def in_domain(self, x):
        lo, hi = self.domain
        vals = np.asarray(x)
        if vals.dtype.kind == "c":
            ok = (vals.imag == 0) & (vals.real >= lo) & (vals.real <= hi)
        else:
            ok = (vals >= lo) & (vals <= hi)
        return bool(np.all(ok))

    def evaluate(self, p, ring):
        cs = zero_based(p.run())
        x = ring.x
        one = ring.one
        if not cs:
            return ring.constant(p.scalar_type(0))
        if len(cs) == 1:
            return ring.constant(cs[0])
        c0 = cs[-2] * one
        c1 = cs[-1] * one
        for i in range(len(cs) - 3, -1, -1):
            c0, c1 = cs[i] * one - c1, c0 + ring.mul(c1, x) * 2
        return ring.promote(c0 + ring.mul(c1, x), p.scalar_type)

    def multiply_type(self, t):
        # halving in the z-series transform
        return quotient_type(t)

    def multiply(self, a, b):
        z1 = c_to_z(zero_based(a))
        z2 = c_to_z(zero_based(b))
        return (0, z_to_c(convolve(z1, z2)))

    def divrem(self, num, den):
        quo, rem = z_division(c_to_z(num), c_to_z(den))
        return z_to_c(quo), z_to_c(rem)

    def derivative(self, run):
        q = zero_based(run)
        n = len(q) - 1
        der = [None] * n
        for j in range(n, 2, -1):
            der[j - 1] = (2 * j) * q[j]
            q[j - 2] += (j * q[j]) / (j - 2)
        if n > 1:
            der[1] = 4 * q[2]
        der[0] = q[1]
        return (0, der)

    def integrate(self, run):
        cs = zero_based(run)
        n = len(cs)
        if n == 0:
            return (0, [])
        zero = cs[0] * 0
        if n == 1:
            return (0, [zero, cs[0]])
        a = [zero] * (n + 1)
        a[1] = cs[0]
        a[2] = cs[1] / 4
        for i in range(2, n):
            a[i + 1] = cs[i] / (2 * (i + 1))
            a[i - 1] -= cs[i] / (2 * (i - 1))
        return (0, a)

    def companion(self, cs):
        d = len(cs) - 1
        monic = as_float_array([c / cs[-1] for c in cs])
        scl = np.array([1.0] + [np.sqrt(0.5)] * (d - 1))
        diag = np.array([np.sqrt(0.5)] + [0.5] * (d - 2))
        comp = (np.diag(diag, 1) + np.diag(diag, -1)).astype(monic.dtype)
        comp[:, -1] -= monic[:d] * scl / scl[-1] / 2
        return comp

    def vander(self, x, n):
        A = np.empty((len(x), n + 1), dtype=x.dtype)
        A[:, 0] = 1
        if n > 0:
            A[:, 1] = x
            for i in range(2, n + 1):
                A[:, i] = A[:, i - 1] * 2 * x - A[:, i - 2]
        return A

    def constant_term(self, p):
        return p(0)
