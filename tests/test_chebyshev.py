import math
import unittest

import numpy as np

from polybasis import (
    ChebyshevT, CHEBYSHEV_T, MutableDensePolynomial, DomainError, ArgumentError,
    DivideError, UnsupportedOperation, evaluate, evalpoly, roots, companion, vander, fit)

class TestChebyshevEvaluation(unittest.TestCase):

    def test_clenshaw(self):
        self.assertEqual(ChebyshevT([1, 0, 3, 4])(0.5), -4.5)

    def test_vector_argument(self):
        p = ChebyshevT([2.5, 1.5, 1.0])
        ys = p([-1, -0.5, 0, 0.5, 1])
        assert np.allclose(ys, [2.0, 1.25, 1.5, 2.75, 5.0])

    def test_basis_functions(self):
        xs = np.linspace(-1, 1, 7)
        for k in range(6):
            t = ChebyshevT([0] * k + [1])
            for x in xs:
                self.assertAlmostEqual(t(x), math.cos(k * math.acos(x)))

    def test_variable(self):
        x = MutableDensePolynomial.variable(basis=CHEBYSHEV_T)
        self.assertEqual(x.coeffs(), [0.0, 1.0])
        self.assertEqual(x(0.25), 0.25)

    def test_constants(self):
        self.assertEqual(ChebyshevT([])(0.5), 0.0)
        self.assertEqual(ChebyshevT([3])(0.5), 3.0)

    def test_domain(self):
        p = ChebyshevT([1, 0, 3, 4])
        with self.assertRaises(DomainError):
            p(5.0)
        with self.assertRaises(ValueError):
            p(-1.5)
        with self.assertRaises(DomainError):
            p([0.0, 2.0])
        with self.assertRaises(DomainError):
            p(complex(0.5, 0.1))
        with self.assertRaises(DomainError):
            p(float("nan"))
        self.assertAlmostEqual(p(complex(0.5, 0)), -4.5)
        self.assertEqual(p(1), 8)

    def test_unchecked(self):
        p = ChebyshevT([1, 0, 3, 4])
        self.assertEqual(evaluate(p, 5.0, checked=False), 2088.0)
        self.assertEqual(p.evaluate(5.0, checked=False), 2088.0)
        self.assertEqual(evalpoly(5.0, p, checked=False), 2088.0)

    def test_matrix_argument(self):
        # T_2(X) = 2 X^2 - I, and X^2 = I here
        X = np.array([[0.0, 1.0], [1.0, 0.0]])
        assert np.allclose(ChebyshevT([0, 0, 1])(X), np.eye(2))

    def test_result_type_is_promoted(self):
        y = ChebyshevT([1.0, 0.0, 3.0, 4.0])(np.float32(0.5))
        self.assertIs(type(y), np.float64)
        self.assertEqual(y, -4.5)
        self.assertIs(type(ChebyshevT([1, 0, 3, 4])(1)), int)
        self.assertIs(type(ChebyshevT([1, 2])(0.5)), float)

class TestChebyshevArithmetic(unittest.TestCase):

    def test_product(self):
        p = ChebyshevT([0, 0, 1]) * ChebyshevT([0, 0, 0, 1])
        self.assertEqual(p.coeffs(), [0, 0.5, 0, 0, 0, 0.5])
        self.assertIs(p.scalar_type, float)

    def test_product_of_basis_functions(self):
        for m in range(4):
            for n in range(4):
                p = ChebyshevT([0] * m + [1]) * ChebyshevT([0] * n + [1])
                expected = [0.0] * (m + n + 1)
                expected[m + n] += 0.5
                expected[abs(m - n)] += 0.5
                self.assertEqual(p.coeffs(), expected)

    def test_division(self):
        q, r = ChebyshevT([0, 0, 1]).divrem(ChebyshevT([0, 1]))
        self.assertEqual(q.coeffs(), [0.0, 2.0])
        self.assertEqual(r.coeffs(), [-1.0])

    def test_division_identity(self):
        p = ChebyshevT([1, 2, 3, 4, 5])
        d = ChebyshevT([1, 1, 2])
        q, r = divmod(p, d)
        assert r.degree() < d.degree()
        assert np.allclose((d * q + r).coeffs(), p.coeffs())

    def test_division_edge_cases(self):
        for zero in (ChebyshevT([]), ChebyshevT([0.0])):
            with self.assertRaises(DivideError):
                ChebyshevT([1, 2]).divrem(zero)
        q, r = ChebyshevT([1, 2]).divrem(ChebyshevT([1, 2, 3]))
        assert q.is_zero()
        self.assertEqual(r, ChebyshevT([1, 2]))
        q, r = ChebyshevT([2, 4, 6]).divrem(ChebyshevT([2]))
        self.assertEqual(q.coeffs(), [1.0, 2.0, 3.0])
        assert r.is_zero()

    def test_cubic_by_linear(self):
        p = ChebyshevT([1, 2, 3, 4])
        d = ChebyshevT([1, 2])
        q, r = p.divrem(d)
        self.assertEqual(q.degree(), 2)
        assert r.degree() <= 0
        assert np.allclose(q.coeffs(), [-0.5, -1.0, 4.0])
        assert np.allclose(r.coeffs(), [2.5])
        assert np.allclose((d * q + r).coeffs(), p.coeffs())

    def test_scalar_add_uses_constant_function(self):
        self.assertEqual(ChebyshevT([1, 2]) + 1, ChebyshevT([2, 2]))

    def test_power(self):
        self.assertEqual(ChebyshevT([0, 1]) ** 2, ChebyshevT([0.5, 0, 0.5]))

class TestChebyshevCalculus(unittest.TestCase):

    def test_derivative(self):
        self.assertEqual(ChebyshevT([1, 2, 3, 4]).derivative().coeffs(), [14, 12, 24])
        self.assertEqual(ChebyshevT([0, 0, 0, 1]).derivative().coeffs(), [3, 0, 6])
        self.assertEqual(ChebyshevT([1, 2]).derivative().coeffs(), [2])
        assert ChebyshevT([7]).derivative().is_zero()

    def test_derivative_order(self):
        p = ChebyshevT([1, 2, 3, 4])
        self.assertEqual(p.derivative(2), p.derivative().derivative())
        self.assertEqual(p.derivative(0), p)
        with self.assertRaises(ArgumentError):
            p.derivative(-1)

    def test_integral(self):
        self.assertEqual(ChebyshevT([1, 2, 3]).integrate().coeffs(), [0, -0.5, 0.5, 0.5])
        self.assertEqual(ChebyshevT([2]).integrate().coeffs(), [0, 2])
        assert ChebyshevT().integrate().is_zero()

    def test_integral_inverts_derivative(self):
        p = ChebyshevT([1, 2, 3, 4])
        self.assertEqual(p.derivative().integrate().coeffs(), [0, 2, 3, 4])
        self.assertEqual(p.integrate().derivative(), p)

    def test_nan(self):
        p = ChebyshevT([1, float("nan"), 2])
        d = p.derivative()
        self.assertEqual(d.degree(), 0)
        assert math.isnan(d[0])
        assert math.isnan(p.integrate()[0])
        assert ChebyshevT([float("nan")]).derivative().is_zero()

    def test_negative_indices_unsupported(self):
        with self.assertRaises(UnsupportedOperation):
            ChebyshevT([1, 2])[-1]

class TestChebyshevLinearAlgebra(unittest.TestCase):

    def test_companion(self):
        c = companion(ChebyshevT([0, 0, 1]))
        h = math.sqrt(0.5)
        assert np.allclose(c, [[0, h], [h, 0]])
        with self.assertRaises(ArgumentError):
            companion(ChebyshevT([3]))

    def test_roots(self):
        assert np.allclose(roots(ChebyshevT([0, 0, 1])), [-math.sqrt(0.5), math.sqrt(0.5)])
        r = math.sqrt(3) / 2
        assert np.allclose(roots(ChebyshevT([0, 0, 0, 1])), [-r, 0, r])
        assert np.allclose(roots(ChebyshevT([1, 2])), [-0.5])

    def test_roots_are_zeros(self):
        p = ChebyshevT([1, -2, 0.5, 3])
        for z in roots(p):
            self.assertAlmostEqual(abs(evaluate(p, z, checked=False)), 0.0)

    def test_vander(self):
        A = vander(CHEBYSHEV_T, [0, 0.5, 1], 3)
        assert np.allclose(A, [[1, 0, -1, 0], [1, 0.5, -0.5, -1], [1, 1, 1, 1]])

    def test_vander_agrees_with_evaluation(self):
        xs = np.linspace(-1, 1, 5)
        cs = [1.0, -2.0, 0.5, 3.0]
        assert np.allclose(vander(CHEBYSHEV_T, xs, 3) @ cs, ChebyshevT(cs)(xs))

    def test_fit(self):
        xs = np.linspace(-1, 1, 9)
        p = ChebyshevT([1.0, -2.0, 0.5])
        q = fit(CHEBYSHEV_T, xs, p(xs), 2)
        self.assertEqual(q.basis, CHEBYSHEV_T)
        assert np.allclose(q.coeffs(), p.coeffs())
        with self.assertRaises(DomainError):
            fit(CHEBYSHEV_T, [0.0, 2.0], [1.0, 1.0], 1)

class TestHandlerRegistry(unittest.TestCase):

    def test_lookup(self):
        from polybasis.bases import basis_handler, basis_named, all_basis_handlers, Basis
        h = basis_handler(CHEBYSHEV_T)
        self.assertEqual((h.name, h.symbol, h.domain), ("chebyshev", "T", (-1, 1)))
        self.assertEqual(basis_named("chebyshev"), CHEBYSHEV_T)
        self.assertEqual([h.name for h in all_basis_handlers()], ["standard", "chebyshev"])
        with self.assertRaises(ValueError):
            basis_named("legendre")
        with self.assertRaises(UnsupportedOperation):
            basis_handler(Basis())
