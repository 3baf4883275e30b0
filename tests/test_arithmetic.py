from fractions import Fraction
import unittest

import numpy as np

from polybasis import (
    Polynomial, ChebyshevT, ImmutableDensePolynomial, MutableDensePolynomial,
    MismatchedBasis, MismatchedVariable, DivideError, ArgumentError)
from polybasis import opts
from polybasis.arithmetic import zero_tolerance

class TestCompatibility(unittest.TestCase):

    def test_mismatched_basis(self):
        with self.assertRaises(MismatchedBasis):
            Polynomial([1, 2]) + ChebyshevT([1, 2])
        with self.assertRaises(TypeError):
            Polynomial([1, 2]) * ChebyshevT([1, 2])

    def test_mismatched_variable(self):
        with self.assertRaises(MismatchedVariable):
            Polynomial([1, 2], var="x") - Polynomial([1, 2], var="y")
        with self.assertRaises(MismatchedVariable):
            Polynomial([1, 2], var="x").divrem(Polynomial([1, 2], var="y"))

class TestScalarOperations(unittest.TestCase):

    def test_add(self):
        self.assertEqual(Polynomial([1, 2]) + 3, Polynomial([4, 2]))
        self.assertEqual(3 + Polynomial([1, 2]), Polynomial([4, 2]))
        self.assertEqual(Polynomial([]) + 3, Polynomial([3]))

    def test_subtract(self):
        self.assertEqual(Polynomial([1, 2]) - 1, Polynomial([0, 2]))
        self.assertEqual(3 - Polynomial([1, 2]), Polynomial([2, -2]))

    def test_multiply(self):
        p = Polynomial([1, 2]) * 2
        self.assertEqual(p.coeffs(), [2, 4])
        self.assertIs(p.scalar_type, int)
        assert (Polynomial([1, 2]) * 0).is_zero()

    def test_divide(self):
        p = Polynomial([1, 2]) / 2
        self.assertEqual(p.coeffs(), [0.5, 1.0])
        self.assertIs(p.scalar_type, float)
        q = Polynomial([Fraction(1), 2]) / 3
        self.assertEqual(q.coeffs(), [Fraction(1, 3), Fraction(2, 3)])
        with self.assertRaises(DivideError):
            Polynomial([1, 2]) / 0.0

    def test_numpy_scalar_on_the_left(self):
        p = np.float64(2) * Polynomial([1, 2])
        self.assertIsInstance(p, MutableDensePolynomial)
        self.assertEqual(p, Polynomial([2, 4]))

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            Polynomial([1, 2]) + "a"

class TestPolynomialOperations(unittest.TestCase):

    def test_add_and_cancel(self):
        p = Polynomial([1, 2, 3])
        self.assertEqual(p + Polynomial([0, 0, -3]), Polynomial([1, 2]))
        assert (p - p).is_zero()
        self.assertEqual((p - p).degree(), -1)

    def test_negate(self):
        self.assertEqual(-Polynomial([1, -2]), Polynomial([-1, 2]))
        self.assertEqual(+Polynomial([1, -2]), Polynomial([1, -2]))

    def test_promotion(self):
        self.assertIs((Polynomial([1, 2]) + Polynomial([0.5])).scalar_type, float)
        self.assertIs((Polynomial([Fraction(1, 2)]) * Polynomial([2])).scalar_type, Fraction)
        self.assertIs((Polynomial([1]) + Polynomial([1j])).scalar_type, complex)

    def test_multiply_by_zero(self):
        p = ChebyshevT([1, 2]) * ChebyshevT()
        assert p.is_zero()
        self.assertIs(p.scalar_type, float)

    def test_immutable_operands(self):
        p = ImmutableDensePolynomial([1, 1])
        q = p * p
        self.assertIsInstance(q, ImmutableDensePolynomial)
        self.assertEqual(q, Polynomial([1, 2, 1]))

class TestDivision(unittest.TestCase):

    def test_exact_fraction_identity(self):
        p = Polynomial([Fraction(1), 0, 1])
        d = Polynomial([Fraction(1), 2])
        q, r = divmod(p, d)
        self.assertIs(q.scalar_type, Fraction)
        self.assertEqual(d * q + r, p)
        self.assertEqual(r.degree(), 0)

    def test_float_identity(self):
        p = Polynomial([3.0, -1.0, 4.0, 1.0, 5.0])
        d = Polynomial([2.0, 7.0, 1.0])
        q, r = divmod(p, d)
        assert r.degree() < d.degree()
        assert np.allclose((d * q + r).coeffs(), p.coeffs())

    def test_zero_tolerance(self):
        p = Polynomial([1.0, 2.0])
        tiny = Polynomial([1e-12])
        q, r = p.divrem(tiny)
        self.assertEqual(q.degree(), 1)
        snap = opts.snapshot()
        try:
            zero_tolerance.value = 1e-9
            with self.assertRaises(DivideError):
                p.divrem(tiny)
        finally:
            opts.restore(snap)

class TestPower(unittest.TestCase):

    def test_power(self):
        self.assertEqual(Polynomial([1, 1]) ** 3, Polynomial([1, 3, 3, 1]))
        self.assertEqual(Polynomial([1, 1]) ** 0, 1)
        self.assertEqual(Polynomial([0, 2]) ** 1, Polynomial([0, 2]))

    def test_bad_exponent(self):
        with self.assertRaises(ArgumentError):
            Polynomial([1, 1]) ** -1
        with self.assertRaises(ArgumentError):
            Polynomial([1, 1]) ** 1.5
