"""Coefficient containers: univariate polynomials tagged with a basis.

All shapes share the AbstractPolynomial interface: indexing by degree,
`degree`, `first_index`, evaluation by calling, and the arithmetic and
calculus operators.  Shapes differ only in storage:
 - MutableDensePolynomial: owned list, grows on assignment
 - ImmutableDensePolynomial: owned tuple, hashable
 - DenseViewPolynomial: borrows a caller's list or numpy array
 - SparsePolynomial: {index: coefficient} for the nonzero entries only
 - LaurentPolynomial: owned list starting at a possibly negative index

Containers are always kept in canonical form: trailing zeros (and leading
zeros, for Laurent polynomials) are dropped at every construction and
assignment.  The view shape cannot drop zeros from storage it does not own,
so it computes its degree by scanning instead.

Important functions:
 - Polynomial: standard-basis mutable dense constructor
 - ChebyshevT: Chebyshev-basis mutable dense constructor
"""

from polybasis.common import typechecked, FrozenDict
from polybasis.errors import UnsupportedOperation
from polybasis.promotion import (
    is_scalar, scalar_type_of, convert_scalar, is_nan)
from polybasis.bases import Basis, STANDARD, CHEBYSHEV_T, basis_handler
from polybasis.bases.interface import zero_based
from polybasis import evaluation
from polybasis import arithmetic
from polybasis import calculus

def _trim(values):
    values = list(values)
    while values and values[-1] == 0:
        values.pop()
    return values

def _run_to_coeffs(run, zero):
    """Coefficients from index 0 for a run that may start below 0, provided
    everything below 0 is zero."""
    first, cs = run
    if first < 0:
        below = cs[:-first]
        if any(c != 0 for c in below):
            raise UnsupportedOperation("container cannot hold negative indices")
        return list(cs[-first:])
    return [zero] * first + list(cs)

def _terms_to_run(terms, zero):
    if not terms:
        return (0, [])
    lo = min(terms)
    hi = max(terms)
    return (lo, [terms.get(i, zero) for i in range(lo, hi + 1)])

class AbstractPolynomial(object):
    """Interface shared by every container shape.

    Subclasses implement `run`, `first_index`, `degree`, `__getitem__`
    and `from_run`.
    """

    # Let numpy scalars defer to our reflected operators.
    __array_ufunc__ = None

    laurent = False
    sparse = False

    @typechecked
    def _init_common(self, basis : Basis, var : str, scalar_type):
        self.basis = basis
        self.var = var
        self.scalar_type = scalar_type

    # ---------------------------------------------------------------- storage

    def run(self):
        """(first_index, coefficients) for the stored run."""
        raise NotImplementedError()

    def first_index(self):
        return 0

    def degree(self):
        raise NotImplementedError()

    def is_zero(self):
        return not self.run()[1]

    def is_constant(self):
        return self.is_zero() or (self.degree() == 0 and self.first_index() == 0)

    def coeffs(self):
        """Coefficients from `first_index()` up to `degree()`."""
        return list(self.run()[1])

    def coeffs_from_zero(self):
        return zero_based(self.run(), self.zero_scalar())

    def terms(self):
        first, cs = self.run()
        return FrozenDict([(first + i, c) for i, c in enumerate(cs) if c != 0])

    def zero_scalar(self):
        return self.scalar_type(0)

    def has_nan(self):
        return any(is_nan(c) for c in self.run()[1])

    def handler(self):
        return basis_handler(self.basis)

    def __iter__(self):
        return iter(self.coeffs())

    # ----------------------------------------------------------- construction

    @classmethod
    def from_run(cls, run, basis=STANDARD, var="x", scalar_type=float):
        raise NotImplementedError()

    @classmethod
    def from_terms(cls, terms, basis=STANDARD, var="x", scalar_type=float):
        return cls.from_run(_terms_to_run(terms, scalar_type(0)), basis=basis, var=var, scalar_type=scalar_type)

    @classmethod
    def result_class(cls):
        """The shape used for results computed from this shape."""
        return cls

    @classmethod
    def zero(cls, basis=STANDARD, var="x", scalar_type=float):
        return cls.from_run((0, []), basis=basis, var=var, scalar_type=scalar_type)

    @classmethod
    def one(cls, basis=STANDARD, var="x", scalar_type=float):
        return cls.from_run((0, [scalar_type(1)]), basis=basis, var=var, scalar_type=scalar_type)

    @classmethod
    def variable(cls, basis=STANDARD, var="x", scalar_type=float):
        """The degree-1 generator (coefficients [0, 1]); T_1 = x as well."""
        return cls.from_run((0, [scalar_type(0), scalar_type(1)]), basis=basis, var=var, scalar_type=scalar_type)

    def similar(self, run, scalar_type=None):
        """A new polynomial of this shape, basis and variable."""
        return self.result_class().from_run(run, basis=self.basis, var=self.var,
            scalar_type=self.scalar_type if scalar_type is None else scalar_type)

    def copy(self):
        return self.similar(self.run())

    def astype(self, scalar_type):
        return self.similar(self.run(), scalar_type=scalar_type)

    def constant_term(self):
        return self.handler().constant_term(self)

    # ------------------------------------------------------------- comparison

    def __eq__(self, other):
        if isinstance(other, AbstractPolynomial):
            return (self.basis == other.basis and
                self.var == other.var and
                self.terms() == other.terms())
        if is_scalar(other):
            return self.is_constant() and self[0] == other
        return NotImplemented

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    __hash__ = None

    def __repr__(self):
        return "{}({!r}, basis={!r}, var={!r})".format(
            type(self).__name__, self.coeffs(), self.basis, self.var)

    # -------------------------------------------------------- algebra & calculus

    def __call__(self, x):
        return evaluation.evaluate(self, x)

    def evaluate(self, x, checked=True):
        return evaluation.evaluate(self, x, checked=checked)

    def __add__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.add(self, other)
        if is_scalar(other):
            return arithmetic.scalar_add(self, other)
        return NotImplemented

    def __radd__(self, other):
        if is_scalar(other):
            return arithmetic.scalar_add(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.subtract(self, other)
        if is_scalar(other):
            return arithmetic.scalar_add(self, -other)
        return NotImplemented

    def __rsub__(self, other):
        if is_scalar(other):
            return arithmetic.scalar_add(arithmetic.negate(self), other)
        return NotImplemented

    def __neg__(self):
        return arithmetic.negate(self)

    def __pos__(self):
        return self.copy()

    def __mul__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.multiply(self, other)
        if is_scalar(other):
            return arithmetic.scalar_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return arithmetic.scalar_multiply(self, other)
        return NotImplemented

    def __truediv__(self, other):
        if is_scalar(other):
            return arithmetic.scalar_divide(self, other)
        return NotImplemented

    def __pow__(self, n):
        return arithmetic.power(self, n)

    def __divmod__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.divrem(self, other)
        return NotImplemented

    def __floordiv__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.divrem(self, other)[0]
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, AbstractPolynomial):
            return arithmetic.divrem(self, other)[1]
        return NotImplemented

    def divrem(self, other):
        return arithmetic.divrem(self, other)

    def derivative(self, order=1):
        return calculus.derivative(self, order)

    def integrate(self, order=1):
        return calculus.integrate(self, order)

class _DensePolynomial(AbstractPolynomial):
    """Owned, contiguous storage from index 0."""

    def __init__(self, coeffs=(), basis=STANDARD, var="x", scalar_type=None):
        values = list(coeffs)
        if scalar_type is None:
            scalar_type = scalar_type_of(values)
        self._init_common(basis, var, scalar_type)
        self._coeffs = self._store(_trim(convert_scalar(c, scalar_type) for c in values))

    def _store(self, values):
        return values

    @classmethod
    def from_run(cls, run, basis=STANDARD, var="x", scalar_type=float):
        return cls(_run_to_coeffs(run, scalar_type(0)), basis=basis, var=var, scalar_type=scalar_type)

    def run(self):
        return (0, tuple(self._coeffs))

    def degree(self):
        return len(self._coeffs) - 1

    def is_zero(self):
        return not self._coeffs

    def __getitem__(self, i):
        if i < 0:
            raise UnsupportedOperation("{} does not support negative indices".format(type(self).__name__))
        if i >= len(self._coeffs):
            return self.zero_scalar()
        return self._coeffs[i]

class MutableDensePolynomial(_DensePolynomial):

    def __setitem__(self, i, value):
        if i < 0:
            raise UnsupportedOperation("{} does not support negative indices".format(type(self).__name__))
        value = convert_scalar(value, self.scalar_type)
        if i >= len(self._coeffs):
            if value == 0:
                return
            self._coeffs.extend([self.zero_scalar()] * (i + 1 - len(self._coeffs)))
        self._coeffs[i] = value
        self._coeffs = _trim(self._coeffs)

class ImmutableDensePolynomial(_DensePolynomial):

    def _store(self, values):
        return tuple(values)

    def __hash__(self):
        if self.is_constant():
            # agree with == on scalars
            return hash(self[0])
        return hash((self.basis, self.var, self._coeffs))

class DenseViewPolynomial(AbstractPolynomial):
    """A polynomial over a borrowed list or numpy array.

    Writes go straight through to the borrowed storage, which must outlive
    the view.  Results of operations on a view are MutableDensePolynomials.
    """

    def __init__(self, storage, basis=STANDARD, var="x", scalar_type=None):
        if scalar_type is None:
            dtype = getattr(storage, "dtype", None)
            scalar_type = dtype.type if dtype is not None and dtype.kind != "O" else scalar_type_of(storage)
        self._init_common(basis, var, scalar_type)
        self._storage = storage

    @classmethod
    def result_class(cls):
        return MutableDensePolynomial

    @classmethod
    def from_run(cls, run, basis=STANDARD, var="x", scalar_type=float):
        return cls(_run_to_coeffs(run, scalar_type(0)), basis=basis, var=var, scalar_type=scalar_type)

    def degree(self):
        i = len(self._storage) - 1
        while i >= 0 and self._storage[i] == 0:
            i -= 1
        return i

    def run(self):
        return (0, tuple(self._storage[:self.degree() + 1]))

    def __getitem__(self, i):
        if i < 0:
            raise UnsupportedOperation("DenseViewPolynomial does not support negative indices")
        if i > self.degree():
            return self.zero_scalar()
        return self._storage[i]

    def __setitem__(self, i, value):
        if i < 0:
            raise UnsupportedOperation("DenseViewPolynomial does not support negative indices")
        if i >= len(self._storage):
            raise UnsupportedOperation("cannot grow borrowed storage of length {} to index {}".format(len(self._storage), i))
        self._storage[i] = value

class SparsePolynomial(AbstractPolynomial):
    """Only nonzero coefficients are stored, keyed by index."""

    sparse = True

    def __init__(self, coeffs=(), basis=STANDARD, var="x", scalar_type=None):
        if hasattr(coeffs, "items"):
            items = list(coeffs.items())
        else:
            items = list(enumerate(coeffs))
        if scalar_type is None:
            scalar_type = scalar_type_of([c for (i, c) in items])
        self._init_common(basis, var, scalar_type)
        self._terms = {}
        for i, c in items:
            if i < 0:
                raise UnsupportedOperation("SparsePolynomial does not support negative indices")
            c = convert_scalar(c, scalar_type)
            if c != 0:
                self._terms[i] = c

    @classmethod
    def from_run(cls, run, basis=STANDARD, var="x", scalar_type=float):
        first, cs = run
        return cls({first + i : c for i, c in enumerate(cs)}, basis=basis, var=var, scalar_type=scalar_type)

    @classmethod
    def from_terms(cls, terms, basis=STANDARD, var="x", scalar_type=float):
        return cls(terms, basis=basis, var=var, scalar_type=scalar_type)

    def degree(self):
        return max(self._terms) if self._terms else -1

    def is_zero(self):
        return not self._terms

    def run(self):
        zero = self.zero_scalar()
        return (0, tuple(self._terms.get(i, zero) for i in range(self.degree() + 1)))

    def terms(self):
        return FrozenDict(dict(self._terms))

    def has_nan(self):
        return any(is_nan(c) for c in self._terms.values())

    def copy(self):
        return self.astype(self.scalar_type)

    def astype(self, scalar_type):
        return SparsePolynomial(self._terms, basis=self.basis, var=self.var, scalar_type=scalar_type)

    def __getitem__(self, i):
        if i < 0:
            raise UnsupportedOperation("SparsePolynomial does not support negative indices")
        return self._terms.get(i, self.zero_scalar())

    def __setitem__(self, i, value):
        if i < 0:
            raise UnsupportedOperation("SparsePolynomial does not support negative indices")
        value = convert_scalar(value, self.scalar_type)
        if value == 0:
            self._terms.pop(i, None)
        else:
            self._terms[i] = value

    def __repr__(self):
        return "SparsePolynomial({!r}, basis={!r}, var={!r})".format(
            dict(sorted(self._terms.items())), self.basis, self.var)

class LaurentPolynomial(AbstractPolynomial):
    """Dense storage starting at `first_index`, which may be negative.

    Leading and trailing zeros are both trimmed, so `first_index` is the
    lowest index with a nonzero coefficient (0 for the zero polynomial).
    """

    laurent = True

    def __init__(self, coeffs=(), first_index=0, basis=STANDARD, var="x", scalar_type=None):
        values = list(coeffs)
        if scalar_type is None:
            scalar_type = scalar_type_of(values)
        self._init_common(basis, var, scalar_type)
        self._set_run(first_index, [convert_scalar(c, scalar_type) for c in values])

    def _set_run(self, first, values):
        values = _trim(values)
        lead = 0
        while lead < len(values) and values[lead] == 0:
            lead += 1
        values = values[lead:]
        first = first + lead if values else 0
        if first < 0 and not self.handler().supports_negative_indices:
            raise UnsupportedOperation("{} basis does not support negative indices (first index is {})".format(self.handler().name, first))
        self._first = first
        self._coeffs = values

    @classmethod
    def from_run(cls, run, basis=STANDARD, var="x", scalar_type=float):
        first, cs = run
        return cls(cs, first_index=first, basis=basis, var=var, scalar_type=scalar_type)

    def run(self):
        return (self._first, tuple(self._coeffs))

    def first_index(self):
        return self._first

    def degree(self):
        return self._first + len(self._coeffs) - 1 if self._coeffs else -1

    def is_zero(self):
        return not self._coeffs

    def __getitem__(self, i):
        j = i - self._first
        if 0 <= j < len(self._coeffs):
            return self._coeffs[j]
        return self.zero_scalar()

    def __setitem__(self, i, value):
        value = convert_scalar(value, self.scalar_type)
        if not self._coeffs:
            self._set_run(i, [value])
            return
        first = min(self._first, i)
        last = max(self.degree(), i)
        values = [self[k] for k in range(first, last + 1)]
        values[i - first] = value
        self._set_run(first, values)

    def __repr__(self):
        return "LaurentPolynomial({!r}, first_index={!r}, basis={!r}, var={!r})".format(
            self._coeffs, self._first, self.basis, self.var)

def Polynomial(coeffs=(), var="x", scalar_type=None):
    """A mutable dense polynomial in the standard basis."""
    return MutableDensePolynomial(coeffs, basis=STANDARD, var=var, scalar_type=scalar_type)

def ChebyshevT(coeffs=(), var="x", scalar_type=None):
    """A mutable dense Chebyshev series c0*T_0 + c1*T_1 + ...

    >>> ChebyshevT([1, 0, 3, 4])(0.5)
    -4.5
    """
    return MutableDensePolynomial(coeffs, basis=CHEBYSHEV_T, var=var, scalar_type=scalar_type)
