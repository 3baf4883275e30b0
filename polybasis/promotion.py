"""Explicit scalar promotion rules.

Every operation that combines scalars of two types (adding coefficient
sequences, multiplying by a scalar, dividing by an integer) asks this module
for the result type instead of relying on whatever Python happens to produce.

Important functions:
 - promoted_type: common type of two scalar types
 - quotient_type: type produced by dividing a T by an integer
 - scalar_type_of: common type of a collection of values
 - convert_scalar: coerce a value to a scalar type
"""

from decimal import Decimal
from fractions import Fraction
from functools import reduce
import numbers

import numpy as np

# Python's numeric tower, narrowest first.
_RANK = {
    bool     : 0,
    int      : 1,
    Fraction : 2,
    float    : 3,
    complex  : 4,
}

def is_numpy_type(t):
    return isinstance(t, type) and issubclass(t, np.generic)

def is_scalar(x):
    return isinstance(x, (numbers.Number, np.generic))

def promoted_type(t, s):
    """The smallest type that can hold values of both `t` and `s`.

    Raises TypeError when no rule covers the pair.
    """
    if t is s:
        return t
    if is_numpy_type(t) or is_numpy_type(s):
        other = s if is_numpy_type(t) else t
        if not is_numpy_type(other) and other not in _RANK:
            raise TypeError("cannot promote {} and {}".format(t.__name__, s.__name__))
        return np.result_type(t, s).type
    if t in _RANK and s in _RANK:
        return t if _RANK[t] >= _RANK[s] else s
    if t is Decimal and s in (bool, int):
        return Decimal
    if s is Decimal and t in (bool, int):
        return Decimal
    if issubclass(t, s):
        return s
    if issubclass(s, t):
        return t
    raise TypeError("cannot promote {} and {}".format(t.__name__, s.__name__))

def quotient_type(t):
    """The type of `t(1) / 1`, e.g. int -> float, Fraction -> Fraction."""
    return type(t(1) / 1)

def scalar_type_of(values, default=float):
    types = [int if type(v) is bool else type(v) for v in values]
    if not types:
        return default
    return reduce(promoted_type, types)

def convert_scalar(value, t):
    if type(value) is t:
        return value
    return t(value)

def is_nan(value):
    return value != value
