"""Exceptions raised by polybasis.

Every exception also derives from the closest builtin, so callers that only
know about `ValueError`, `ZeroDivisionError`, etc. still catch them.
"""

class PolynomialError(Exception):
    pass

class DomainError(PolynomialError, ValueError):
    """An evaluation point lies outside the domain of the basis."""
    pass

class MismatchedBasis(PolynomialError, TypeError):
    pass

class MismatchedVariable(PolynomialError, ValueError):
    pass

class UnsupportedOperation(PolynomialError, NotImplementedError):
    """The container shape or basis cannot do what was asked.

    Examples: negative indices on a non-Laurent container, or calculus on a
    basis without a recurrence.
    """
    pass

class DivideError(PolynomialError, ZeroDivisionError):
    pass

class ArgumentError(PolynomialError, ValueError):
    pass
