from .interface import Basis, BasisHandler
from . import standard
from . import chebyshev
from .standard import STANDARD, StandardBasis
from .chebyshev import CHEBYSHEV_T, ChebyshevTBasis

from polybasis.errors import UnsupportedOperation

_handlers = []
_lookup = { }
def _register(o):
    _handlers.append(o)
    _lookup[o.basis] = o

_register(standard.StandardHandler())
_register(chebyshev.ChebyshevTHandler())

def basis_handler(basis):
    h = _lookup.get(basis)
    if h is None:
        raise UnsupportedOperation("unknown basis {!r}".format(basis))
    return h

def all_basis_handlers():
    return _handlers

def basis_named(name):
    """Look up a basis tag by handler name ("standard", "chebyshev")."""
    for h in _handlers:
        if h.name == name:
            return h.basis
    raise ValueError("unknown basis {!r}; expected one of {}".format(name, ", ".join(h.name for h in _handlers)))
