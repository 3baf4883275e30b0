"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - @typechecked: decorator to perform runtime typechecking
 - ADT: top-level class for algebraic data types (basis tags are ADTs)
 - declare_case: create a new subclass of an ADT

Extra collection types:
 - FrozenDict: a hashable immutable dictionary
"""

# builtins
from functools import total_ordering, wraps
import inspect
import threading

# 3rd party
from dictionaries import FrozenDict as _FrozenDict

def check_type(value, ty, value_name="value"):
    """
    Verify that the given value has the given type.
        value      - the value to check
        ty         - the type to check for, or None to do no checking
                     (for example, if types come from Python type annotations, and
                     the Python formal variable does not have a type annotation)
        value_name - the variable or expression that evaluates to `value`;
                     printed in diagnostic messages

    The type ty can be:
        str, int, float, or bytes - value must have this type
        (ty1, ty2, ...)           - value must be a tuple with entries of these types
        [ty]                      - value must be a list of ty
        {k:v}                     - value must be a dict with keys of type k and values of type v
        {ty}                      - value must be a set of ty
    """

    if ty is None:
        pass
    elif type(ty) is tuple:
        assert isinstance(value, tuple), "{} has type {}, not {}".format(value_name, type(value).__name__, "tuple")
        assert len(value) == len(ty), "{} has {} entries, not {}".format(value_name, len(value), len(ty))
        for v, t, i in zip(value, ty, range(len(value))):
            check_type(v, t, "{}[{}]".format(value_name, i))
    elif type(ty) is list:
        assert isinstance(value, list), "{} has type {}, not {}".format(value_name, type(value).__name__, "list")
        for i in range(len(value)):
            check_type(value[i], ty[0], "{}[{}]".format(value_name, i))
    elif type(ty) is dict:
        assert isinstance(value, dict), "{} has type {}, not {}".format(value_name, type(value).__name__, "dict")
        ((kt, vt),) = ty.items()
        for k, v in value.items():
            check_type(k, kt, value_name)
            check_type(v, vt, "{}[{}]".format(value_name, k))
    elif type(ty) is set:
        assert isinstance(value, (set, frozenset)), "{} has type {}, not {}".format(value_name, type(value).__name__, "set")
        subty, = ty
        for x in value:
            check_type(x, subty, "{} in {}".format(x, value_name))
    else:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking.
    The docstring for `check_type` describes how type annotations should look.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

# _protect helps to help guard against infinite recursion.
# Since it is global, locking uses seems wise.
_protect = set()
_protect_lock = threading.RLock()

@total_ordering
class ADT(object):
    """An algebraic data type (ADT).

    This class is not abstract, but it is not useful on its own; it is a parent
    for small immutable value types such as basis tags.

    ADTs are comparable (==, <, etc.), hashable (assuming they do not have
    lists or dictionaries as children), and pickle-able.
    """

    def children(self):
        return ()
    def __str__(self):
        return repr(self)
    def __repr__(self):
        my_id = id(self)
        with _protect_lock:
            if my_id in _protect:
                return "<<recursive>>"
            _protect.add(my_id)
            try:
                return "{}({})".format(type(self).__name__, ", ".join(repr(child) for child in self.children()))
            finally:
                # remove my_id, but do not throw an exception on failure
                _protect.difference_update({my_id})
    def __hash__(self):
        return hash((type(self).__name__,) + self.children())
    def __getstate__(self):
        d = {}
        if hasattr(self, "__slots__"):
            for a in self.__slots__:
                d[a] = getattr(self, a)
        return d
    def __setstate__(self, d):
        for k, v in d.items():
            setattr(self, k, v)
    def __eq__(self, other):
        if self is other: return True
        return type(self) is type(other) and self.children() == other.children()
    def __ne__(self, other):
        return not self.__eq__(other)
    def __lt__(self, other):
        if self is other: return False
        return (self.children() < other.children()) if (type(self) is type(other)) else (type(self).__name__ < type(other).__name__)

@total_ordering
class FrozenDict(_FrozenDict):
    """
    Immutable dictionary that is hashable (suitable for use in sets/maps)
    and orderable (supports <, >, etc).
    """

    def __lt__(self, other):
        return tuple(sorted(self.items())) < tuple(sorted(other.items()))

    def __repr__(self):
        return "FrozenDict({!r})".format(sorted(self.items()))

def declare_case(supertype, name, attrs=()):
    """Create a new case for an ADT type.

    Usage:
        CaseName = declare_case(SuperType, "CaseName", ["member1", ...])

    Creates a new class (CaseName) that is a subclass of SuperType and has all
    the given members.
    """
    if not isinstance(attrs, tuple):
        attrs = tuple(attrs)
    def __init__(self, *args):
        assert len(args) == len(attrs), "{} expects {} args, was given {}".format(name, len(attrs), len(args))
        supertype.__init__(self)
        for attr, val in zip(attrs, args):
            setattr(self, attr, val)
    def children(self):
        return tuple(getattr(self, a) for a in attrs)
    t = type(name, (supertype,), {
        "__init__": __init__,
        "__slots__": attrs,
        "children": children })
    globals()[name] = t
    return t
