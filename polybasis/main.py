#!/usr/bin/env python

"""
Command-line entry point for polybasis. Run with --help for options.
"""

import sys
import argparse

from polybasis import opts
from polybasis import logging
from polybasis.bases import all_basis_handlers, basis_named
from polybasis.containers import MutableDensePolynomial
from polybasis.errors import PolynomialError
from polybasis.evaluation import evaluate
from polybasis.roots import companion, roots

do_profile = opts.Option("profile", bool, False, description="Write task timings to --profile-path on exit")

def _number(s):
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        return complex(s)

def run(argv=None):
    """Entry point for the polybasis executable.

    This procedure reads `argv` (default: sys.argv) and prints the result of
    each requested action, one per line.  Returns the exit status.
    """

    parser = argparse.ArgumentParser(description='Evaluate, differentiate and find roots of polynomials.')
    parser.add_argument("coeffs", metavar="COEFF", type=_number, nargs="+", help="Coefficients, lowest order first")
    parser.add_argument("-b", "--basis", choices=[h.name for h in all_basis_handlers()], default="standard", help="Basis of the coefficients; default=standard")
    parser.add_argument("--var", metavar="NAME", default="x", help="Name of the variable; default=x")
    parser.add_argument("--at", metavar="X", type=_number, action="append", default=[], help="Evaluate at X (repeatable)")
    parser.add_argument("--unchecked", action="store_true", help="Skip the domain check when evaluating")
    parser.add_argument("--derivative", action="store_true", help="Print the derivative")
    parser.add_argument("--integrate", action="store_true", help="Print the antiderivative with zero constant term")
    parser.add_argument("--roots", action="store_true", help="Print the roots")
    parser.add_argument("--companion", action="store_true", help="Print the companion matrix")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)

    p = MutableDensePolynomial(args.coeffs, basis=basis_named(args.basis), var=args.var)

    try:
        for x in args.at:
            print("p({}) = {}".format(x, evaluate(p, x, checked=not args.unchecked)))
        if args.derivative:
            print("derivative: {}".format(p.derivative().coeffs()))
        if args.integrate:
            print("integral: {}".format(p.integrate().coeffs()))
        if args.roots:
            print("roots: {}".format(roots(p).tolist()))
        if args.companion:
            m = companion(p)
            print("companion:")
            print(m)
    except PolynomialError as e:
        print("Error: {}".format(e))
        return 1
    finally:
        if do_profile.value:
            logging.dump_profile()
    return 0

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
