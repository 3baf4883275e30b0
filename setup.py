#!/usr/bin/env python3

import os
import sys
from setuptools import setup, find_packages

def die(msg):
    print(msg, file=sys.stderr)
    sys.exit(1)

if sys.version_info < (3, 8):
    die("Need Python >= 3.8; found {}".format(sys.version))

with open(os.path.join(os.path.dirname(__file__), "requirements.txt")) as f:
    reqs = [line.strip() for line in f if line.strip()]

setup(
    name='polybasis',
    version='0.1.0',
    description='Univariate polynomials in the standard and Chebyshev bases',
    packages=find_packages(exclude=["tests"]),
    entry_points = { "console_scripts": "polybasis=polybasis.main:main" },
    install_requires=reqs,
    )
