"""Arbitrary-precision integers on 32-bit limbs."""

from limbint.rlib.rbigint import rbigint, DivisionByZero
from limbint.rlib.rstring import InvalidFormat

__version__ = '0.1.0'
