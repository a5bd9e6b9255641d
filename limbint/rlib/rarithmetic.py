"""
This file defines limb arithmetic:

constants and helpers to express the fixed-width word arithmetic
the bigint engine is built from, so that every intermediate value
is kept inside the range a 32-bit limb or a 64-bit accumulator
could hold

LIMB_BITS    width of one limb
RADIX        base of the positional representation (2**LIMB_BITS)
LIMB_MASK    the all-ones limb, also the filler of negative values
limbmask     truncate a value to one limb
dlimbmask    truncate a value to a double-width accumulator
invert_limb  bitwise complement of a limb
limb_sign    the two's complement sign bit of a limb

Python ints never overflow, so the masks mark the places where
the word size matters.
"""

LIMB_BITS = 32
RADIX = 1 << LIMB_BITS
LIMB_MASK = RADIX - 1
LIMB_SIGN_BIT = 1 << (LIMB_BITS - 1)

DLIMB_BITS = 2 * LIMB_BITS
DLIMB_MASK = (1 << DLIMB_BITS) - 1

# 9 decimal digits always fit in one limb
DEC_CHUNK = 9
DEC_BASE = 10 ** DEC_CHUNK
assert DEC_BASE < RADIX


def limbmask(n):
    return n & LIMB_MASK

def dlimbmask(n):
    return n & DLIMB_MASK

def is_valid_limb(n):
    return type(n) is int and 0 <= n <= LIMB_MASK

def invert_limb(n):
    return n ^ LIMB_MASK

def limb_sign(n):
    """True if the top bit of limb n is set, i.e. a top limb with this
    value makes the whole number negative."""
    return bool(n & LIMB_SIGN_BIT)

def bits_in_limb(d):
    """Number of significant bits in the limb d."""
    d_bits = 0
    while d >= 32:
        d_bits += 6
        d >>= 6
    d_bits += [
        0, 1, 2, 2, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 4,
        5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5, 5
        ][d]
    return d_bits
