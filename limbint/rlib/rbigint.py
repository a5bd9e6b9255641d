import py

from limbint.rlib.rarithmetic import LIMB_BITS, RADIX, LIMB_MASK
from limbint.rlib.rarithmetic import DEC_BASE, DEC_CHUNK
from limbint.rlib.rarithmetic import limbmask, dlimbmask, invert_limb
from limbint.rlib.rarithmetic import limb_sign, is_valid_limb, bits_in_limb
from limbint.rlib.rstring import DecimalStringParser
from limbint.config.bigintoption import get_bigint_config
from limbint.tool.ansi_print import ansi_log

log = py.log.Producer("rbigint")
py.log.setconsumer("rbigint", ansi_log)

# note about limb sizes:
# every accumulator below holds at most two limbs plus a carry, so the
# whole engine would run on 64-bit words.

_config = get_bigint_config()

def set_config(config):
    """Install the option set the engine reads (see bigintoption.py)."""
    global _config
    _config = config

def get_config():
    return _config


class DivisionByZero(ZeroDivisionError):
    pass


def _check_limbs(z):
    for x in z._limbs:
        assert is_valid_limb(x), "limb out of range: %r" % (x,)
    assert type(z.sign) is bool
    if z._limbs:
        assert z._limbs[-1] != z.filler(), "top limb equals the filler"


class rbigint(object):
    """An integer of unbounded size, stored as a list of 32-bit limbs.

    The value is the two's complement reading of the limbs (least
    significant first) extended to infinity by a filler limb: 0 when
    'sign' is False, LIMB_MASK when it is True.  Normalized values never
    store a top limb equal to the filler, so an empty list is 0 (sign
    False) or -1 (sign True), and each value has a single representation.

    Instances are never modified once they are handed out; every
    operation builds a new one.
    """

    def __init__(self, limbs=None, sign=False):
        if limbs is None:
            limbs = []
        self._limbs = limbs
        self.sign = sign

    def limb(self, x):
        """Return the x'th stored limb."""
        return self._limbs[x]

    def get(self, x):
        """Return the x'th limb of the infinite sign extension."""
        if x < len(self._limbs):
            return self._limbs[x]
        return self.filler()

    def setlimb(self, x, val):
        self._limbs[x] = limbmask(val)

    def numlimbs(self):
        return len(self._limbs)

    def filler(self):
        if self.sign:
            return LIMB_MASK
        return 0

    def _normalize(self):
        limbs = self._limbs
        filler = self.filler()
        while limbs and limbs[-1] == filler:
            limbs.pop()
        if _config.bigint.check_limbs:
            _check_limbs(self)

    def copy(self):
        return rbigint(self._limbs[:], self.sign)

    @staticmethod
    def fromint(intval):
        sign = intval < 0
        limbs = []
        while intval != 0 and intval != -1:
            limbs.append(intval & LIMB_MASK)
            intval >>= LIMB_BITS
        z = rbigint(limbs, sign)
        z._normalize()
        return z

    @staticmethod
    def fromlimb(val):
        assert is_valid_limb(val)
        z = rbigint([val])
        z._normalize()
        return z

    @staticmethod
    def fromdecimalstr(s):
        return _decimalstr_to_bigint(DecimalStringParser(s))

    @staticmethod
    def fromvalue(x):
        if isinstance(x, rbigint):
            return x
        if isinstance(x, int):
            return rbigint.fromint(x)
        if isinstance(x, str):
            return rbigint.fromdecimalstr(x)
        raise TypeError("cannot make a bigint from %s" % (type(x).__name__,))

    def tolong(self):
        l = 0
        for d in reversed(self._limbs):
            l = (l << LIMB_BITS) | d
        if self.sign:
            l -= 1 << (LIMB_BITS * len(self._limbs))
        return l

    def tobool(self):
        return self.sign or len(self._limbs) > 0

    def str(self):
        return _format_decimal(self)

    def write(self, stream):
        stream.write(self.str())
        return stream

    def hash(self):
        return hash(self.tolong())

    def bit_length(self):
        a = self.abs()
        i = a.numlimbs()
        if i == 0:
            return 0
        return (i - 1) * LIMB_BITS + bits_in_limb(a.limb(i - 1))

    def eq(self, other):
        return self.sign == other.sign and self._limbs == other._limbs

    def ne(self, other):
        return not self.eq(other)

    def lt(self, other):
        if self.sign != other.sign:
            return self.sign
        ld1 = self.numlimbs()
        ld2 = other.numlimbs()
        if ld1 != ld2:
            # more limbs: larger if positive, more negative if negative
            return self.sign != (ld1 < ld2)
        i = ld1 - 1
        while i >= 0:
            d1 = self.limb(i)
            d2 = other.limb(i)
            if d1 != d2:
                return d1 < d2
            i -= 1
        return False

    def le(self, other):
        return not other.lt(self)

    def gt(self, other):
        return other.lt(self)

    def ge(self, other):
        return not self.lt(other)

    def add(self, other):
        return _x_add(self, other, False)

    def sub(self, other):
        return _x_add(self, other, True)

    def incr(self):
        return _x_int_add(self, 1)

    def decr(self):
        return _x_int_add(self, LIMB_MASK, negative=True)

    def mul(self, other):
        if self is other and _config.bigint.multiply == "squaring":
            return _x_square(self.abs())
        z = _x_mul(self.abs(), other.abs())
        if self.sign != other.sign:
            z = z.neg()
        return z

    def int_mul(self, n):
        """Multiply by the unsigned single limb n."""
        if not is_valid_limb(n):
            raise ValueError("multiplier does not fit in a limb: %r" % (n,))
        z = _muladd1(self.abs(), n)
        if self.sign:
            z = z.neg()
        return z

    def div(self, other):
        div, mod = _divrem(self, other)
        return div

    def mod(self, other):
        div, mod = _divrem(self, other)
        return mod

    def divmod(self, other):
        """
        Truncating division: the quotient is rounded toward zero and
        has the sign of a*b, the remainder has the sign of a, so that
        a == b*q + r and abs(r) < abs(b).
          a   b    q    r
          13  10   1    3
         -13  10  -1   -3
          13 -10  -1    3
         -13 -10   1   -3
        """
        return _divrem(self, other)

    def int_divmod(self, n):
        """Truncating division by the single limb n > 0; the remainder is
        returned as an int with the sign of self."""
        if n == 0:
            raise DivisionByZero("bigint division or modulo by zero")
        if not is_valid_limb(n):
            raise ValueError("divisor does not fit in a limb: %r" % (n,))
        z, rem = _divrem1(self.abs(), n)
        if self.sign:
            z = z.neg()
            rem = -rem
        return z, rem

    def neg(self):
        return _x_int_add(self.invert(), 1)

    def abs(self):
        if self.sign:
            return self.neg()
        return self

    def invert(self):
        # complementing every limb and the filler keeps the value normalized
        z = rbigint([invert_limb(d) for d in self._limbs], not self.sign)
        z._normalize()
        return z

    def lshift(self, int_other):
        if int_other < 0:
            raise ValueError("negative shift count")
        elif int_other == 0:
            return self

        wordshift = int_other // LIMB_BITS
        remshift = int_other - wordshift * LIMB_BITS

        oldsize = self.numlimbs()
        z = rbigint([0] * (wordshift + oldsize + 1), self.sign)
        accum = 0
        j = 0
        while j < oldsize:
            accum |= self.limb(j) << remshift
            z.setlimb(wordshift + j, accum)
            accum >>= LIMB_BITS
            j += 1
        # the new top limb gets the bits shifted out plus the sign extension
        z.setlimb(wordshift + oldsize, accum | (self.filler() << remshift))
        z._normalize()
        return z

    def rshift(self, int_other):
        if int_other < 0:
            raise ValueError("negative shift count")
        elif int_other == 0:
            return self

        wordshift = int_other // LIMB_BITS
        newsize = self.numlimbs() - wordshift
        if newsize <= 0:
            if self.sign:
                return ONENEGATIVERBIGINT
            return NULLRBIGINT

        loshift = int_other - wordshift * LIMB_BITS
        hishift = LIMB_BITS - loshift
        z = rbigint([0] * newsize, self.sign)
        i = 0
        while i < newsize:
            # past the top, get() feeds in the filler: the sign bits
            newlimb = self.limb(wordshift) >> loshift
            newlimb |= self.get(wordshift + 1) << hishift
            z.setlimb(i, newlimb)
            i += 1
            wordshift += 1
        z._normalize()
        return z

    def and_(self, other):
        return _bitwise(self, '&', other)

    def or_(self, other):
        return _bitwise(self, '|', other)

    def xor(self, other):
        return _bitwise(self, '^', other)

    # the Python operator protocol, mixing freely with ints

    def _make_binop(name):
        def op(self, other):
            other = _coerce(other)
            if other is None:
                return NotImplemented
            return getattr(self, name)(other)
        def rop(self, other):
            other = _coerce(other)
            if other is None:
                return NotImplemented
            return getattr(other, name)(self)
        return op, rop

    __add__, __radd__ = _make_binop('add')
    __sub__, __rsub__ = _make_binop('sub')
    __mul__, __rmul__ = _make_binop('mul')
    # there is no float result: '/' is the truncating division as well
    __floordiv__, __rfloordiv__ = _make_binop('div')
    __truediv__, __rtruediv__ = _make_binop('div')
    __mod__, __rmod__ = _make_binop('mod')
    __divmod__, __rdivmod__ = _make_binop('divmod')
    __and__, __rand__ = _make_binop('and_')
    __or__, __ror__ = _make_binop('or_')
    __xor__, __rxor__ = _make_binop('xor')

    def _make_shift(name):
        def op(self, other):
            count = _shiftcount(other)
            if count is None:
                return NotImplemented
            return getattr(self, name)(count)
        def rop(self, other):
            if not isinstance(other, int):
                return NotImplemented
            return getattr(rbigint.fromint(other), name)(self.tolong())
        return op, rop

    __lshift__, __rlshift__ = _make_shift('lshift')
    __rshift__, __rrshift__ = _make_shift('rshift')

    def _make_cmp(name):
        def cmp(self, other):
            other = _coerce(other)
            if other is None:
                return NotImplemented
            return getattr(self, name)(other)
        return cmp

    __eq__ = _make_cmp('eq')
    __ne__ = _make_cmp('ne')
    __lt__ = _make_cmp('lt')
    __le__ = _make_cmp('le')
    __gt__ = _make_cmp('gt')
    __ge__ = _make_cmp('ge')

    del _make_binop, _make_shift, _make_cmp

    def __pos__(self):
        return self.copy()

    def __neg__(self):
        return self.neg()

    def __invert__(self):
        return self.invert()

    def __abs__(self):
        return self.abs()

    def __bool__(self):
        return self.tobool()

    def __int__(self):
        return self.tolong()

    __index__ = __int__

    def __hash__(self):
        return self.hash()

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "<rbigint limbs=%s, sign=%s, %s>" % (
            ["0x%08x" % d for d in self._limbs], self.sign, self.str())

ONERBIGINT = rbigint([1], False)
ONENEGATIVERBIGINT = rbigint([], True)
NULLRBIGINT = rbigint()


#_________________________________________________________________

# Helper Functions

def _coerce(x):
    if isinstance(x, rbigint):
        return x
    if isinstance(x, int):
        return rbigint.fromint(x)
    return None

def _shiftcount(x):
    if isinstance(x, rbigint):
        return x.tolong()
    if isinstance(x, int):
        return x
    return None

def _x_add(a, b, subtract):
    """ Add (or subtract) two bigints as two's complement words. """
    # one limb more than the longer operand always holds the exact result,
    # so the sign is the top bit of that limb
    size_z = max(a.numlimbs(), b.numlimbs(), 1) + 1
    z = rbigint([0] * size_z)
    if subtract:
        # a - b == a + ~b + 1
        carry = 1
    else:
        carry = 0
    i = 0
    while i < size_z:
        digb = b.get(i)
        if subtract:
            digb = invert_limb(digb)
        carry += a.get(i) + digb
        z.setlimb(i, carry)
        carry >>= LIMB_BITS
        i += 1
    z.sign = limb_sign(z.limb(size_z - 1))
    z._normalize()
    return z

def _x_int_add(a, n, negative=False):
    """ Add the single limb n to a bigint.  With 'negative' the limb is
    extended by all-ones limbs, which adds n - RADIX instead. """
    size_z = max(a.numlimbs(), 1) + 1
    z = rbigint([0] * size_z)
    if negative:
        filler = LIMB_MASK
    else:
        filler = 0
    carry = a.get(0) + n
    z.setlimb(0, carry)
    carry >>= LIMB_BITS
    i = 1
    while i < size_z:
        carry += a.get(i) + filler
        z.setlimb(i, carry)
        carry >>= LIMB_BITS
        i += 1
    z.sign = limb_sign(z.limb(size_z - 1))
    z._normalize()
    return z

def _x_mul(a, b):
    """
    Grade school multiplication of two magnitudes.
    Returns the magnitude of the product.
    """
    assert not a.sign and not b.sign
    size_a = a.numlimbs()
    size_b = b.numlimbs()
    z = rbigint([0] * (size_a + size_b + 1))
    i = 0
    while i < size_a:
        f = a.limb(i)
        if f:
            pz = i
            carry = 0
            j = 0
            while j < size_b:
                # at most (RADIX - 1)**2 + 2 * (RADIX - 1), i.e. two limbs
                carry += z.limb(pz) + b.limb(j) * f
                assert dlimbmask(carry) == carry
                z.setlimb(pz, carry)
                carry >>= LIMB_BITS
                pz += 1
                j += 1
            while carry:
                carry += z.limb(pz)
                z.setlimb(pz, carry)
                carry >>= LIMB_BITS
                pz += 1
        i += 1
    z._normalize()
    return z

def _x_square(a):
    """
    Grade school squaring of a magnitude.
    Each entry in the multiplication pyramid appears twice (except for
    the squares on the diagonal), so it is computed once and doubled;
    see HAC, Algorithm 14.16.
    """
    assert not a.sign
    size_a = a.numlimbs()
    z = rbigint([0] * (2 * size_a + 1))
    i = 0
    while i < size_a:
        f = a.limb(i)
        pz = i << 1
        pa = i + 1

        carry = z.limb(pz) + f * f
        z.setlimb(pz, carry)
        pz += 1
        carry >>= LIMB_BITS

        # f is added twice in each column it appears in
        f <<= 1
        while pa < size_a:
            carry += z.limb(pz) + a.limb(pa) * f
            pa += 1
            z.setlimb(pz, carry)
            pz += 1
            carry >>= LIMB_BITS
        if carry:
            carry += z.limb(pz)
            z.setlimb(pz, carry)
            pz += 1
            carry >>= LIMB_BITS
        if carry:
            z.setlimb(pz, z.limb(pz) + carry)
        assert (carry >> LIMB_BITS) == 0
        i += 1
    z._normalize()
    return z

def _muladd1(a, n, extra=0):
    """Multiply a magnitude by a single limb and add a single limb.
    """
    assert not a.sign
    size_a = a.numlimbs()
    z = rbigint([0] * (size_a + 1))
    assert limbmask(extra) == extra
    carry = extra
    i = 0
    while i < size_a:
        carry += a.limb(i) * n
        z.setlimb(i, carry)
        carry >>= LIMB_BITS
        i += 1
    z.setlimb(i, carry)
    z._normalize()
    return z

def _divrem1(a, n):
    """
    Divide a magnitude by the non-zero limb n, one limb at a time from
    the most significant down, returning the quotient and the remainder
    (an int) as a tuple.
    """
    assert not a.sign
    assert 0 < n <= LIMB_MASK
    size = a.numlimbs()
    z = rbigint([0] * size)
    rem = 0
    size -= 1
    while size >= 0:
        rem = (rem << LIMB_BITS) | a.limb(size)
        assert dlimbmask(rem) == rem
        hi = rem // n
        z.setlimb(size, hi)
        rem -= hi * n
        size -= 1
    z._normalize()
    return z, rem

def _v_mul1(z, w, m, q):
    """ Store w[0:m] * q in z[0:m+1]. """
    carry = 0
    i = 0
    while i < m:
        carry += w.limb(i) * q
        z.setlimb(i, carry)
        carry >>= LIMB_BITS
        i += 1
    z.setlimb(m, carry)

def _v_lt(x, y, m):
    """ Compare x[0:m] and y[0:m] as unsigned numbers. """
    i = m - 1
    while i >= 0:
        if x.limb(i) != y.limb(i):
            return x.limb(i) < y.limb(i)
        i -= 1
    return False

def _v_isub(x, y, m):
    """
    x[0:m] -= y[0:m] in place, computed as x + ~y + 1.  Returns the
    carry out of the top limb, which is 1 when there was no borrow.
    """
    carry = 1
    i = 0
    while i < m:
        carry += x.limb(i) + invert_limb(y.limb(i))
        x.setlimb(i, carry)
        carry >>= LIMB_BITS
        i += 1
    return carry

def _x_divrem(v1, w1):
    """ Unsigned bigint division with remainder -- the algorithm """
    size_v = v1.numlimbs()
    size_w = w1.numlimbs()
    assert size_v >= size_w and size_w > 1

    # normalize: scale both operands by f so that the top limb of the
    # divisor is at least RADIX/2; the trial digits below are then never
    # more than 2 too large.  The divisor keeps its length.
    f = RADIX // (w1.limb(size_w - 1) + 1)
    v = _muladd1(v1, f)
    w = _muladd1(w1, f)
    assert w.numlimbs() == size_w
    wtop = w.limb(size_w - 1)
    assert wtop >= RADIX >> 1

    k = size_v - size_w + 1
    a = rbigint([0] * k)

    # window[1:size_w+1] is the partial remainder, always < w, and
    # window[0] receives the next limb of the dividend.
    window = rbigint([0] * (size_w + 1))
    prod = rbigint([0] * (size_w + 1))
    i = 0
    while i < size_w:
        window.setlimb(i + 1, v.get(k + i))
        i += 1

    corrections = 0
    j = k - 1
    while j >= 0:
        window.setlimb(0, v.get(j))

        # estimate the quotient digit from the top two limbs
        vv = (window.limb(size_w) << LIMB_BITS) | window.limb(size_w - 1)
        q = min(vv // wtop, LIMB_MASK)
        _v_mul1(prod, w, size_w, q)
        fixes = 0
        while _v_lt(window, prod, size_w + 1):
            q -= 1
            fixes += 1
            _v_mul1(prod, w, size_w, q)
        assert fixes <= 2
        corrections += fixes

        carry = _v_isub(window, prod, size_w + 1)
        assert carry == 1 and window.limb(size_w) == 0

        # shift the window up to make room for the next dividend limb
        i = size_w
        while i > 0:
            window.setlimb(i, window.limb(i - 1))
            i -= 1

        a.setlimb(j, q)
        j -= 1

    # de-normalize the remainder
    rem = rbigint([window.limb(i + 1) for i in range(size_w)])
    rem._normalize()
    rem, r = _divrem1(rem, f)
    assert r == 0

    a._normalize()
    if _config.bigint.log:
        log.divide("%d limbs by %d limbs, factor %d, %d corrections" % (
            size_v, size_w, f, corrections))
    return a, rem

def _divrem(a, b):
    """ Long division with remainder, top-level routine """
    if not b.tobool():
        raise DivisionByZero("bigint division or modulo by zero")

    v = a.abs()
    w = b.abs()
    if v.lt(w):
        # |a| < |b|
        return NULLRBIGINT, a
    if w.numlimbs() == 1:
        z, urem = _divrem1(v, w.limb(0))
        rem = rbigint.fromlimb(urem)
    else:
        z, rem = _x_divrem(v, w)
    # Set the signs.
    # The quotient z has the sign of a*b;
    # the remainder r has the sign of a,
    # so a = b*z + r.
    if a.sign != b.sign:
        z = z.neg()
    if a.sign:
        rem = rem.neg()
    return z, rem

def _bitwise(a, op, b): # '&', '|', '^'
    """ Bitwise and/or/xor operations, limb by limb on the two's
    complement words; the fillers combine like the sign flags. """
    size_z = max(a.numlimbs(), b.numlimbs())
    z = rbigint([0] * size_z)
    i = 0
    while i < size_z:
        diga = a.get(i)
        digb = b.get(i)
        if op == '&':
            z.setlimb(i, diga & digb)
        elif op == '|':
            z.setlimb(i, diga | digb)
        elif op == '^':
            z.setlimb(i, diga ^ digb)
        i += 1

    if op == '&':
        z.sign = a.sign and b.sign
    elif op == '|':
        z.sign = a.sign or b.sign
    elif op == '^':
        z.sign = a.sign != b.sign
    else:
        raise AssertionError("unknown bitwise operator %r" % (op,))
    z._normalize()
    return z

#_________________________________________________________________

# decimal text

def _decimalstr_to_bigint(parser):
    # 'parser' has already checked the string, nothing below can fail
    if parser.iszero():
        return NULLRBIGINT
    if _config.bigint.log:
        log.parse("%d digits" % (parser.numdigits(),))
    a = NULLRBIGINT
    for chunk in parser.chunks():
        a = _muladd1(a, DEC_BASE, chunk)
    if parser.sign < 0:
        a = a.neg()
    return a

def _format_decimal(a):
    if not a.tobool():
        return "0"
    x = a.abs()
    chunks = []
    while x.numlimbs():
        x, rem = _divrem1(x, DEC_BASE)
        chunks.append("%0*d" % (DEC_CHUNK, rem))
    if _config.bigint.log:
        log.format("%d chunks of %d digits" % (len(chunks), DEC_CHUNK))
    # only the most significant chunk carries padding zeros
    s = "".join(reversed(chunks)).lstrip("0")
    if a.sign:
        s = "-" + s
    return s

def to_string(a):
    return a.str()
