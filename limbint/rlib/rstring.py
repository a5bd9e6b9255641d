""" Decimal literal validation and chunking for the bigint parser.
"""

from limbint.rlib.rarithmetic import DEC_CHUNK


class InvalidFormat(ValueError):
    """Signals malformed decimal text"""

    def __init__(self, msg, position=-1):
        ValueError.__init__(self, msg)
        self.msg = msg
        self.position = position

class EmptyStringError(InvalidFormat):
    """Signals an empty literal"""

class MissingDigitsError(InvalidFormat):
    """Signals a sign that is not followed by any digit"""

class InvalidCharacterError(InvalidFormat):
    """Signals a character that is not a decimal digit"""


def isdecimal(c):
    # str.isdigit() also accepts non-ASCII digits
    return '0' <= c <= '9'


class DecimalStringParser(object):
    """Validate a decimal literal, an optional leading '-' followed by
    ASCII digits, and hand out its digits in limb-sized chunks.

    The whole string is checked in the constructor, so a parser object
    only ever exists for valid input.
    """

    def __init__(self, s):
        for i in range(len(s)):
            c = s[i]
            if isdecimal(c):
                continue
            if i == 0:
                if c != '-':
                    raise InvalidCharacterError(
                        "invalid number - unexpected character %r at start "
                        "position" % (c,), 0)
            else:
                raise InvalidCharacterError(
                    "invalid number - unexpected character %r at position %d"
                    % (c, i), i)
        if not s:
            raise EmptyStringError("invalid input - given the empty string")
        if s == '-':
            raise MissingDigitsError("invalid input - no value after the sign")

        if s.startswith('-'):
            self.sign = -1
            self.digits = s[1:]
        else:
            self.sign = 1
            self.digits = s
        self.literal = s

    def iszero(self):
        return self.literal == '0' or self.literal == '-0'

    def numdigits(self):
        return len(self.digits)

    def chunks(self):
        """Yield the digits as ints of at most DEC_CHUNK digits, most
        significant first.  The first chunk takes the leftover digits so
        that all the following ones are exactly DEC_CHUNK long."""
        digits = self.digits
        first = len(digits) % DEC_CHUNK
        if first:
            yield int(digits[:first])
        for p in range(first, len(digits), DEC_CHUNK):
            yield int(digits[p:p + DEC_CHUNK])
