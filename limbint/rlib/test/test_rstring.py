import pytest

from limbint.rlib.rstring import DecimalStringParser, isdecimal
from limbint.rlib.rstring import (InvalidFormat, EmptyStringError,
    MissingDigitsError, InvalidCharacterError)


def chunks(s):
    return list(DecimalStringParser(s).chunks())


class TestDecimalStringParser(object):

    def test_sign_and_digits(self):
        p = DecimalStringParser("-0042")
        assert p.sign == -1
        assert p.digits == "0042"
        assert p.numdigits() == 4
        assert p.literal == "-0042"
        p = DecimalStringParser("17")
        assert p.sign == 1
        assert p.digits == "17"

    def test_iszero(self):
        assert DecimalStringParser("0").iszero()
        assert DecimalStringParser("-0").iszero()
        assert not DecimalStringParser("10").iszero()

    def test_chunks(self):
        assert chunks("7") == [7]
        assert chunks("123456789") == [123456789]
        assert chunks("1234567890") == [1, 234567890]
        assert chunks("-1000000000000000000") == [1, 0, 0]
        assert chunks("12" + "0" * 18) == [12, 0, 0]
        assert chunks("000000000123") == [0, 123]

    def test_isdecimal(self):
        assert isdecimal("0") and isdecimal("9")
        assert not isdecimal("a")
        assert not isdecimal("-")
        # ARABIC-INDIC DIGIT ONE
        assert not isdecimal("١")


class TestErrors(object):

    def test_empty(self):
        with pytest.raises(EmptyStringError) as excinfo:
            DecimalStringParser("")
        assert "empty" in excinfo.value.msg

    def test_sign_only(self):
        with pytest.raises(MissingDigitsError) as excinfo:
            DecimalStringParser("-")
        assert "after the sign" in excinfo.value.msg

    def test_bad_first_character(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            DecimalStringParser("+5")
        assert excinfo.value.position == 0
        assert "start position" in str(excinfo.value)

    def test_bad_character(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            DecimalStringParser("12a3")
        assert excinfo.value.position == 2
        assert "'a'" in excinfo.value.msg
        with pytest.raises(InvalidCharacterError) as excinfo:
            DecimalStringParser("1-")
        assert excinfo.value.position == 1
        with pytest.raises(InvalidCharacterError) as excinfo:
            DecimalStringParser("--1")
        assert excinfo.value.position == 1

    def test_character_checked_before_length(self):
        # a bad character wins over a missing digit
        with pytest.raises(InvalidCharacterError):
            DecimalStringParser("-x")

    def test_hierarchy(self):
        for s in ["", "-", "x"]:
            with pytest.raises(InvalidFormat):
                DecimalStringParser(s)
            with pytest.raises(ValueError):
                DecimalStringParser(s)
