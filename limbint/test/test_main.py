import pytest

from limbint.main import main, compute, process_options, OPERATORS
from limbint.rlib.rbigint import get_config


def run(capsys, *args):
    status = main(list(args))
    out, err = capsys.readouterr()
    return status, out, err


def test_single_operand(capsys):
    status, out, err = run(capsys, "000123")
    assert status == 0
    assert out == "123\n"

def test_operations(capsys):
    for args, result in [
            (("--", "-123456789123456789", "*", "2"), "-246913578246913578"),
            (("1000000000000000000000000000", "/",
              "999999999999999999999999999"), "1"),
            (("1000000000000000000000000000", "%",
              "999999999999999999999999999"), "1"),
            (("--", "-13", "//", "10"), "-1"),
            (("--", "-8", ">>", "1"), "-4"),
            (("1", "<<", "100"), str(1 << 100)),
            (("12", "&", "10"), "8"),
            (("12", "^", "10"), "6"),
            (("--", "-1", "<", "0"), "True"),
            (("5", "==", "6"), "False")]:
        status, out, err = run(capsys, *args)
        assert status == 0, err
        assert out == result + "\n"

def test_every_operator_is_usable():
    for opname in OPERATORS:
        compute(["7", opname, "3"])

def test_division_by_zero(capsys):
    status, out, err = run(capsys, "5", "/", "0")
    assert status == 1
    assert out == ""
    assert err == "[limbint:ERROR] bigint division or modulo by zero\n"

def test_invalid_operand(capsys):
    status, out, err = run(capsys, "12a3", "+", "1")
    assert status == 1
    assert "position 2" in err

def test_bad_arguments(capsys):
    status, out, err = run(capsys, "1", "+")
    assert status == 1
    assert "got 2 arguments" in err
    status, out, err = run(capsys, "1", "**", "2")
    assert status == 1
    assert "unknown operator '**'" in err

def test_options_are_scoped_to_one_run(capsys):
    old = get_config()
    status, out, err = run(capsys, "--check-limbs", "--multiply=plain",
                           "--log", "99", "*", "99")
    assert status == 0
    assert out == "9801\n"
    assert get_config() is old
    assert not get_config().bigint.log

def test_process_options():
    args, config = process_options(["--multiply", "plain", "--", "-1"])
    assert args == ["-1"]
    assert config.bigint.multiply == "plain"

def test_bad_option():
    with pytest.raises(SystemExit):
        main(["--multiply=fast", "1"])
