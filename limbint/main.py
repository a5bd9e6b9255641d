"""limbint calculator usage:

limbint <options> [--] OPERAND [OPERATOR OPERAND]

Operands are decimal integers of any size.  Put '--' before the
arguments when the first operand is negative.
"""

import operator

from limbint.config.bigintoption import get_bigint_config
from limbint.config.config import to_optparse
from limbint.rlib.rbigint import rbigint, DivisionByZero
from limbint.rlib.rbigint import get_config, set_config
from limbint.tool.ansi_print import AnsiLogger

log = AnsiLogger("limbint")

OPERATORS = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '//': operator.floordiv,
    '%': operator.mod,
    '&': operator.and_,
    '|': operator.or_,
    '^': operator.xor,
    '<<': operator.lshift,
    '>>': operator.rshift,
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
}


def process_options(argv=None):
    config = get_bigint_config()
    parser = to_optparse(config, parserkwargs={"usage": __doc__})
    parser.disable_interspersed_args()
    options, args = parser.parse_args(argv)
    return args, config

def compute(args):
    if len(args) == 1:
        return rbigint.fromdecimalstr(args[0])
    if len(args) != 3:
        raise ValueError("expected OPERAND [OPERATOR OPERAND], got %d "
                         "arguments" % (len(args),))
    left, opname, right = args
    op = OPERATORS.get(opname)
    if op is None:
        raise ValueError("unknown operator %r" % (opname,))
    a = rbigint.fromdecimalstr(left)
    b = rbigint.fromdecimalstr(right)
    return op(a, b)

def main(argv=None):
    args, config = process_options(argv)
    oldconfig = get_config()
    set_config(config)
    try:
        result = compute(args)
    except (DivisionByZero, ValueError) as e:
        log.ERROR(e)
        return 1
    finally:
        set_config(oldconfig)
    print(result)
    return 0
