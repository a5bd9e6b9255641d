"""limbint calculator usage:

limbint <options> [--] OPERAND [OPERATOR OPERAND]

run with --help for more information
"""

import sys

from limbint.main import main

sys.exit(main())
