"""
Colored console logging: AnsiLogger for direct messages from the
command line, AnsiLog as the py.log consumer of the engine's traces.
"""

import sys
from py.io import ansi_print


# keyword: (ansi color codes, keyword hidden from the '[...]' prefix)
KW_TO_COLOR = {
    'red': ((31,), True),
    'bold': ((1,), True),
    'event': ((1,), True),
    'WARNING': ((31,), False),
    'ERROR': ((1, 31), False),
    'info': ((35,), False),
    # engine traces
    'divide': ((36,), False),
    'parse': ((32,), False),
    'format': ((32,), False),
}


def _isatty(file):
    if file is None:
        file = sys.stderr
    return getattr(file, 'isatty', lambda: False)()


class AnsiLogger(object):
    """Prints '[name:LEVEL] text' lines, to stderr unless 'file' is given."""

    def __init__(self, name, file=None):
        self.name = name
        self.file = file

    def _make_method(keyword):
        colors, hidden = KW_TO_COLOR.get(keyword, ((), True))
        if hidden:
            subname = ''
        else:
            subname = ':' + keyword
        #
        def logger_method(self, text):
            text = "[%s%s] %s" % (self.name, subname, text)
            if _isatty(self.file):
                ansi_print(text, colors, file=self.file)
            else:
                ansi_print(text, (), file=self.file)
        #
        return logger_method

    event    = _make_method('event')
    WARNING  = _make_method('WARNING')
    ERROR    = _make_method('ERROR')
    info     = _make_method('info')
    __call__ = _make_method(None)

    del _make_method


class AnsiLog:
    KW_TO_COLOR = KW_TO_COLOR

    def __init__(self, kw_to_color=None, file=None):
        self.kw_to_color = self.KW_TO_COLOR.copy()
        if kw_to_color is not None:
            self.kw_to_color.update(kw_to_color)
        self.file = file

    def __call__(self, msg):
        keywords = []
        esc = []
        for kw in msg.keywords:
            color, hidden = self.kw_to_color.get(kw, (None, False))
            if color and _isatty(self.file):
                esc.extend(color)
            if not hidden:
                keywords.append(kw)
        prefix = "[%s] " % (":".join(keywords),)
        for line in msg.content().splitlines():
            ansi_print(prefix + line, tuple(esc), file=self.file)

ansi_log = AnsiLog()
