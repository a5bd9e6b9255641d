from io import StringIO

import py

from limbint.tool.ansi_print import AnsiLogger, AnsiLog


class FakeMessage(object):
    def __init__(self, keywords, text):
        self.keywords = keywords
        self.text = text

    def content(self):
        return self.text


class TtyStringIO(StringIO):
    def isatty(self):
        return True


def test_logger_plain():
    f = StringIO()
    log = AnsiLogger("limbint", file=f)
    log("hello")
    log.ERROR("division by zero")
    log.info("x")
    assert f.getvalue() == ("[limbint] hello\n"
                            "[limbint:ERROR] division by zero\n"
                            "[limbint:info] x\n")

def test_logger_colors_on_tty():
    f = TtyStringIO()
    log = AnsiLogger("limbint", file=f)
    log.WARNING("careful")
    out = f.getvalue()
    assert out.startswith("\x1b[31m[limbint:WARNING] careful")
    assert "\x1b[0m" in out

def test_logger_defaults_to_stderr(capsys):
    AnsiLogger("limbint").event("started")
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "[limbint] started\n"

def test_ansilog_lines():
    f = StringIO()
    consumer = AnsiLog(file=f)
    consumer(FakeMessage(("rbigint", "divide"), "one\ntwo"))
    assert f.getvalue() == "[rbigint:divide] one\n[rbigint:divide] two\n"

def test_ansilog_suppressed_keywords():
    f = StringIO()
    consumer = AnsiLog({"rbigint": ((33,), True)}, file=f)
    consumer(FakeMessage(("rbigint", "parse"), "12 digits"))
    consumer(FakeMessage(("rbigint", "bold"), "shown"))
    assert f.getvalue() == "[parse] 12 digits\n[] shown\n"

def test_ansilog_does_not_share_colors():
    AnsiLog({"parse": ((34,), True)})
    assert AnsiLog.KW_TO_COLOR["parse"] == ((32,), False)

def test_ansilog_as_py_log_consumer():
    f = StringIO()
    producer = py.log.Producer("limbinttest")
    py.log.setconsumer("limbinttest", AnsiLog(file=f))
    try:
        producer.format("3 chunks")
    finally:
        py.log.setconsumer("limbinttest", None)
    assert f.getvalue() == "[limbinttest:format] 3 chunks\n"

def test_logger_levels():
    for name in ["event", "WARNING", "ERROR", "info"]:
        assert callable(getattr(AnsiLogger, name))
    for name in ["red", "bold", "Error", "_make_method"]:
        assert not hasattr(AnsiLogger, name)

def test_ansilog_default_table_is_private():
    first = AnsiLog()
    first.kw_to_color["parse"] = ((34,), True)
    second = AnsiLog()
    assert second.kw_to_color["parse"] == ((32,), False)
    f = StringIO()
    AnsiLog(file=f)(FakeMessage(("rbigint", "parse"), "9 digits"))
    assert f.getvalue() == "[rbigint:parse] 9 digits\n"
