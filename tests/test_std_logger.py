"""Tests for the console backend"""

import io
import re
import threading

import pytest

from slog_module.backends.std_logger import StdLogger, new_std_logger
from slog_module.core.errors import LoggerPanic
from slog_module.core.level import Level
from slog_module.core.logger_config import ConsoleConfig
from slog_module.core.options import Options


def plain_logger(level=Level.TRACE, sink=None):
    sink = sink if sink is not None else io.StringIO()
    logger = new_std_logger(sink, level, Options(disable_color=True, timestamp_format="TS"))
    return logger, sink


class FailingSink:
    def write(self, data):
        raise OSError("disk full")


class Exploding:
    def __str__(self):
        raise AssertionError("formatted")


class Counted:
    def __init__(self):
        self.calls = 0

    def __str__(self):
        self.calls += 1
        return "counted"


class TestStdLoggerOutput:
    """Test line layout."""

    def test_plain_line(self):
        logger, sink = plain_logger()
        logger.info("hello")
        assert sink.getvalue() == "INFOO [TS] hello\n"

    def test_labels(self):
        logger, sink = plain_logger()
        logger.trace("t")
        logger.debug("d")
        logger.warn("w")
        logger.error("e")
        assert sink.getvalue().splitlines() == [
            "TRACE [TS] t",
            "DEBUG [TS] d",
            "WARNN [TS] w",
            "ERROR [TS] e",
        ]

    def test_print_routes_to_info(self):
        logger, sink = plain_logger()
        logger.print("p")
        logger.printf("%s!", "pf")
        assert sink.getvalue() == "INFOO [TS] p\nINFOO [TS] pf!\n"

    def test_operands(self):
        logger, sink = plain_logger()
        logger.info("count:", 1, 2)
        assert sink.getvalue() == "INFOO [TS] count:1 2\n"

    def test_ln_is_not_doubled(self):
        logger, sink = plain_logger()
        logger.infoln("a", 1)
        assert sink.getvalue() == "INFOO [TS] a 1\n"

    def test_printf(self):
        logger, sink = plain_logger()
        logger.warnf("%d of %s", 3, "five")
        assert sink.getvalue() == "WARNN [TS] 3 of five\n"

    def test_keyed(self):
        logger, sink = plain_logger()
        logger.infow("saved", "id", 7, "name", "bob")
        assert sink.getvalue() == 'INFOO [TS] saved\tid=7 name="bob"\n'

    def test_keyed_malformed(self):
        logger, sink = plain_logger()
        logger.errorw("odd", None, 1, "x")
        assert sink.getvalue() == 'ERROR [TS] odd\t@logfield-01=1 @logfield-02="x"\n'

    def test_keyed_named_fields(self):
        logger, sink = plain_logger()
        logger.debugw("req", "path", "/", status=200)
        assert sink.getvalue() == 'DEBUG [TS] req\tpath="/" status=200\n'

    def test_keyed_without_fields(self):
        logger, sink = plain_logger()
        logger.infow("bare")
        assert sink.getvalue() == "INFOO [TS] bare\t\n"

    def test_default_timestamp(self):
        sink = io.StringIO()
        new_std_logger(sink, Level.INFO, Options(disable_color=True)).info("x")
        assert re.match(r"^INFOO \[\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} ?\S*\] x\n$", sink.getvalue())

    def test_colored(self):
        sink = io.StringIO()
        logger = StdLogger(sink, Level.INFO, ConsoleConfig(timestamp_format="TS"))
        logger.infow("m", "k", 1)
        assert sink.getvalue() == "\033[32mINFOO \033[0m[TS] m\t\033[32mk\033[0m=1\n"

    def test_binary_sink(self):
        sink = io.BytesIO()
        logger = new_std_logger(sink, Level.INFO, Options(disable_color=True, timestamp_format="TS"))
        logger.info("héllo")
        assert sink.getvalue() == "INFOO [TS] héllo\n".encode("utf-8")

    def test_writer_error_is_reported(self, capsys):
        logger, _ = plain_logger(sink=FailingSink())
        logger.info("lost")
        assert "Writer error: disk full" in capsys.readouterr().err


class TestStdLoggerLevels:
    """Test level filtering."""

    def test_inactive_levels_are_skipped(self):
        logger, sink = plain_logger(Level.WARN)
        logger.info("no")
        logger.debugw("no", "a", 1)
        logger.error("yes")
        assert sink.getvalue() == "ERROR [TS] yes\n"

    def test_inactive_calls_do_not_format(self):
        logger, sink = plain_logger(Level.INFO)
        logger.debugf("%s and %s", "only-one")
        logger.debugw("m", "k", Exploding())
        logger.trace(Exploding())
        assert sink.getvalue() == ""

    def test_active_keyed_call_formats_values_once(self):
        logger, sink = plain_logger(Level.INFO)
        value = Counted()
        logger.infow("m", "k", value)
        assert value.calls == 1
        assert sink.getvalue() == 'INFOO [TS] m\tk="counted"\n'

    def test_inactive_fatal_skips_formatting(self):
        logger, _ = plain_logger(Level(0))
        with pytest.raises(SystemExit):
            logger.fatalw("m", "k", Exploding())

    def test_set_level(self):
        logger, sink = plain_logger(Level.TRACE)
        logger.set_level(Level.ERROR)
        logger.warn("no")
        assert sink.getvalue() == ""
        assert logger.has_level(Level.FATAL)
        assert not logger.has_level(Level.WARN)

    def test_debug_threshold(self):
        logger, _ = plain_logger(Level.DEBUG)
        assert logger.has_level(Level.INFO)
        assert logger.has_level(Level.DEBUG)
        assert not logger.has_level(Level.TRACE)


class TestStdLoggerTermination:
    """Test fatal and panic calls."""

    def test_fatal_writes_one_line_then_exits(self):
        logger, sink = plain_logger(Level.ERROR)
        with pytest.raises(SystemExit) as exc_info:
            logger.fatal("boom")
        assert exc_info.value.code == 1
        assert sink.getvalue() == "FATAL [TS] boom\n"

    def test_fatalw_exits(self):
        logger, sink = plain_logger()
        with pytest.raises(SystemExit):
            logger.fatalw("boom", "code", 3)
        assert sink.getvalue().count("\n") == 1

    def test_fatal_exits_when_inactive(self):
        logger, sink = plain_logger(Level(0))
        with pytest.raises(SystemExit):
            logger.fatalf("%s", "boom")
        assert sink.getvalue() == ""

    def test_panic_raises_with_message(self):
        logger, sink = plain_logger()
        with pytest.raises(LoggerPanic) as exc_info:
            logger.panic("bad", "state")
        assert exc_info.value.message == "badstate"
        assert sink.getvalue() == "PANIC [TS] badstate\n"

    def test_panicw_message(self):
        logger, _ = plain_logger()
        with pytest.raises(LoggerPanic) as exc_info:
            logger.panicw("bad", "id", 1, "who", "me")
        assert exc_info.value.message == 'bad id=1 who="me"'

    def test_panic_can_be_recovered(self):
        logger, sink = plain_logger()
        try:
            logger.panicln("x")
        except LoggerPanic:
            logger.info("recovered")
        assert sink.getvalue().endswith("INFOO [TS] recovered\n")


class TestStdLoggerConcurrency:
    """Test concurrent writers."""

    def test_lines_are_not_interleaved(self):
        logger, sink = plain_logger()

        def worker(idx):
            for n in range(50):
                logger.infow("msg", "worker", idx, "n", n)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = sink.getvalue().splitlines()
        assert len(lines) == 400
        pattern = re.compile(r"^INFOO \[TS\] msg\tworker=\d n=\d+$")
        assert all(pattern.match(line) for line in lines)
