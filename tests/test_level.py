"""Tests for log level flags"""

import itertools

import pytest

from slog_module.core.level import (
    Level,
    cumulative_level,
    fixed_label,
    format_level,
    levels,
    levels_count,
    parse_level,
)


class TestLevelFlags:
    """Test flag operations."""

    def test_canonical_order(self):
        assert levels() == (
            Level.PANIC,
            Level.FATAL,
            Level.ERROR,
            Level.WARN,
            Level.INFO,
            Level.DEBUG,
            Level.TRACE,
        )
        assert levels_count() == 7

    def test_single_bits(self):
        for lv in levels():
            assert bin(int(lv)).count("1") == 1

    def test_all_is_union(self):
        union = Level(0)
        for lv in levels():
            union = union.set(lv)
        assert union == Level.ALL
        assert int(Level.ALL) == 127

    def test_set_then_has(self):
        for lv in levels():
            value = Level(0).set(lv)
            assert value.has(lv)
            for other in levels():
                if other != lv:
                    assert not value.has(other)

    def test_has_combined_flag(self):
        value = Level.ERROR | Level.WARN
        assert value.has(Level.ERROR)
        assert value.has(Level.WARN)
        assert value.has(Level.ERROR | Level.WARN)
        assert not value.has(Level.INFO)

    def test_clear(self):
        value = (Level.ERROR | Level.WARN).clear(Level.WARN)
        assert value == Level.ERROR
        assert Level.ALL.clear(Level.ALL) == 0

    def test_toggle(self):
        value = Level.ERROR.toggle(Level.WARN)
        assert value == Level.ERROR | Level.WARN
        assert value.toggle(Level.ERROR) == Level.WARN

    def test_mutators_return_new_values(self):
        value = Level.INFO
        value.set(Level.DEBUG)
        assert value == Level.INFO


class TestParseAndFormat:
    """Test string conversion."""

    def test_parse_single(self):
        assert parse_level("debug") == Level.DEBUG
        assert parse_level("WARN") == Level.WARN
        assert Level.from_string("trace") == Level.TRACE

    def test_parse_all(self):
        assert parse_level("all") == Level.ALL

    def test_parse_combined(self):
        assert parse_level("error|warn") == Level.ERROR | Level.WARN

    def test_parse_skips_unknown_tokens(self):
        assert parse_level("bogus|info") == Level.INFO

    def test_parse_rejects_padded_names(self):
        with pytest.raises(ValueError):
            parse_level("debug | info")
        assert parse_level("debug | info|warn") == Level.WARN

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="unknown level"):
            parse_level("verbose")
        with pytest.raises(ValueError):
            parse_level("")

    def test_format_single(self):
        assert format_level(Level.DEBUG) == "debug"
        assert Level.INFO.to_string() == "info"

    def test_format_canonical_order(self):
        assert format_level(Level.TRACE | Level.PANIC | Level.WARN) == "panic|warn|trace"
        assert format_level(Level.ALL) == "panic|fatal|error|warn|info|debug|trace"

    def test_format_zero(self):
        with pytest.raises(ValueError):
            format_level(Level(0))

    def test_str(self):
        assert str(Level.ERROR | Level.FATAL) == "fatal|error"
        assert str(Level(0)) == "unknown"

    def test_round_trip(self):
        for size in range(1, levels_count() + 1):
            for combo in itertools.combinations(levels(), size):
                value = Level(0)
                for lv in combo:
                    value = value.set(lv)
                assert parse_level(format_level(value)) == value


class TestFixedLabel:
    """Test fixed width labels."""

    def test_canonical_labels(self):
        assert fixed_label(Level.PANIC) == "PANIC"
        assert fixed_label(Level.WARN) == "WARNN"
        assert fixed_label(Level.INFO) == "INFOO"
        assert Level.TRACE.fixed_label == "TRACE"

    def test_labels_have_fixed_width(self):
        for lv in levels():
            assert len(fixed_label(lv)) == 5

    def test_other(self):
        assert fixed_label(Level(0)) == "OTHER"
        assert fixed_label(Level.ERROR | Level.WARN) == "OTHER"
        assert fixed_label(Level.ALL) == "OTHER"
        assert fixed_label(128) == "OTHER"


class TestCumulativeLevel:
    """Test threshold expansion."""

    def test_debug(self):
        value = cumulative_level(Level.DEBUG)
        for lv in (Level.PANIC, Level.FATAL, Level.ERROR, Level.WARN, Level.INFO, Level.DEBUG):
            assert value.has(lv)
        assert not value.has(Level.TRACE)

    def test_panic_only(self):
        assert cumulative_level(Level.PANIC) == Level.PANIC

    def test_most_verbose_bit_wins(self):
        assert cumulative_level(Level.ERROR | Level.TRACE) == Level.ALL

    def test_empty(self):
        assert cumulative_level(Level(0)) == 0
        assert not cumulative_level(Level(0)).has(Level.PANIC)

    def test_unknown_bits(self):
        assert cumulative_level(128) == 0
        assert cumulative_level(128 | int(Level.WARN)) == Level.PANIC | Level.FATAL | Level.ERROR | Level.WARN

    def test_color_codes(self):
        assert Level.INFO.color_code == "\033[32m"
        assert Level.INFO.reset_code == "\033[0m"
