"""
Tests for record formatting: levels, extras and line assembly.
"""

import json

import pytest
from datetime import datetime, timedelta, timezone

from bunyan_view.formatting import (
    RecordFormatter,
    Style,
    format_extras,
    format_level,
    format_record,
    paint,
    stringify,
)
from bunyan_view.formatting.extras import classify_extras, indent
from bunyan_view.parsers import decode


SIMPLE_LINE = (
    '{"v":0,"level":30,"name":"myservice","hostname":"example.com","pid":123,'
    '"time":"2012-02-08T22:56:52.856Z","msg":"My message"}'
)

BOLD = "\x1b[1m"
RESET = "\x1b[0m"


def record_with(**fields):
    """Helper to decode the simple record with extra or replaced fields."""
    data = json.loads(SIMPLE_LINE)
    data.update(fields)
    return decode(data)


class TestPaint:
    """Tests for ANSI styling."""
    
    def test_disabled_returns_text(self):
        assert paint("hello", Style.RED, False) == "hello"
    
    def test_enabled_wraps_text(self):
        assert paint("hello", Style.RED, True) == "\x1b[31mhello\x1b[0m"
        assert paint("x", Style.GRAY, True) == "\x1b[38;2;128;128;128mx\x1b[0m"


class TestFormatLevel:
    """Tests for level labels."""
    
    @pytest.mark.parametrize("level,label", [
        (60, "FATAL"),
        (50, "ERROR"),
        (40, " WARN"),
        (30, " INFO"),
        (20, "DEBUG"),
        (10, "TRACE"),
    ])
    def test_known_levels_plain(self, level, label):
        assert format_level(level) == label
    
    @pytest.mark.parametrize("level,code", [
        (60, "7"),
        (50, "31"),
        (40, "33"),
        (30, "32"),
        (20, "34"),
        (10, "38;2;128;128;128"),
    ])
    def test_known_levels_colored(self, level, code):
        colored = format_level(level, use_color=True)
        assert colored == f"\x1b[{code}m{format_level(level)}\x1b[0m"
    
    @pytest.mark.parametrize("use_color", [False, True])
    def test_unknown_level_never_colored(self, use_color):
        assert format_level(35, use_color) == "LVL35"
        assert format_level(0, use_color) == "LVL0"
        assert format_level(255, use_color) == "LVL255"


class TestStringify:
    """Tests for extra value stringification."""
    
    def test_plain_string_unquoted(self):
        assert stringify("abc") == "abc"
    
    def test_empty_string_quoted(self):
        assert stringify("") == '""'
    
    def test_string_with_space_quoted(self):
        assert stringify("hello world") == '"hello world"'
    
    def test_numbers_booleans_null(self):
        assert stringify(5) == "5"
        assert stringify(0.5) == "0.5"
        assert stringify(True) == "true"
        assert stringify(None) == "null"
    
    def test_containers_pretty_printed(self):
        assert stringify({}) == "{}"
        assert stringify([]) == "[]"
        assert stringify({"a": 1}) == '{\n  "a": 1\n}'
        assert stringify([1, 2]) == "[\n  1,\n  2\n]"
    
    def test_non_ascii_kept(self):
        assert stringify({"k": "é"}) == '{\n  "k": "é"\n}'


class TestIndent:
    
    def test_every_line_indented(self):
        assert indent("a\nb") == "    a\n    b"
    
    def test_trailing_newline_dropped(self):
        assert indent("a\n") == "    a"


class TestFormatExtras:
    """Tests for inline/detail classification and rendering."""
    
    def test_no_extras(self):
        assert format_extras({}) == "\n"
    
    def test_single_inline(self):
        assert format_extras({"count": 5}) == " (count=5)\n"
    
    def test_inline_boundary_fifty_characters(self):
        value = "a" * 50
        assert format_extras({"k": value}) == f" (k={value})\n"
    
    def test_detail_boundary_fifty_one_characters(self):
        value = "a" * 51
        assert format_extras({"k": value}) == f"\n    k: {value}\n"
    
    def test_length_counted_in_utf8_bytes(self):
        fifty_bytes = "é" * 25
        fifty_one_bytes = "é" * 25 + "a"
        assert format_extras({"k": fifty_bytes}) == f" (k={fifty_bytes})\n"
        assert format_extras({"k": fifty_one_bytes}) == f"\n    k: {fifty_one_bytes}\n"
    
    def test_two_byte_characters_count_double(self):
        value = "é" * 30  # 30 characters, 60 bytes
        inline, details = classify_extras({"k": value})
        assert inline == []
        assert details == [("k", value)]
    
    def test_quotes_count_towards_length(self):
        value = "a b" + "c" * 46  # 49 chars, 51 once quoted
        inline, details = classify_extras({"k": value})
        assert inline == []
        assert details == [("k", value)]
    
    def test_long_string_detail_is_unquoted(self):
        value = "this is a rather long sentence that will not fit inline at all"
        assert format_extras({"note": value}) == f"\n    note: {value}\n"
    
    def test_multiline_json_detail(self):
        expected = '\n    obj: {\n      "a": 1\n    }\n'
        assert format_extras({"obj": {"a": 1}}) == expected
    
    def test_multiline_string_detail(self):
        assert format_extras({"stack": "Error\nat foo"}) == "\n    stack: Error\n    at foo\n"
    
    def test_multiple_details_separated(self):
        extras = {"a": [1], "b": [2]}
        expected = (
            "\n"
            "    a: [\n"
            "      1\n"
            "    ]\n"
            "    --\n"
            "    b: [\n"
            "      2\n"
            "    ]\n"
        )
        assert format_extras(extras) == expected
    
    def test_inline_and_detail_together(self):
        extras = {"count": 5, "obj": {"a": 1}, "req_id": "abc"}
        expected = ' (count=5,req_id=abc)\n    obj: {\n      "a": 1\n    }\n'
        assert format_extras(extras) == expected
    
    def test_quoting_inline(self):
        assert format_extras({"a": ""}) == ' (a="")\n'
        assert format_extras({"a": "x y"}) == ' (a="x y")\n'
    
    def test_keys_bold_when_colored(self):
        assert format_extras({"count": 5}, use_color=True) == f" ({BOLD}count{RESET}=5)\n"
        assert format_extras({"stack": "a\nb"}, use_color=True) == f"\n    {BOLD}stack{RESET}: a\n    b\n"
    
    def test_color_does_not_change_classification(self):
        # a key long enough to push the styled text past 50 characters
        extras = {"k" * 40: "v" * 10}
        plain = format_extras(extras)
        colored = format_extras(extras, use_color=True)
        assert plain.startswith(" (")
        assert colored.replace(BOLD, "").replace(RESET, "") == plain


class TestRecordFormatter:
    """Tests for full line assembly."""
    
    def setup_method(self):
        self.formatter = RecordFormatter(use_color=False, tz=timezone.utc)
    
    def test_simple_log(self):
        output = self.formatter.format(decode(SIMPLE_LINE))
        assert output == "[2012-02-08T22:56:52.856Z]  INFO: myservice/123 on example.com: My message\n"
    
    def test_simple_log_with_color(self):
        output = format_record(decode(SIMPLE_LINE), use_color=True, tz=timezone.utc)
        assert output == (
            "[2012-02-08T22:56:52.856Z] \x1b[32m INFO\x1b[0m: "
            "myservice/123 on example.com: \x1b[36mMy message\x1b[0m\n"
        )
    
    def test_color_only_changes_styling(self):
        record = record_with(count=5, obj={"a": [1, 2]})
        plain = format_record(record, use_color=False, tz=timezone.utc)
        colored = format_record(record, use_color=True, tz=timezone.utc)
        stripped = colored
        for code in ("\x1b[32m", "\x1b[36m", BOLD, RESET):
            stripped = stripped.replace(code, "")
        assert stripped == plain
    
    def test_formatting_is_idempotent(self):
        record = record_with(count=5, obj={"a": [1, 2]}, note="some words here")
        assert self.formatter.format(record) == self.formatter.format(record)
    
    def test_inline_extras_follow_message(self):
        output = self.formatter.format(record_with(count=5))
        assert output == "[2012-02-08T22:56:52.856Z]  INFO: myservice/123 on example.com: My message (count=5)\n"
    
    def test_detail_extras_below_line(self):
        output = self.formatter.format(record_with(obj={"a": 1}))
        assert output == (
            "[2012-02-08T22:56:52.856Z]  INFO: myservice/123 on example.com: My message\n"
            "    obj: {\n"
            '      "a": 1\n'
            "    }\n"
        )
    
    def test_unknown_level(self):
        output = self.formatter.format(record_with(level=35))
        assert output.startswith("[2012-02-08T22:56:52.856Z] LVL35: myservice/123")
    
    def test_epoch_millis_rendered_at_millisecond_precision(self):
        output = self.formatter.format(record_with(time=1328741812857))
        assert output.startswith("[2012-02-08T22:56:52.857Z]")
    
    def test_sub_millisecond_fraction_truncated(self):
        output = self.formatter.format(record_with(time="2012-02-08T22:56:52.856999Z"))
        assert output.startswith("[2012-02-08T22:56:52.856Z]")
    
    def test_display_timezone_offset(self):
        formatter = RecordFormatter(tz=timezone(timedelta(hours=2)))
        output = formatter.format(decode(SIMPLE_LINE))
        assert output.startswith("[2012-02-09T00:56:52.856+02:00]")
    
    def test_local_timezone_by_default(self):
        record = decode(SIMPLE_LINE)
        expected = record.timestamp.astimezone().isoformat(timespec="milliseconds")
        expected = expected.replace("+00:00", "Z")
        assert RecordFormatter().format_timestamp(record.timestamp) == expected


class TestFormatSource:
    """Tests for the name/pid/hostname segment."""
    
    def format_source(self, **fields):
        data = {"level": 30, "time": 0, "msg": "m"}
        data.update(fields)
        return RecordFormatter.format_source(decode(data))
    
    def test_all_present(self):
        assert self.format_source(name="svc", pid=7, hostname="host") == "svc/7 on host"
    
    def test_missing_hostname(self):
        assert self.format_source(name="svc", pid=7) == "svc/7"
    
    def test_missing_name(self):
        assert self.format_source(pid=7, hostname="host") == "7 on host"
    
    def test_missing_pid_shows_zero(self):
        assert self.format_source(name="svc", hostname="host") == "svc/0 on host"
    
    def test_nothing_present(self):
        assert self.format_source() == "0"
