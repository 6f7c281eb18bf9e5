import pytest
from hypothesis import given, strategies as st

from fsshell.grep import (
    GrepOptions,
    GrepUsageError,
    grep_text,
    parse_grep_args,
)

TEXT = "hello world\nfoo bar\nHello again\nbaz\n"


def test_parse_basic_pattern_and_file():
    opts = parse_grep_args(["hello", "a.txt"])
    assert opts.pattern == "hello"
    assert opts.files == ["a.txt"]
    assert not opts.ignore_case


def test_parse_combined_short_flags():
    opts = parse_grep_args(["-in", "hello", "a.txt"])
    assert opts.ignore_case and opts.line_number
    assert not opts.invert_match


def test_parse_long_flags():
    opts = parse_grep_args(["--count", "--no-filename", "x", "a", "b"])
    assert opts.count_only and opts.no_filename
    assert opts.files == ["a", "b"]


def test_unknown_long_option_is_pattern():
    opts = parse_grep_args(["--weird", "a.txt"])
    assert opts.pattern == "--weird"


def test_help_flag():
    assert parse_grep_args(["x", "--help"]).show_help is True


def test_empty_argv_raises():
    with pytest.raises(GrepUsageError, match="missing pattern"):
        parse_grep_args([])


def test_invalid_short_option():
    with pytest.raises(GrepUsageError, match="invalid option -- 'z'"):
        parse_grep_args(["-iz", "x", "a"])


def test_only_flags_means_missing_pattern():
    with pytest.raises(GrepUsageError, match="missing pattern"):
        parse_grep_args(["-i"])


def test_no_files():
    with pytest.raises(GrepUsageError, match="no files specified"):
        parse_grep_args(["hello"])


def test_show_filename_rules():
    assert GrepOptions(files=["a", "b"]).show_filename() is True
    assert GrepOptions(files=["a"]).show_filename() is False
    assert GrepOptions(files=["a"], with_filename=True).show_filename() is True
    assert GrepOptions(files=["a", "b"], no_filename=True).show_filename() is False


def test_plain_match():
    opts = parse_grep_args(["hello", "f"])
    assert grep_text(TEXT, opts, "f", False) == ["hello world"]


def test_ignore_case_with_line_numbers_and_filename():
    opts = parse_grep_args(["-in", "HELLO", "f"])
    assert grep_text(TEXT, opts, "f", True) == [
        "f:1:hello world",
        "f:3:Hello again",
    ]


def test_invert_match():
    opts = parse_grep_args(["-v", "o", "f"])
    assert grep_text(TEXT, opts, "f", False) == ["baz"]


def test_count_only():
    opts = parse_grep_args(["-ic", "hello", "f"])
    assert grep_text(TEXT, opts, "f", False) == ["2"]
    assert grep_text(TEXT, opts, "f", True) == ["f:2"]


def test_files_with_matches():
    opts = parse_grep_args(["-l", "baz", "f"])
    assert grep_text(TEXT, opts, "f", False) == ["f"]
    opts = parse_grep_args(["-l", "nothing", "f"])
    assert grep_text(TEXT, opts, "f", False) == []


def test_crlf_lines_are_trimmed():
    opts = parse_grep_args(["a", "f"])
    assert grep_text("a1\r\nb\r\na2", opts, "f", False) == ["a1", "a2"]